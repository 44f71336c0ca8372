"""Line buffer width accounting."""

from __future__ import annotations

from modelprint.lib.layout.line_buffer import LineBuffer


def test_fresh_line_counts_pending_indentation() -> None:
    buffer = LineBuffer(break_limit=10, indent_size=2)

    assert buffer.column(depth=3) == 6
    assert buffer.fits(3, depth=3)
    assert not buffer.fits(4, depth=3)


def test_fits_keeps_one_column_free() -> None:
    buffer = LineBuffer(break_limit=5, indent_size=2)
    buffer.charge_indent(0)
    buffer.commit(3)

    assert buffer.fits(1, depth=0)
    assert not buffer.fits(2, depth=0)


def test_indent_is_charged_once_per_line() -> None:
    buffer = LineBuffer(break_limit=78, indent_size=4)

    assert buffer.charge_indent(2) == 8
    assert buffer.charge_indent(2) == 0
    assert buffer.line_length == 8
    assert buffer.has_content


def test_reset_starts_a_fresh_line() -> None:
    buffer = LineBuffer(break_limit=78, indent_size=2)
    buffer.charge_indent(1)
    buffer.commit(5)

    buffer.reset()

    assert buffer.line_length == 0
    assert buffer.fresh
    assert buffer.remaining(0) == 78


def test_zero_limit_never_fits() -> None:
    buffer = LineBuffer(break_limit=0, indent_size=2)

    assert not buffer.fits(0, depth=0)
