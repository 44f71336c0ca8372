"""Streaming, cycle-safe pretty printer for program models and plain data."""

from modelprint.lib.config.settings import PrinterOptions, load_config
from modelprint.lib.printer import UNDEFINED, Printer
from modelprint.lib.registry import RendererRegistry
from modelprint.lib.sinks import StringSink

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Printer",
    "PrinterOptions",
    "RendererRegistry",
    "StringSink",
    "__version__",
    "load_config",
]
