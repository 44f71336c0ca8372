"""Core modelprint library exports."""

from modelprint.lib.config.settings import PrinterOptions
from modelprint.lib.printer import UNDEFINED, Printer
from modelprint.lib.registry import RendererRegistry

__all__ = ["UNDEFINED", "Printer", "PrinterOptions", "RendererRegistry"]
