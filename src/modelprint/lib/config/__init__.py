"""Configuration loading."""

from modelprint.lib.config.settings import (
    PrinterOptions,
    load_config,
    normalize_options,
    options_from_mapping,
)

__all__ = ["PrinterOptions", "load_config", "normalize_options", "options_from_mapping"]
