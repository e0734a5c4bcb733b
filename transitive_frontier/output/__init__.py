"""Report renderers."""

from .formatters import SUPPORTED_FORMATS, render, write_report

__all__ = ["SUPPORTED_FORMATS", "render", "write_report"]
