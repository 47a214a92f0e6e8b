"""Formatted text tables with borders, spans, alignment and colours."""

__version__ = "0.1.0"