"""Output formatting for lint results."""

from .formatter import FORMATS, format_json, format_report, format_text

__all__ = ["FORMATS", "format_json", "format_report", "format_text"]
