"""Interfaces for parsing JavaScript source code."""

from .js_parser import SOURCE_TYPES, ParseError, ParseResult, error_from_exception, parse_js

__all__ = ["ParseError", "ParseResult", "SOURCE_TYPES", "error_from_exception", "parse_js"]
