"""
JavaScript parsing built on top of the Python `esprima` port.

`parse_js` returns the ESTree AST as plain dictionaries, with `loc` and `range`
metadata enabled so later phases can report 1-based lines and columns. Callers
choose between tolerant parsing (recoverable errors are collected) and strict
parsing (`esprima.Error` propagates), and between script and module source
types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import esprima

SOURCE_TYPES = ("script", "module")


@dataclass(frozen=True)
class ParseError:
    """A parsing problem reported by esprima."""

    description: str
    line: Optional[int]
    column: Optional[int]


@dataclass(frozen=True)
class ParseResult:
    """The AST of one source text plus the errors collected while parsing it."""

    ast: Any
    errors: List[ParseError]
    source_name: str
    source_type: str = "script"

    @property
    def ok(self) -> bool:
        return self.ast is not None and not self.errors


def error_from_exception(exc: Exception) -> ParseError:
    # esprima.Error carries the same fields it writes into tolerant "errors".
    return ParseError(
        description=getattr(exc, "description", None) or str(exc),
        line=getattr(exc, "lineNumber", None),
        column=getattr(exc, "column", None),
    )


def parse_js(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
    source_type: str = "script",
) -> ParseResult:
    """
    Parse JavaScript source text into an esprima AST.

    Args:
        source: Raw JavaScript source code.
        source_name: Label used for diagnostics (defaults to `<input>`).
        tolerant: When True, esprima performs error recovery instead of raising.
        source_type: `"script"` or `"module"`; modules enable import/export.

    Returns:
        ParseResult containing the AST and any recoverable errors. When
        tolerant parsing still fails the AST is `None`.

    Raises:
        esprima.Error: If parsing fails and `tolerant` is False.
        ValueError: For an unknown `source_type`.
    """
    if source_type not in SOURCE_TYPES:
        raise ValueError(f"Unknown source type: {source_type!r}")

    options = dict(loc=True, range=True, tolerant=tolerant)
    parser = esprima.parseModule if source_type == "module" else esprima.parseScript
    try:
        ast = parser(source, **options)
    except esprima.Error as exc:
        if not tolerant:
            raise
        return ParseResult(
            ast=None,
            errors=[error_from_exception(exc)],
            source_name=source_name,
            source_type=source_type,
        )

    raw_ast = ast.toDict() if hasattr(ast, "toDict") else ast
    errors: List[ParseError] = []
    if tolerant and isinstance(raw_ast, dict):
        for error in raw_ast.get("errors") or []:
            if isinstance(error, dict):
                errors.append(
                    ParseError(
                        description=error.get("description"),
                        line=error.get("lineNumber"),
                        column=error.get("column"),
                    )
                )
            else:
                errors.append(error_from_exception(error))

    return ParseResult(
        ast=raw_ast,
        errors=errors,
        source_name=source_name,
        source_type=source_type,
    )


__all__ = ["ParseError", "ParseResult", "SOURCE_TYPES", "error_from_exception", "parse_js"]
