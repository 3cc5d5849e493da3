"""
Render lint results as text or JSON.

Text output has one line per finding, `path:line:column: message [kind]`,
with parse errors first. JSON output is a list with one object per source
file, suitable for editors and CI tooling.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

from frontend import LintResult

FORMATS = ("text", "json")


def _format_location(line: Optional[int], column: Optional[int]) -> str:
    if line is None:
        return ""
    if column is None:
        return f":{line}"
    return f":{line}:{column}"


def format_text(results: Iterable[LintResult]) -> str:
    lines: List[str] = []
    for result in results:
        for error in result.parse_errors:
            loc = _format_location(error.line, error.column)
            lines.append(f"{result.source_name}{loc}: error: {error.description}")
        for diagnostic in result.diagnostics:
            loc = _format_location(diagnostic.line, diagnostic.column)
            lines.append(
                f"{result.source_name}{loc}: {diagnostic.message} [{diagnostic.kind.value}]"
            )
    return "\n".join(lines) + ("\n" if lines else "")


def _result_to_dict(result: LintResult) -> Dict[str, Any]:
    return {
        "source": result.source_name,
        "errors": [
            {"description": error.description, "line": error.line, "column": error.column}
            for error in result.parse_errors
        ],
        "diagnostics": [diagnostic.to_dict() for diagnostic in result.diagnostics],
    }


def format_json(results: Iterable[LintResult]) -> str:
    payload = [_result_to_dict(result) for result in results]
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def format_report(results: Iterable[LintResult], fmt: str = "text") -> str:
    """Render `results` in the requested output format."""
    if fmt == "text":
        return format_text(results)
    if fmt == "json":
        return format_json(results)
    raise ValueError(f"Unknown report format: {fmt!r}")


__all__ = ["FORMATS", "format_json", "format_report", "format_text"]
