"""
Front-end integration utilities stitching together parsing, analysis and linting.

`run_frontend` accepts raw JavaScript source, invokes the parser to obtain an
AST and, when requested, builds the scope tree and parent index the rule needs.
`lint_source` goes one step further and runs the `no-redundant-assign` rule,
returning parse errors and diagnostics together so a host can report both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from analyzer import AnalysisResult, NodeIndex, analyze_bindings
from parser import ParseError, ParseResult, parse_js
from rules import Diagnostic, check_program

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontEndResult:
    """Combined output from the parsing and analysis pipeline."""

    parse: ParseResult
    analysis: Optional[AnalysisResult]
    index: Optional[NodeIndex]

    @property
    def has_ast(self) -> bool:
        return self.parse.ast is not None


@dataclass(frozen=True)
class LintResult:
    """Everything a host needs to report on one source text."""

    source_name: str
    parse_errors: List[ParseError]
    diagnostics: List[Diagnostic]

    @property
    def clean(self) -> bool:
        return not self.parse_errors and not self.diagnostics


def run_frontend(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
    analyze: bool = True,
    source_type: str = "script",
) -> FrontEndResult:
    """
    Execute parsing and optional scope analysis for JavaScript input.

    Args:
        source: Raw JavaScript source text.
        source_name: Identifier used in diagnostics, e.g. file path.
        tolerant: Forwarded to parser; when True esprima attempts recovery.
        analyze: Toggle to disable semantic analysis for performance/testing.
        source_type: `"script"` or `"module"` to control parsing of import/export.

    Returns:
        FrontEndResult containing the parser output and, when analysis ran,
        the scope tree and parent index.
    """
    parse_result = parse_js(
        source,
        source_name=source_name,
        tolerant=tolerant,
        source_type=source_type,
    )

    analysis_result: Optional[AnalysisResult] = None
    index: Optional[NodeIndex] = None
    if analyze and parse_result.ast is not None:
        analysis_result = analyze_bindings(parse_result.ast, source_name=source_name)
        index = NodeIndex(parse_result.ast)
    elif parse_result.ast is None:
        logger.warning("%s: parsing failed; skipping analysis", source_name)

    return FrontEndResult(parse=parse_result, analysis=analysis_result, index=index)


def lint_source(
    source: str,
    *,
    source_name: str = "<input>",
    tolerant: bool = True,
    source_type: str = "script",
) -> LintResult:
    """Parse `source` and run the redundant-assignment rule over it."""
    frontend_result = run_frontend(
        source,
        source_name=source_name,
        tolerant=tolerant,
        analyze=True,
        source_type=source_type,
    )
    diagnostics: List[Diagnostic] = []
    if frontend_result.has_ast:
        check_result = check_program(
            frontend_result.parse.ast,
            source_name=source_name,
            analysis=frontend_result.analysis,
            index=frontend_result.index,
        )
        diagnostics = check_result.diagnostics
    return LintResult(
        source_name=source_name,
        parse_errors=list(frontend_result.parse.errors),
        diagnostics=diagnostics,
    )


__all__ = ["FrontEndResult", "LintResult", "lint_source", "run_frontend"]
