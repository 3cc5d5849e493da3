"""
The `no-redundant-assign` rule: driver tying the locator and classifier together.

For every `return <identifier>;` in a program the rule finds the statement that
runs immediately before it and asks the classifier whether that statement only
exists to hold the returned value. Each return is checked on its own; the rule
keeps no state between returns beyond the diagnostics it collects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from analyzer import AnalysisResult, NodeIndex, ScopeResolver, analyze_bindings

from .classifier import classify, is_identifier
from .diagnostics import Diagnostic, RuleError
from .locator import find_predecessor

logger = logging.getLogger(__name__)

RULE_NAME = "no-redundant-assign"


@dataclass(frozen=True)
class RuleContext:
    """Read-only inputs shared by every return checked in one program."""

    source_name: str
    index: NodeIndex
    resolver: ScopeResolver


@dataclass(frozen=True)
class CheckResult:
    source_name: str
    diagnostics: List[Diagnostic]


def iter_return_statements(program: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every ReturnStatement in the program in source order."""
    found: List[Dict[str, Any]] = []
    stack = [program]
    while stack:
        node = stack.pop()
        if node.get("type") == "ReturnStatement":
            found.append(node)
        for key, value in node.items():
            if key in {"loc", "range"}:
                continue
            if isinstance(value, dict) and "type" in value:
                stack.append(value)
            elif isinstance(value, list):
                stack.extend(
                    element
                    for element in value
                    if isinstance(element, dict) and "type" in element
                )
    found.sort(key=lambda node: (node.get("range") or [0])[0])
    yield from found


class RedundantAssignRule:
    """Reports variables declared or assigned only to be returned."""

    name = RULE_NAME

    def __init__(self, *, context: RuleContext):
        self.context = context

    def check_return(self, node: Dict[str, Any]) -> Optional[Diagnostic]:
        if node.get("type") != "ReturnStatement":
            raise RuleError("Expected ReturnStatement.", node)
        if not is_identifier(node.get("argument")):
            return None
        predecessor = find_predecessor(node, self.context.index)
        diagnostic = classify(node, predecessor, self.context.resolver)
        if diagnostic is not None:
            logger.debug(
                "%s:%s:%s %s",
                self.context.source_name,
                diagnostic.line,
                diagnostic.column,
                diagnostic.kind.value,
            )
        return diagnostic

    def check_program(self, program: Dict[str, Any]) -> List[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        for node in iter_return_statements(program):
            diagnostic = self.check_return(node)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics


def check_program(
    program: Dict[str, Any],
    *,
    source_name: str = "<input>",
    analysis: Optional[AnalysisResult] = None,
    index: Optional[NodeIndex] = None,
) -> CheckResult:
    """
    Run the rule over a parsed program.

    Args:
        program: esprima-compatible `Program` AST in dictionary form.
        source_name: Label used in diagnostics and log records.
        analysis: Scope analysis of `program`; computed when omitted.
        index: Parent index of `program`; computed when omitted.

    Returns:
        CheckResult holding the diagnostics in source order.
    """
    if not isinstance(program, dict) or program.get("type") != "Program":
        raise RuleError("Expected Program node at the root.", program)
    if analysis is None:
        analysis = analyze_bindings(program, source_name=source_name)
    if index is None:
        index = NodeIndex(program)
    context = RuleContext(
        source_name=source_name,
        index=index,
        resolver=ScopeResolver(analysis, index),
    )
    rule = RedundantAssignRule(context=context)
    diagnostics = rule.check_program(program)
    logger.debug("%s: %d diagnostic(s)", source_name, len(diagnostics))
    return CheckResult(source_name=source_name, diagnostics=diagnostics)


__all__ = [
    "CheckResult",
    "RULE_NAME",
    "RedundantAssignRule",
    "RuleContext",
    "check_program",
    "iter_return_statements",
]
