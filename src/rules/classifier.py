"""Decide whether the statement before a `return <identifier>` is redundant."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from analyzer import ScopeResolver

from .diagnostics import Diagnostic, DiagnosticKind, RuleError

logger = logging.getLogger(__name__)


def is_identifier(node: Any) -> bool:
    return isinstance(node, dict) and node.get("type") == "Identifier"


def assignment_target(statement: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the target of a plain `name = value;` statement, else None."""
    if statement.get("type") != "ExpressionStatement":
        return None
    expression = statement.get("expression") or {}
    if expression.get("type") != "AssignmentExpression":
        return None
    if expression.get("operator") != "=":
        return None
    target = expression.get("left")
    return target if is_identifier(target) else None


def classify(
    return_stmt: Dict[str, Any],
    predecessor: Optional[Dict[str, Any]],
    resolver: ScopeResolver,
) -> Optional[Diagnostic]:
    """
    Classify the predecessor of a `return` whose argument is a bare identifier.

    Returns a `RedundantVariable` diagnostic when the predecessor declares the
    returned name last, a `RedundantAssignment` diagnostic when it assigns the
    returned name and the name is local to the returning function, and None
    otherwise.

    Raises:
        RuleError: If the return argument is not an Identifier.
    """
    argument = return_stmt.get("argument")
    if not is_identifier(argument):
        raise RuleError("Expected a return of a bare identifier.", return_stmt)
    if predecessor is None:
        return None
    name = argument.get("name")

    if predecessor.get("type") == "VariableDeclaration":
        declarators = predecessor.get("declarations") or []
        if not declarators:
            return None
        last = declarators[-1]
        target = last.get("id")
        if not is_identifier(target) or target.get("name") != name:
            return None
        binding = resolver.resolve(name, predecessor)
        logger.debug("declaration of %r before return resolves %s", name, binding.state.value)
        return Diagnostic.at(DiagnosticKind.REDUNDANT_VARIABLE, last)

    target = assignment_target(predecessor)
    if target is None or target.get("name") != name:
        return None
    binding = resolver.resolve(name, predecessor)
    if not binding.is_local:
        # Outer and global names may be read after the function returns.
        logger.debug("assignment to %r skipped: binding is %s", name, binding.state.value)
        return None
    return Diagnostic.at(DiagnosticKind.REDUNDANT_ASSIGNMENT, target)


__all__ = ["assignment_target", "classify", "is_identifier"]
