"""Diagnostic records produced by the redundant-assignment rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class DiagnosticKind(str, Enum):
    REDUNDANT_VARIABLE = "RedundantVariable"
    REDUNDANT_ASSIGNMENT = "RedundantAssignment"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    DiagnosticKind.REDUNDANT_VARIABLE: "Redundant variable.",
    DiagnosticKind.REDUNDANT_ASSIGNMENT: "Redundant assignment.",
}


def node_position(node: Optional[Dict[str, Any]]):
    """Return the (line, column) of a node's start as esprima reports it."""
    if not node or not isinstance(node, dict):
        return None, None
    start = (node.get("loc") or {}).get("start") or {}
    return start.get("line"), start.get("column")


class RuleError(RuntimeError):
    """Raised when the rule is invoked on input that breaks its preconditions."""

    def __init__(self, message: str, node: Optional[Dict[str, Any]] = None):
        loc = ""
        line, column = node_position(node)
        if line is not None and column is not None:
            loc = f" (line {line}, column {column + 1})"
        super().__init__(f"{message}{loc}")
        self.node = node


@dataclass(frozen=True)
class Diagnostic:
    """One finding; `line` and `column` are 1-based."""

    kind: DiagnosticKind
    node_type: str
    line: Optional[int]
    column: Optional[int]
    node: Dict[str, Any] = field(compare=False, repr=False)

    @property
    def message(self) -> str:
        return self.kind.message

    @classmethod
    def at(cls, kind: DiagnosticKind, node: Dict[str, Any]) -> "Diagnostic":
        line, column = node_position(node)
        return cls(
            kind=kind,
            node_type=node.get("type"),
            line=line,
            column=column + 1 if column is not None else None,
            node=node,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "type": self.node_type,
            "line": self.line,
            "column": self.column,
        }


__all__ = ["Diagnostic", "DiagnosticKind", "RuleError", "node_position"]
