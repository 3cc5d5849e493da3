"""
Identifier resolution on top of the scope tree.

`ScopeResolver.resolve(name, at_node)` answers where a name referenced at a
node is declared, relative to the function containing that node:

* `LOCAL`: declared in that function (including its blocks and catch clauses),
* `OUTER`: declared in an enclosing function or at program level,
* `UNRESOLVED`: not declared anywhere, i.e. an implicit global.

Resolution is read-only and never cached; the scope tree is the single source
of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .node_index import NodeIndex
from .scope_tracker import AnalysisResult, Declaration, Scope


class BindingState(str, Enum):
    LOCAL = "local"
    OUTER = "outer"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Binding:
    """Result of resolving one identifier reference."""

    state: BindingState
    declaration: Optional[Declaration] = None
    # Function (or Program) node owning the declaration.
    function: Optional[Dict[str, Any]] = None

    @property
    def is_local(self) -> bool:
        return self.state is BindingState.LOCAL


UNRESOLVED = Binding(state=BindingState.UNRESOLVED)


class ScopeResolver:
    def __init__(self, analysis: AnalysisResult, index: NodeIndex) -> None:
        self.analysis = analysis
        self.index = index

    def scope_at(self, node: Dict[str, Any]) -> Scope:
        """Innermost scope enclosing `node`."""
        for candidate in (node, *self.index.ancestors(node)):
            scope = self.analysis.scope_owned_by(candidate)
            if scope is not None:
                return scope
        return self.analysis.root_scope

    def resolve(self, name: str, at_node: Dict[str, Any]) -> Binding:
        scope: Optional[Scope] = self.scope_at(at_node)
        crossed_function = False
        while scope is not None:
            declaration = scope.lookup(name)
            if declaration is not None:
                state = BindingState.OUTER if crossed_function else BindingState.LOCAL
                return Binding(
                    state=state,
                    declaration=declaration,
                    function=scope.variable_scope().node,
                )
            if scope.is_function_boundary:
                crossed_function = True
            scope = scope.parent
        return UNRESOLVED


__all__ = ["Binding", "BindingState", "ScopeResolver", "UNRESOLVED"]
