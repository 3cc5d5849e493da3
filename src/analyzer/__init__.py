"""Scope analysis and identifier resolution for JavaScript ASTs."""

from .node_index import NodeIndex, NodeSlot
from .resolver import UNRESOLVED, Binding, BindingState, ScopeResolver
from .scope_tracker import (
    FUNCTION_TYPES,
    AnalysisResult,
    BindingKind,
    Declaration,
    Scope,
    ScopeType,
    SourcePosition,
    analyze_bindings,
    pattern_identifiers,
)

__all__ = [
    "AnalysisResult",
    "Binding",
    "BindingKind",
    "BindingState",
    "Declaration",
    "FUNCTION_TYPES",
    "NodeIndex",
    "NodeSlot",
    "Scope",
    "ScopeResolver",
    "ScopeType",
    "SourcePosition",
    "UNRESOLVED",
    "analyze_bindings",
    "pattern_identifiers",
]
