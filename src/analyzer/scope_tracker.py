"""
Scope analysis for JavaScript ASTs.

The analyzer walks an esprima-compatible AST, builds a tree of lexical scopes,
and records the declarations introduced by `var`, `let`, `const`, `class`,
`function`, imports, function parameters and catch parameters. `var` and
function-level declarations are hoisted to the nearest function (or global)
scope; `let`, `const` and `class` stay in the block that declares them. The
resulting scope tree, together with `scopes_by_node`, lets the resolver answer
"which scope does this identifier belong to" for any node in the program.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

FUNCTION_TYPES = frozenset(
    {"FunctionDeclaration", "FunctionExpression", "ArrowFunctionExpression"}
)


class ScopeType(str, Enum):
    GLOBAL = "global"
    FUNCTION = "function"
    BLOCK = "block"
    CATCH = "catch"
    FUNCTION_NAME = "function_name"


class BindingKind(str, Enum):
    VAR = "var"
    LET = "let"
    CONST = "const"
    CLASS = "class"
    FUNCTION = "function"
    PARAMETER = "parameter"
    CATCH_PARAMETER = "catch_parameter"
    IMPORT = "import"


_DECLARATION_KINDS = {
    "var": BindingKind.VAR,
    "let": BindingKind.LET,
    "const": BindingKind.CONST,
}


@dataclass(frozen=True)
class SourcePosition:
    line: Optional[int]
    column: Optional[int]


@dataclass(frozen=True)
class Declaration:
    """A single identifier declared within a scope."""

    name: str
    kind: BindingKind
    loc: SourcePosition
    node: Dict[str, Any]
    # The statement or function node that introduced the name.
    declaration: Dict[str, Any]


@dataclass
class Scope:
    """A lexical scope containing zero or more declarations and child scopes."""

    scope_id: str
    scope_type: ScopeType
    node: Dict[str, Any]
    parent: Optional["Scope"] = None
    bindings: Dict[str, List[Declaration]] = field(default_factory=dict)
    children: List["Scope"] = field(default_factory=list)

    @property
    def is_function_boundary(self) -> bool:
        return self.scope_type in (ScopeType.FUNCTION, ScopeType.GLOBAL)

    def add_binding(self, declaration: Declaration) -> None:
        """Register a declaration within the current scope."""
        self.bindings.setdefault(declaration.name, []).append(declaration)

    def add_child(self, child: "Scope") -> None:
        self.children.append(child)

    def lookup(self, name: str) -> Optional[Declaration]:
        """Return the first declaration of `name` in this scope only."""
        declarations = self.bindings.get(name)
        return declarations[0] if declarations else None

    def variable_scope(self) -> "Scope":
        """The nearest function or global scope, where `var` is hoisted."""
        scope = self
        while not scope.is_function_boundary and scope.parent is not None:
            scope = scope.parent
        return scope


@dataclass(frozen=True)
class AnalysisResult:
    source_name: str
    root_scope: Scope
    scopes_by_node: Dict[int, Scope]

    def scope_owned_by(self, node: Dict[str, Any]) -> Optional[Scope]:
        """Return the scope created by `node`, if it creates one."""
        return self.scopes_by_node.get(id(node))

    def flatten_scopes(self) -> Iterable[Scope]:
        """Yield scopes in depth-first order."""
        stack = [self.root_scope]
        while stack:
            scope = stack.pop()
            yield scope
            stack.extend(reversed(scope.children))


def pattern_identifiers(node: Any) -> List[Dict[str, Any]]:
    """Collect the Identifier nodes bound by a declaration target or parameter."""
    if not isinstance(node, dict):
        return []
    node_type = node.get("type")
    if node_type == "Identifier":
        return [node]
    if node_type == "AssignmentPattern":
        return pattern_identifiers(node.get("left"))
    if node_type == "RestElement":
        return pattern_identifiers(node.get("argument"))
    if node_type == "ArrayPattern":
        names: List[Dict[str, Any]] = []
        for element in node.get("elements") or []:
            names.extend(pattern_identifiers(element))
        return names
    if node_type == "ObjectPattern":
        names = []
        for prop in node.get("properties") or []:
            if prop.get("type") == "RestElement":
                names.extend(pattern_identifiers(prop))
            else:
                names.extend(pattern_identifiers(prop.get("value")))
        return names
    return []


class _BindingAnalyzer:
    def __init__(self, source_name: str) -> None:
        self._source_name = source_name
        self._scope_counter = 0
        self._scopes_by_node: Dict[int, Scope] = {}

    def analyze(self, ast: Dict[str, Any]) -> AnalysisResult:
        root_scope = self._new_scope(ScopeType.GLOBAL, ast, parent=None)
        self._visit(ast.get("body", []), root_scope)
        return AnalysisResult(
            source_name=self._source_name,
            root_scope=root_scope,
            scopes_by_node=self._scopes_by_node,
        )

    # ------------------------------------------------------------------ helpers

    def _new_scope(
        self,
        scope_type: ScopeType,
        node: Dict[str, Any],
        parent: Optional[Scope],
        *,
        owned: bool = True,
    ) -> Scope:
        scope_id = f"S{self._scope_counter}"
        self._scope_counter += 1
        scope = Scope(scope_id=scope_id, scope_type=scope_type, node=node, parent=parent)
        if parent:
            parent.add_child(scope)
        if owned:
            self._scopes_by_node[id(node)] = scope
        return scope

    @staticmethod
    def _source_position(node: Dict[str, Any]) -> SourcePosition:
        loc = node.get("loc") or {}
        start = loc.get("start") or {}
        return SourcePosition(
            line=start.get("line"),
            column=start.get("column"),
        )

    def _declare(
        self,
        target: Any,
        kind: BindingKind,
        declaration: Dict[str, Any],
        scope: Scope,
    ) -> None:
        for identifier in pattern_identifiers(target):
            scope.add_binding(
                Declaration(
                    name=identifier.get("name"),
                    kind=kind,
                    loc=self._source_position(identifier),
                    node=identifier,
                    declaration=declaration,
                )
            )

    def _visit(self, node: Any, scope: Scope) -> None:
        if node is None:
            return
        if isinstance(node, list):
            for element in node:
                self._visit(element, scope)
            return
        if not isinstance(node, dict):
            return

        handler = getattr(self, f"_visit_{node.get('type')}", None)
        if handler:
            handler(node, scope)
        else:
            self._generic_visit(node, scope)

    def _generic_visit(self, node: Dict[str, Any], scope: Scope) -> None:
        for key, value in node.items():
            if key in {"loc", "range"}:
                continue
            self._visit(value, scope)

    # ----------------------------------------------------------------- visitors

    def _visit_BlockStatement(self, node: Dict[str, Any], scope: Scope) -> None:
        block_scope = self._new_scope(ScopeType.BLOCK, node, scope)
        self._visit(node.get("body", []), block_scope)

    def _visit_SwitchStatement(self, node: Dict[str, Any], scope: Scope) -> None:
        self._visit(node.get("discriminant"), scope)
        switch_scope = self._new_scope(ScopeType.BLOCK, node, scope)
        self._visit(node.get("cases", []), switch_scope)

    def _visit_loop_with_head(self, node: Dict[str, Any], scope: Scope) -> None:
        # `for (let i ...)` binds `i` in a scope wrapping the whole loop.
        loop_scope = self._new_scope(ScopeType.BLOCK, node, scope)
        self._generic_visit(node, loop_scope)

    _visit_ForStatement = _visit_loop_with_head
    _visit_ForInStatement = _visit_loop_with_head
    _visit_ForOfStatement = _visit_loop_with_head

    def _visit_VariableDeclaration(self, node: Dict[str, Any], scope: Scope) -> None:
        kind = _DECLARATION_KINDS.get(node.get("kind"), BindingKind.VAR)
        target_scope = scope.variable_scope() if kind is BindingKind.VAR else scope
        for declarator in node.get("declarations", []):
            self._declare(declarator.get("id"), kind, node, target_scope)
            # Visit initializer to catch nested functions etc.
            self._visit(declarator.get("init"), scope)

    def _visit_FunctionDeclaration(self, node: Dict[str, Any], scope: Scope) -> None:
        self._declare(node.get("id"), BindingKind.FUNCTION, node, scope)
        self._visit_function(node, scope)

    def _visit_FunctionExpression(self, node: Dict[str, Any], scope: Scope) -> None:
        if node.get("id"):
            # The name of a function expression lives in its own scope between
            # the enclosing scope and the function body; it is read-only there.
            scope = self._new_scope(ScopeType.FUNCTION_NAME, node, scope, owned=False)
            self._declare(node.get("id"), BindingKind.FUNCTION, node, scope)
        self._visit_function(node, scope)

    def _visit_ArrowFunctionExpression(self, node: Dict[str, Any], scope: Scope) -> None:
        self._visit_function(node, scope)

    def _visit_function(self, node: Dict[str, Any], scope: Scope) -> Scope:
        function_scope = self._new_scope(ScopeType.FUNCTION, node, scope)
        for param in node.get("params", []):
            self._declare(param, BindingKind.PARAMETER, node, function_scope)
            if isinstance(param, dict) and param.get("type") != "Identifier":
                # Default values may contain nested functions.
                self._generic_visit(param, function_scope)
        body = node.get("body")
        if isinstance(body, dict) and body.get("type") == "BlockStatement":
            # The body block shares the function scope.
            self._visit(body.get("body", []), function_scope)
        else:
            self._visit(body, function_scope)
        return function_scope

    def _visit_ClassDeclaration(self, node: Dict[str, Any], scope: Scope) -> None:
        self._declare(node.get("id"), BindingKind.CLASS, node, scope)
        self._visit(node.get("superClass"), scope)
        self._visit(node.get("body"), scope)

    def _visit_CatchClause(self, node: Dict[str, Any], scope: Scope) -> None:
        catch_scope = self._new_scope(ScopeType.CATCH, node, scope)
        self._declare(node.get("param"), BindingKind.CATCH_PARAMETER, node, catch_scope)
        self._visit(node.get("body"), catch_scope)

    def _visit_ImportDeclaration(self, node: Dict[str, Any], scope: Scope) -> None:
        for specifier in node.get("specifiers", []):
            self._declare(specifier.get("local"), BindingKind.IMPORT, node, scope)


def analyze_bindings(ast: Dict[str, Any], *, source_name: str = "<input>") -> AnalysisResult:
    """
    Run scope and declaration analysis on a JavaScript AST.

    Args:
        ast: esprima-compatible AST (result of `parse_js`).
        source_name: Label for diagnostics and reporting.

    Returns:
        AnalysisResult with the scope tree and the node-to-scope mapping.
    """
    analyzer = _BindingAnalyzer(source_name=source_name)
    return analyzer.analyze(ast)


__all__ = [
    "AnalysisResult",
    "BindingKind",
    "Declaration",
    "FUNCTION_TYPES",
    "Scope",
    "ScopeType",
    "SourcePosition",
    "analyze_bindings",
    "pattern_identifiers",
]
