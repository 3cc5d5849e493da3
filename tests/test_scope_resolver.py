from analyzer import BindingKind, BindingState, ScopeResolver, ScopeType
from frontend import run_frontend
from rules import iter_return_statements


def _resolver_and_returns(code: str, *, source_type: str = "script"):
    result = run_frontend(code, source_type=source_type)
    assert result.parse.ast is not None
    resolver = ScopeResolver(result.analysis, result.index)
    return resolver, list(iter_return_statements(result.parse.ast))


def _resolve_returned(code: str):
    resolver, returns = _resolver_and_returns(code)
    node = returns[-1]
    return resolver.resolve(node["argument"]["name"], node)


def test_var_declared_in_function_is_local():
    binding = _resolve_returned("(function() { var foo; return foo; });")
    assert binding.state is BindingState.LOCAL
    assert binding.declaration.kind is BindingKind.VAR
    assert binding.function["type"] == "FunctionExpression"


def test_var_is_hoisted_out_of_nested_blocks():
    binding = _resolve_returned(
        "(function() { if (a) { with (b) { var foo; } } while (c) { return foo; } });"
    )
    assert binding.is_local


def test_parameters_and_catch_parameters_are_local():
    assert _resolve_returned("function f(foo) { return foo; }").is_local
    assert _resolve_returned(
        "function f() { try {} catch (foo) { return foo; } }"
    ).declaration.kind is BindingKind.CATCH_PARAMETER


def test_destructured_parameter_is_local():
    binding = _resolve_returned("function f({ a: [foo] }) { return foo; }")
    assert binding.is_local
    assert binding.declaration.kind is BindingKind.PARAMETER


def test_named_function_expression_name_is_not_local_to_its_body():
    binding = _resolve_returned("(function foo() { return foo; });")
    assert binding.state is BindingState.OUTER
    assert binding.declaration.kind is BindingKind.FUNCTION
    assert binding.function["type"] == "Program"


def test_function_expression_name_sits_in_its_own_scope():
    result = run_frontend("(function foo() { var bar; });")
    name_scope = next(
        scope
        for scope in result.analysis.flatten_scopes()
        if scope.scope_type is ScopeType.FUNCTION_NAME
    )
    assert set(name_scope.bindings) == {"foo"}
    [function_scope] = name_scope.children
    assert function_scope.scope_type is ScopeType.FUNCTION
    assert set(function_scope.bindings) == {"bar"}


def test_local_declaration_shadows_function_expression_name():
    binding = _resolve_returned("(function foo() { var foo; return foo; });")
    assert binding.is_local
    assert binding.declaration.kind is BindingKind.VAR


def test_enclosing_function_variable_is_outer():
    binding = _resolve_returned(
        "function a() { let foo; function b() { return foo; } }"
    )
    assert binding.state is BindingState.OUTER
    assert binding.function["id"]["name"] == "a"


def test_program_level_declaration_is_outer():
    binding = _resolve_returned("var foo; function a() { return foo; }")
    assert binding.state is BindingState.OUTER
    assert binding.function["type"] == "Program"


def test_undeclared_name_is_unresolved():
    binding = _resolve_returned("(() => { return foo; });")
    assert binding.state is BindingState.UNRESOLVED
    assert binding.declaration is None


def test_block_scoped_let_does_not_leak_out_of_its_block():
    binding = _resolve_returned("function a() { { let foo; } return foo; }")
    assert binding.state is BindingState.UNRESOLVED


def test_inner_let_shadows_outer_declaration():
    code = "function a() { var foo; if (b) { let foo = 1; return foo; } }"
    binding = _resolve_returned(code)
    assert binding.is_local
    assert binding.declaration.kind is BindingKind.LET


def test_let_in_for_head_is_local_to_loop():
    resolver, returns = _resolver_and_returns(
        "function a() { for (let i = 0; i < 3; i++) { return i; } }"
    )
    binding = resolver.resolve("i", returns[0])
    assert binding.is_local
    scope = resolver.scope_at(returns[0])
    assert scope.scope_type is ScopeType.BLOCK


def test_imports_bind_at_module_level():
    resolver, returns = _resolver_and_returns(
        "import { join } from 'path';\nexport function a() { return join; }",
        source_type="module",
    )
    binding = resolver.resolve("join", returns[0])
    assert binding.state is BindingState.OUTER
    assert binding.declaration.kind is BindingKind.IMPORT


def test_scope_tree_shape():
    result = run_frontend(
        "function a(x) { var y; try {} catch (e) { let z; } }"
    )
    scopes = list(result.analysis.flatten_scopes())
    types = [scope.scope_type for scope in scopes]
    assert types[0] is ScopeType.GLOBAL
    assert ScopeType.FUNCTION in types
    assert ScopeType.CATCH in types
    function_scope = next(s for s in scopes if s.scope_type is ScopeType.FUNCTION)
    assert {"x", "y"} <= set(function_scope.bindings)
    assert "a" in result.analysis.root_scope.bindings
