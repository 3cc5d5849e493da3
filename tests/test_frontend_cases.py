from pathlib import Path
from typing import List, Tuple

import esprima
import pytest

from analyzer import BindingKind
from frontend import lint_source, run_frontend
from parser import parse_js

CASES = Path(__file__).parent / "cases"


def _lint_case(name: str, *, source_type: str = "script"):
    source_path = CASES / name
    source = source_path.read_text(encoding="utf-8")
    return lint_source(source, source_name=str(source_path), source_type=source_type)


def _positions(result) -> List[Tuple[str, int, int]]:
    return [
        (diagnostic.kind.value, diagnostic.line, diagnostic.column)
        for diagnostic in result.diagnostics
    ]


TEST_CASES = [
    ("clean.js", "script", []),
    (
        "redundant.js",
        "script",
        [("RedundantVariable", 2, 7), ("RedundantAssignment", 9, 3)],
    ),
    (
        "module.js",
        "module",
        [("RedundantVariable", 4, 9), ("RedundantVariable", 9, 7)],
    ),
]


@pytest.mark.parametrize("name, source_type, expected", TEST_CASES)
def test_lint_cases(name, source_type, expected):
    result = _lint_case(name, source_type=source_type)
    assert result.parse_errors == []
    assert _positions(result) == expected
    assert result.clean == (expected == [])
    assert result.source_name.endswith(name)


def test_frontend_builds_analysis_and_index():
    source = (CASES / "redundant.js").read_text(encoding="utf-8")
    result = run_frontend(source, source_name="redundant.js")

    assert result.has_ast
    assert result.parse.ok
    assert result.parse.ast["type"] == "Program"
    assert result.index is not None and result.parse.ast in result.index

    root = result.analysis.root_scope
    assert {"area", "pick", "remember", "cache"} <= set(root.bindings)
    kinds = {binding.kind for bindings in root.bindings.values() for binding in bindings}
    assert kinds == {BindingKind.FUNCTION, BindingKind.VAR}


def test_frontend_can_skip_analysis():
    result = run_frontend("var a = 1;", analyze=False)
    assert result.has_ast
    assert result.analysis is None
    assert result.index is None


def test_broken_source_reports_parse_errors():
    result = _lint_case("broken.js")
    assert result.parse_errors
    assert not result.clean


def test_strict_parsing_raises():
    source = (CASES / "broken.js").read_text(encoding="utf-8")
    with pytest.raises(esprima.Error):
        parse_js(source, tolerant=False)


def test_unknown_source_type_is_rejected():
    with pytest.raises(ValueError):
        parse_js("var a;", source_type="commonjs")
