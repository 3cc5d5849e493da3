"""The `no-redundant-assign` lint rule."""

from .classifier import assignment_target, classify
from .core import (
    RULE_NAME,
    CheckResult,
    RedundantAssignRule,
    RuleContext,
    check_program,
    iter_return_statements,
)
from .diagnostics import Diagnostic, DiagnosticKind, RuleError
from .locator import find_predecessor

__all__ = [
    "CheckResult",
    "Diagnostic",
    "DiagnosticKind",
    "RULE_NAME",
    "RedundantAssignRule",
    "RuleContext",
    "RuleError",
    "assignment_target",
    "check_program",
    "classify",
    "find_predecessor",
    "iter_return_statements",
]
