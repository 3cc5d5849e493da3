"""Front-end pipeline glue for parsing, analysis and linting."""

from .pipeline import FrontEndResult, LintResult, lint_source, run_frontend

__all__ = ["FrontEndResult", "LintResult", "lint_source", "run_frontend"]
