import json
import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run_cli(args, cwd: Path = REPO_ROOT):
    env = os.environ.copy()
    pythonpath = env.get("PYTHONPATH", "")
    src = str(REPO_ROOT / "src")
    env["PYTHONPATH"] = src + (os.pathsep + pythonpath if pythonpath else "")
    result = subprocess.run(
        [sys.executable, "-m", "cli", *args],
        cwd=cwd,
        env=env,
        check=False,
        capture_output=True,
        text=True,
    )
    return result


def test_cli_clean_file_exits_zero():
    result = _run_cli(["check", "tests/cases/clean.js"])
    assert result.returncode == 0, result.stderr
    assert result.stdout == ""


def test_cli_reports_findings():
    result = _run_cli(["check", "tests/cases/clean.js", "tests/cases/redundant.js"])
    assert result.returncode == 1
    lines = result.stdout.splitlines()
    assert lines == [
        "tests/cases/redundant.js:2:7: Redundant variable. [RedundantVariable]",
        "tests/cases/redundant.js:9:3: Redundant assignment. [RedundantAssignment]",
    ]


def test_cli_json_output_for_module():
    result = _run_cli(["check", "--module", "--format", "json", "tests/cases/module.js"])
    assert result.returncode == 1
    payload = json.loads(result.stdout)
    assert [entry["line"] for entry in payload[0]["diagnostics"]] == [4, 9]


def test_cli_missing_file():
    result = _run_cli(["check", "tests/cases/does_not_exist.js"])
    assert result.returncode == 2
    assert "Input file not found" in result.stderr


def test_cli_strict_mode_reports_syntax_error():
    result = _run_cli(["check", "--strict", "tests/cases/broken.js"])
    assert result.returncode == 1
    assert result.stdout.startswith("tests/cases/broken.js:")
    assert ": error: " in result.stdout


def test_cli_strict_mode_keeps_findings_of_other_files():
    result = _run_cli(
        ["check", "--strict", "tests/cases/redundant.js", "tests/cases/broken.js"]
    )
    assert result.returncode == 1
    lines = result.stdout.splitlines()
    assert lines[:2] == [
        "tests/cases/redundant.js:2:7: Redundant variable. [RedundantVariable]",
        "tests/cases/redundant.js:9:3: Redundant assignment. [RedundantAssignment]",
    ]
    assert lines[2].startswith("tests/cases/broken.js:")


def test_cli_non_utf8_file(tmp_path):
    source_path = tmp_path / "latin1.js"
    source_path.write_bytes(b"var a = \"\xff\";\n")
    result = _run_cli(["check", str(source_path)])
    assert result.returncode == 2
    assert f"ERROR: Failed to read {source_path}" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_unreadable_file_does_not_hide_other_results(tmp_path):
    result = _run_cli(["check", str(tmp_path / "missing.js"), "tests/cases/redundant.js"])
    assert result.returncode == 2
    assert "Input file not found" in result.stderr
    assert len(result.stdout.splitlines()) == 2


def test_cli_verbose_logs_to_stderr():
    result = _run_cli(["check", "-v", "tests/cases/redundant.js"])
    assert result.returncode == 1
    assert "checking tests/cases/redundant.js" in result.stderr


def test_cli_without_command_prints_help():
    result = _run_cli([])
    assert result.returncode == 2
    assert "usage:" in result.stdout
