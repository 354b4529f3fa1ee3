"""Tests for console output, the run log, and the process wrapper."""

import sys

from devapps_installer.core.console import Console
from devapps_installer.core.process import Process, format_cmd


def test_markers(console, capsys):
    console.info("a")
    console.ok("b")
    console.warn("c")
    console.err("d")
    assert capsys.readouterr().out.splitlines() == ["→ a", "✔ b", "⚠ c", "✘ d"]


def test_debug_echo_only_when_enabled(capsys):
    Console(debug=False).dbg("hidden")
    Console(debug=True).dbg("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert ">>> shown" in out


def test_run_log_mirrors_stdout(tmp_path):
    original = sys.stdout
    console = Console()
    log_path = console.start_run_log(tmp_path / "logs")
    try:
        print("hello log")
    finally:
        console.close()
    assert log_path is not None
    assert log_path.name.startswith("run-")
    assert "hello log" in log_path.read_text(encoding="utf-8")
    assert sys.stdout is original


def test_format_cmd_quotes_spaces():
    assert format_cmd(["winget", "install", "--id", "Some App"]) == 'winget install --id "Some App"'


def test_dry_run_does_not_execute(capsys):
    proc = Process(Console(), dry_run=True)
    assert proc.run_stream(["definitely-not-a-real-binary", "install"]) == 0
    assert proc.run_capture(["definitely-not-a-real-binary"]) == (0, "")
    assert "[dry-run] definitely-not-a-real-binary install" in capsys.readouterr().out


def test_missing_binary_reports_exit_code_one():
    proc = Process(Console())
    assert proc.run_capture(["definitely-not-a-real-binary-xyz"]) == (1, "")
    assert proc.run_stream(["definitely-not-a-real-binary-xyz"]) == 1
