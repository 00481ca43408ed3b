from __future__ import annotations

import sys

import taskschedule.cli as cli_module


def _capture(monkeypatch, argv: list[str]) -> list[str]:
    captured: dict[str, list[str]] = {}

    def fake_cli_main(args: list[str] | None = None) -> int:
        captured["args"] = list(args or [])
        return 0

    monkeypatch.setattr(cli_module, "main", fake_cli_main)
    monkeypatch.setattr(sys, "argv", argv)

    import runner

    assert runner.main() == 0
    return captured["args"]


def test_runner_treats_bare_file_as_analyze(monkeypatch):
    assert _capture(monkeypatch, ["runner.py", "tasks.txt"]) == ["analyze", "tasks.txt"]


def test_runner_forwards_explicit_command(monkeypatch):
    argv = ["runner.py", "analyze", "tasks.txt", "--max-paths", "3"]
    assert _capture(monkeypatch, argv) == ["analyze", "tasks.txt", "--max-paths", "3"]


def test_runner_forwards_flags_untouched(monkeypatch):
    assert _capture(monkeypatch, ["runner.py", "--help"]) == ["--help"]
