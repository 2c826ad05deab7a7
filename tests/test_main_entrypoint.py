"""Tests covering the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

import main as entrypoint


def test_main_requires_a_project(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.delenv("RPGMAKER_PROJECT_PATH", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        entrypoint.main([])

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "RPGMAKER_PROJECT_PATH" in captured.err


def test_main_serves_stdio_by_default(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    served = []
    monkeypatch.setattr("rpgmaker_mcp.server.run_stdio", served.append)

    entrypoint.main(["--project", str(project), "--log-level", "warning"])

    assert len(served) == 1
    assert served[0].writer.files.resolver.project_root == project


def test_main_serves_http_with_uvicorn(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(
        "uvicorn.run", lambda app, host, port: calls.append((app, host, port))
    )

    entrypoint.main(["--project", str(project), "--transport", "http", "--port", "9001"])

    assert len(calls) == 1
    assert calls[0][1:] == ("127.0.0.1", 9001)


def test_main_passes_engine_root(project: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    served = []
    monkeypatch.setattr("rpgmaker_mcp.server.run_stdio", served.append)

    entrypoint.main(["--project", str(project), "--engine", str(tmp_path / "engine")])

    assert served[0].writer.files.resolver.engine_root == tmp_path / "engine"
