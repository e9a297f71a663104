"""Settings, logging and application start-up."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi import FastAPI

from tododag import main
from tododag.platform.config import Settings
from tododag.platform.logs import configure_logging
from tododag.platform.wiring import get_graph


def test_settings_read_prefixed_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("TODODAG_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODODAG_GRAPH_INPUTS_DIR", str(tmp_path))

    settings = Settings(_env_file=None)

    assert settings.log_level == "debug"
    assert settings.graph_inputs_dir == tmp_path


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TODODAG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TODODAG_GRAPH_INPUTS_DIR", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.graph_inputs_dir is None


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        pytest.param("debug", logging.DEBUG, id="name"),
        pytest.param(logging.WARNING, logging.WARNING, id="number"),
        pytest.param("chatty", logging.INFO, id="unknown"),
    ],
)
def test_configure_logging_sets_package_level(level: str | int, expected: int) -> None:
    configure_logging(level)

    assert logging.getLogger("tododag").level == expected


@pytest.mark.asyncio
async def test_lifespan_seeds_graph_from_inputs(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / "seed.json").write_text(
        '{"nodes": ["plan"], "edges": [["plan", "build"]]}', encoding="utf-8"
    )
    settings = Settings(_env_file=None, graph_inputs_dir=tmp_path)
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    app = FastAPI()

    async with main.lifespan(app):
        assert app.state.graph.topological_sort() == ["plan", "build"]


@pytest.mark.asyncio
async def test_lifespan_starts_empty_without_inputs(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = Settings(_env_file=None, graph_inputs_dir=None)
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    app = FastAPI()

    async with main.lifespan(app):
        assert len(app.state.graph) == 0


def test_get_graph_creates_owned_instance_once() -> None:
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))

    first = get_graph(request)  # type: ignore[arg-type]
    second = get_graph(request)  # type: ignore[arg-type]

    assert first is second
    assert request.app.state.graph is first
