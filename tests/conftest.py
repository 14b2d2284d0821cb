"""Shared pytest fixtures and helpers for buildlayout tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from buildlayout.domain.descriptor import BuildLayoutDescriptor
from buildlayout.domain.repositories import RepositoryLocation
from buildlayout.services.telemetry import disable_telemetry

DEFAULT_URLS = [
    "https://repo.maven.apache.org/maven2",
    "https://raw.githubusercontent.com/guardianproject/gpmaven/master",
    "https://zendesk.jfrog.io/zendesk/repo",
]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop BUILDLAYOUT_* env vars and restore logging/telemetry state."""
    for name in ("BUILDLAYOUT_CONFIG", "BUILDLAYOUT_WORKSPACE_ROOT", "BUILDLAYOUT_QUIET"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    disable_telemetry()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An ``android/`` workspace with an empty buildlayout.toml; CWD inside it.

    With default settings the output root is ``tmp_path / "build"``.
    """
    root = tmp_path / "android"
    root.mkdir()
    (root / "buildlayout.toml").write_text("")
    monkeypatch.chdir(root)
    return root


def write_config(workspace: Path, text: str) -> None:
    (workspace / "buildlayout.toml").write_text(text)


def make_descriptor(root: Path, **kwargs: object) -> BuildLayoutDescriptor:
    """Descriptor with two vendor repos and ``app``/``lib`` projects by default."""
    kwargs.setdefault(
        "repositories",
        [
            RepositoryLocation(name="maven-central", url=DEFAULT_URLS[0]),
            RepositoryLocation(name="guardianproject", url=DEFAULT_URLS[1]),
            RepositoryLocation(name="zendesk", url=DEFAULT_URLS[2]),
        ],
    )
    kwargs.setdefault("projects", ["app", "lib"])
    kwargs.setdefault("evaluation_anchor", "app")
    return BuildLayoutDescriptor.create(root, **kwargs)  # type: ignore[arg-type]
