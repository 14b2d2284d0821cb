"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from buildlayout.config.logging import configure_logging
from buildlayout.services.layout import LayoutService
from tests.conftest import make_descriptor


@pytest.fixture(autouse=True)
def _restore_package_level() -> Generator[None]:
    logger = logging.getLogger("buildlayout")
    level = logger.level
    yield
    logger.setLevel(level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("buildlayout").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("buildlayout").level == logging.WARNING

    def test_json_mode(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("buildlayout.test").warning("clean failed", path="/tmp/build")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "clean failed"
        assert parsed["path"] == "/tmp/build"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "buildlayout.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("buildlayout.domain.descriptor").debug("clean root=%s", "/tmp/build")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "clean root=/tmp/build"
        assert parsed["level"] == "debug"

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("buildlayout.services").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_context_bound_to_every_line(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, context={"workspace": "/src/android"})
        logging.getLogger("buildlayout.services").warning("slow disk")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["workspace"] == "/src/android"

    def test_context_replaced_on_reconfigure(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True, context={"workspace": "/old"})
        configure_logging(log_json=True)
        logging.getLogger("buildlayout.services").warning("slow disk")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "workspace" not in parsed

    def test_clean_failure_carries_root(
        self,
        tmp_path: Path,
        capfd: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        root = tmp_path / "build"
        root.mkdir()

        def refuse(path: Path) -> None:
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("buildlayout.infrastructure.filesystem.shutil.rmtree", refuse)
        configure_logging(verbose=True, log_json=True, context={"workspace": str(tmp_path)})
        result = LayoutService(make_descriptor(root)).clean()
        assert not result.ok
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        failed = next(line for line in lines if line["event"] == "clean.failed")
        assert failed["root"] == str(root)
        assert failed["errno"] == 13
        assert failed["dry_run"] is False
        assert failed["workspace"] == str(tmp_path)
