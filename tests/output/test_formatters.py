"""Tests for format_result and the Rich renderers."""

import json

from buildlayout.output.formatters import OutputSettings, format_result
from buildlayout.services.result import ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


_REPOS = [
    {"name": "maven-central", "url": "https://repo.maven.apache.org/maven2", "kind": "maven_central"},
    {"name": "zendesk", "url": "https://zendesk.jfrog.io/zendesk/repo", "kind": "maven"},
]


class TestJson:
    def test_json_wins_over_quiet(self) -> None:
        out = format_result(
            _ok("output_dir", project="app", path="/tmp/build/app"),
            settings=OutputSettings(json_output=True, quiet=True),
        )
        assert json.loads(out)["data"]["path"] == "/tmp/build/app"


class TestQuiet:
    quiet = OutputSettings(quiet=True)

    def test_output_dir_path_only(self) -> None:
        out = format_result(_ok("output_dir", project="app", path="/tmp/build/app"), settings=self.quiet)
        assert out == "/tmp/build/app"

    def test_repositories_urls(self) -> None:
        out = format_result(_ok("repositories", count=2, items=_REPOS), settings=self.quiet)
        assert out.splitlines() == [r["url"] for r in _REPOS]

    def test_order(self) -> None:
        out = format_result(_ok("order", evaluation_order=["app", "lib"]), settings=self.quiet)
        assert out == "app\nlib"

    def test_fallback(self) -> None:
        assert format_result(_ok("clean", removed=True), settings=self.quiet) == "OK: clean"

    def test_error(self) -> None:
        result = ServiceResult.failure("clean", "CLEAN_FAILED", "denied")
        assert format_result(result, settings=self.quiet) == "ERROR: clean: denied"


class TestHuman:
    def test_status_line_and_generic(self) -> None:
        out = format_result(_ok("run_action", action="clean"))
        assert out.splitlines()[0].startswith("OK")
        assert "action: clean" in out

    def test_repositories_table(self) -> None:
        out = format_result(_ok("repositories", count=2, items=_REPOS))
        assert "maven-central" in out
        assert "https://zendesk.jfrog.io/zendesk/repo" in out

    def test_clean_nothing(self) -> None:
        out = format_result(
            _ok("clean", path="/tmp/build", exists=False, files=0, directories=0, bytes=0, dry_run=False)
        )
        assert "nothing to clean" in out

    def test_clean_dry_run(self) -> None:
        out = format_result(
            _ok("clean", path="/tmp/build", exists=True, files=2, directories=1, bytes=9, dry_run=True)
        )
        assert "would remove /tmp/build (2 files, 1 directories, 9 bytes)" in out

    def test_error_includes_code(self) -> None:
        result = ServiceResult.failure("output_dir", "INVALID_PROJECT_NAME", "bad name")
        out = format_result(result)
        assert "ERROR" in out
        assert "[INVALID_PROJECT_NAME] bad name" in out

    def test_export_content_is_raw(self) -> None:
        out = format_result(_ok("export_gradle", content="allprojects {\n}\n"))
        assert out == "allprojects {\n}"

    def test_verbose_prints_meta(self) -> None:
        result = ServiceResult(ok=True, op="order", data={}, meta={"telemetry": {"name": "x"}})
        out = format_result(result, settings=OutputSettings(verbose=True))
        assert '"telemetry"' in out
