"""
Integration tests for the pagemap CLI.

Commands run in-process through cli_main.main(); each command module's
Application factory is patched to return the sample-screen Application.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.console import Console

from pagemap.app import Application
from pagemap.interfaces.cli import cli_main, cli_ui
from pagemap.interfaces.cli.commands import cache_cli, clear_cli, list_cli, sitemap_cli
from pagemap.services.config_svc import ConfigService

pytestmark = pytest.mark.integration

COMMAND_MODULES = (cache_cli, clear_cli, list_cli, sitemap_cli)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _use_application(monkeypatch: pytest.MonkeyPatch, app: Application) -> None:
    for module in COMMAND_MODULES:
        monkeypatch.setattr(module, "get_application", lambda: app)


@pytest.fixture
def cli_app(application: Application, monkeypatch: pytest.MonkeyPatch) -> Application:
    _use_application(monkeypatch, application)
    return application


class TestCLIParser:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main([]) == 0
        assert "pagemap" in capsys.readouterr().out

    def test_sitemap_options_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            cli_main.main(["sitemap", "--show", "--output", "x.xml"])


class TestCLICache:
    def test_cache_writes_file(self, cli_app: Application, cache_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main(["cache"]) == 0

        assert cache_file.is_file()
        assert "Manifest Cached" in capsys.readouterr().out

    def test_cache_again_without_force(self, cli_app: Application, cache_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli_main.main(["cache"])
        cache_file.write_text("sentinel", encoding="utf-8")
        capsys.readouterr()

        assert cli_main.main(["cache"]) == 0
        assert "--force" in capsys.readouterr().out
        assert cache_file.read_text(encoding="utf-8") == "sentinel"

        assert cli_main.main(["cache", "--force"]) == 0
        assert cache_file.read_text(encoding="utf-8") != "sentinel"

    def test_cache_prints_summary(
        self, cli_app: Application, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli_ui, "console", Console(width=200))
        assert cli_main.main(["cache"]) == 0
        out = capsys.readouterr().out

        assert "Summary" in out
        assert "Protected Routes" in out
        assert "Sitemap Entries" in out
        assert "By Zone" in out
        assert "customer" in out
        # route rows only with --show
        assert "admin.dashboard" not in out

    def test_cache_show_lists_routes(
        self, cli_app: Application, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(cli_ui, "console", Console(width=200))
        assert cli_main.main(["cache", "--show"]) == 0
        out = capsys.readouterr().out

        assert "Route Name" in out
        assert "admin.dashboard" in out
        assert "/admin/users/{user}" in out
        assert "By Zone" in out

    def test_cache_without_path_fails(
        self, config_overrides, sample_registry, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_overrides["cache"]["path"] = None
        _use_application(monkeypatch, Application(ConfigService(overrides=config_overrides), source=sample_registry))

        assert cli_main.main(["cache"]) == 1
        assert "Error writing manifest cache" in capsys.readouterr().out

    def test_clear(self, cli_app: Application, cache_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        cli_main.main(["cache"])
        capsys.readouterr()

        assert cli_main.main(["clear"]) == 0
        assert not cache_file.exists()
        assert "cleared" in capsys.readouterr().out

        assert cli_main.main(["clear"]) == 0
        assert "No manifest cache" in capsys.readouterr().out


class TestCLIList:
    def test_json_output(self, cli_app: Application, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main(["list", "--json", "--zone", "frontend"]) == 0
        out = capsys.readouterr().out

        assert '"home"' in out
        assert "admin.dashboard" not in out

    def test_table_output(self, cli_app: Application, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main(["list", "--public"]) == 0
        assert "Total: 2 components" in capsys.readouterr().out

    def test_no_match(self, cli_app: Application, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main(["list", "--zone", "api"]) == 0
        assert "No components found" in capsys.readouterr().out


class TestCLISitemap:
    def test_show(self, cli_app: Application, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli_main.main(["sitemap", "--show"]) == 0
        assert "Total: 2 URLs" in capsys.readouterr().out

    def test_writes_configured_path(self, cli_app: Application, sitemap_file: Path) -> None:
        assert cli_main.main(["sitemap"]) == 0
        assert "<urlset" in sitemap_file.read_text(encoding="utf-8")

    def test_unwritable_output(self, cli_app: Application, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert cli_main.main(["sitemap", "--output", str(blocker / "sitemap.xml")]) == 1
