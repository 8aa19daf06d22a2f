"""Tests for the promapi command line entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from promapi import cli
from promapi.cli import _parse_args, build_settings


class TestBuildSettings:
    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BINARY_NAME", "from-env")
        monkeypatch.setenv("SERVICE_PORT", "1234")

        cfg = build_settings(
            _parse_args(["--binary-name", "rule-evaluator", "--binary-version", "v0.9"])
        )

        assert cfg.binary_name == "rule-evaluator"
        assert cfg.binary_version == "v0.9"
        assert cfg.service_port == 1234

    def test_environment_supplies_emulated_constants(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PROMETHEUS_VERSION", "2.45.0")
        monkeypatch.setenv("BUILD_USER", "ci@example")

        info = build_settings(_parse_args([])).buildinfo

        assert info.prometheus_version == "2.45.0"
        assert info.build_user == "ci@example"
        assert info.build_branch == "HEAD"


class TestMain:
    @patch("promapi.cli.uvicorn.run")
    @patch("promapi.cli.setup_logging")
    def test_runs_uvicorn_with_configured_app(self, mock_logging, mock_run) -> None:
        cli.main(["--host", "127.0.0.1", "--port", "9999", "--log-level", "debug"])

        mock_logging.assert_called_once_with("debug")
        mock_run.assert_called_once()
        app = mock_run.call_args.args[0]
        assert app.state.settings.service_port == 9999
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 9999


class TestSetupLogging:
    @patch("promapi.logging_config.logging.basicConfig")
    def test_installs_rich_handler(self, mock_basic_config) -> None:
        import logging

        from rich.logging import RichHandler

        from promapi.logging_config import setup_logging

        setup_logging("debug")

        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert kwargs["force"] is True
        assert [type(h) for h in kwargs["handlers"]] == [RichHandler]


class TestBuildinfoDefaults:
    def test_settings_defaults_match_buildinfo_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from promapi.settings import BuildinfoSettings, Settings

        for name in ("PROMETHEUS_VERSION", "REVISION_PREFIX", "BUILD_BRANCH", "BUILD_USER"):
            monkeypatch.delenv(name, raising=False)

        assert Settings(_env_file=None).buildinfo == BuildinfoSettings()
        assert BuildinfoSettings().prometheus_version == "1.8.2"
