"""Tests for settings and the command line entry point."""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import main
from config import Settings, settings


class TestSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        for name in ("API_HOST", "API_PORT", "SEED_TASKS", "LOG_LEVEL", "LOG_FILE"):
            monkeypatch.delenv(f"TASKBOARD_{name}", raising=False)

        defaults = Settings(_env_file=None)

        assert defaults.api_host == "0.0.0.0"
        assert defaults.api_port == 8080
        assert defaults.seed_tasks is True
        assert defaults.log_level == "INFO"
        assert defaults.log_file is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TASKBOARD_API_PORT", "9090")
        monkeypatch.setenv("TASKBOARD_SEED_TASKS", "false")

        overridden = Settings(_env_file=None)

        assert overridden.api_port == 9090
        assert overridden.seed_tasks is False


class TestMain:
    """Test the command line entry point."""

    def test_arguments_update_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "api_host", settings.api_host)
        monkeypatch.setattr(settings, "api_port", settings.api_port)
        monkeypatch.setattr(settings, "seed_tasks", True)

        with patch.object(main, "run_http_server") as run, patch.object(main, "configure_logging"):
            main.main(["--host", "127.0.0.1", "--port", "9000", "--no-seed"])

        run.assert_called_once()
        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 9000
        assert settings.seed_tasks is False

    def test_uvicorn_runs_app_factory(self, monkeypatch):
        monkeypatch.setattr(settings, "api_port", 8123)

        with patch.object(main.uvicorn, "run") as run:
            main.run_http_server()

        args, kwargs = run.call_args
        assert args == ("api.http_server:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 8123

    def test_startup_failure_exits(self, monkeypatch):
        monkeypatch.setattr(settings, "api_host", settings.api_host)
        monkeypatch.setattr(settings, "api_port", settings.api_port)

        with patch.object(main, "run_http_server", side_effect=OSError("address in use")), \
                patch.object(main, "configure_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main.main([])

        assert exc_info.value.code == 1
