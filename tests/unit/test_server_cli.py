"""Tests for the projectboard-server entry point."""

from unittest.mock import patch

from typer.testing import CliRunner

from projectboard.api.main import cli
from projectboard.config import Config, Settings


class TestServeCommand:
    """Test that serve hands the configured settings to uvicorn."""

    def test_serve_uses_config(self, temp_dir, monkeypatch):
        Config(temp_dir).save(Settings(port=8123, log_level="DEBUG"))
        # serve exports the project directory; setenv restores it afterwards
        monkeypatch.setenv("PROJECTBOARD_PROJECT_DIR", str(temp_dir))

        with patch("projectboard.api.main.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--project-dir", str(temp_dir)])

        assert result.exit_code == 0
        args, kwargs = mock_run.call_args
        assert args == ("projectboard.api.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 8123
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["log_level"] == "debug"

    def test_serve_options_override_config(self, temp_dir, monkeypatch):
        # serve exports the project directory; setenv restores it afterwards
        monkeypatch.setenv("PROJECTBOARD_PROJECT_DIR", str(temp_dir))

        with patch("projectboard.api.main.uvicorn.run") as mock_run:
            result = CliRunner().invoke(
                cli,
                ["serve", "--project-dir", str(temp_dir), "--port", "9000", "--host", "127.0.0.1"],
            )

        assert result.exit_code == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs["port"] == 9000
        assert kwargs["host"] == "127.0.0.1"

    def test_serve_invalid_port_setting(self, temp_dir, monkeypatch):
        monkeypatch.setenv("PORT", "abc")

        with patch("projectboard.api.main.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--project-dir", str(temp_dir)])

        assert result.exit_code == 1
        assert "PORT must be an integer" in result.stdout
        mock_run.assert_not_called()
