"""Configuration management for ProjectBoard."""

import os
from pathlib import Path
from typing import Optional, Dict, Any
import toml
from pydantic import BaseModel, Field, ConfigDict

CONFIG_FILENAME = "projectboard.toml"
DEFAULT_PORT = 3000


class Settings(BaseModel):
    """Settings stored in projectboard.toml."""

    model_config = ConfigDict(
        extra="allow"
    )  # Allow additional fields for extensibility

    host: str = Field(default="0.0.0.0", description="Host the API server binds to")
    port: int = Field(default=DEFAULT_PORT, description="Port the API server listens on")
    database: str = Field(
        default="database.sqlite",
        description="SQLite database file, relative to the project directory",
    )
    api_url: str = Field(
        default=f"http://localhost:{DEFAULT_PORT}",
        description="Base URL the CLI uses to reach the API",
    )
    log_level: str = Field(default="info", description="Logging level")
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")


class Config:
    """Manages ProjectBoard configuration."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize config manager.

        Args:
            project_dir: Path to project directory. If None, uses PROJECTBOARD_PROJECT_DIR env var or current directory.
        """
        if project_dir is None:
            env_dir = os.environ.get("PROJECTBOARD_PROJECT_DIR")
            if env_dir:
                project_dir = Path(env_dir)

        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.config_path = self.project_dir / CONFIG_FILENAME
        self._settings: Optional[Settings] = None

    @property
    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_path.exists()

    def load(self) -> Settings:
        """Load settings from disk, with environment variable overrides.

        A missing config file is not an error; defaults are used instead.

        Raises:
            ValueError: If the file or an override holds an invalid value
        """
        data: Dict[str, Any] = {}
        if self.exists:
            with open(self.config_path, "r") as f:
                data = toml.load(f)

        self._apply_env_overrides(data)

        self._settings = Settings(**data)
        return self._settings

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        """Apply environment variable overrides to configuration data."""
        if env_port := os.environ.get("PORT"):
            try:
                data["port"] = int(env_port)
            except ValueError:
                raise ValueError(f"PORT must be an integer, got {env_port!r}") from None

        if env_host := os.environ.get("PROJECTBOARD_HOST"):
            data["host"] = env_host

        if env_db := os.environ.get("PROJECTBOARD_DATABASE"):
            data["database"] = env_db

        if env_url := os.environ.get("PROJECTBOARD_API_URL"):
            data["api_url"] = env_url.rstrip("/")

        if env_level := os.environ.get("PROJECTBOARD_LOG_LEVEL"):
            data["log_level"] = env_level

    @property
    def database_path(self) -> Path:
        """Absolute path of the SQLite database file."""
        settings = self._settings or self.load()
        path = Path(settings.database)
        if not path.is_absolute():
            path = self.project_dir / path
        return path

    def save(self, settings: Optional[Settings] = None) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save. If None, saves current settings.
        """
        if settings:
            self._settings = settings

        if not self._settings:
            raise ValueError("No configuration to save")

        self.project_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            toml.dump(self._settings.model_dump(), f)

    def init(self) -> Settings:
        """Write a default config file.

        Raises:
            FileExistsError: If a config file already exists
        """
        if self.exists:
            raise FileExistsError(f"Config file already exists at {self.config_path}")

        settings = Settings()
        self.save(settings)
        return settings
