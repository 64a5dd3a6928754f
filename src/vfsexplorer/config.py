"""Configuration loading and defaults for vfsexplorer."""

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def _toml_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes
    return json.dumps(value)


def get_config_dir() -> Path:
    """Get the vfsexplorer config directory (XDG-style)."""
    return Path.home() / ".config" / "vfsexplorer"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class LoggingConfig:
    """Log output configuration."""

    level: str = "WARNING"
    file: str = ""  # empty = no log output


@dataclass
class Config:
    """Application configuration."""

    server_url: str = "http://localhost:9000"
    default_path: str = ""  # empty = server default
    request_timeout: float = 30.0
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def get_default_path(self) -> str | None:
        """Get the starting directory, or None to let the server decide."""
        return self.default_path or None

    def get_log_file(self) -> Path | None:
        """Get the log file path, or None when logging is disabled."""
        if not self.logging.file:
            return None
        return Path(self.logging.file).expanduser()

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file or create defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            # Create default config file
            default_config = cls()
            default_config.save(config_path)
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        log_data = data.get("logging", {})
        log_config = LoggingConfig(
            level=str(log_data.get("level", "WARNING")).upper(),
            file=log_data.get("file", ""),
        )

        return cls(
            server_url=data.get("server_url", "http://localhost:9000").rstrip("/"),
            default_path=data.get("default_path", ""),
            request_timeout=float(data.get("request_timeout", 30.0)),
            logging=log_config,
        )

    def save(self, config_path: Path | None = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# vfsexplorer Configuration',
            '',
            '# Base URL of the listing backend (serves GET /vfs)',
            f'server_url = {_toml_string(self.server_url)}',
            '',
            '# Directory opened at startup; empty = server default',
            f'default_path = {_toml_string(self.default_path)}',
            '',
            '# Seconds to wait for a listing before giving up',
            f'request_timeout = {self.request_timeout}',
            '',
            '[logging]',
            f'level = {_toml_string(self.logging.level)}',
            f'file = {_toml_string(self.logging.file)}  # empty = disabled',
        ]

        config_path.write_text("\n".join(lines) + "\n")
