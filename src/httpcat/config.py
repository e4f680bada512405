"""
Configuration management for httpcat.

Loads the identification headers and display settings from environment
variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass

from dotenv import load_dotenv


ENV_PREFIX = "HTTPCAT_"

# Check common locations for .env, first match wins
ENV_LOCATIONS = [
    Path.home() / ".httpcat" / ".env",
    Path.home() / ".config" / "httpcat" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found. Returns its path, if any."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every request in one invocation."""

    # Marker header identifying this client
    marker_header: str = "X-Powered-By"
    marker_value: str = "Python"

    user_agent: str = "Python Httpie"

    # Pygments style used for highlighted bodies
    theme: str = "monokai"

    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            self.marker_header: self.marker_value,
            "User-Agent": self.user_agent,
        }

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        defaults = cls()
        return cls(
            marker_header=os.getenv(f"{ENV_PREFIX}MARKER_HEADER", defaults.marker_header),
            marker_value=os.getenv(f"{ENV_PREFIX}MARKER_VALUE", defaults.marker_value),
            user_agent=os.getenv(f"{ENV_PREFIX}USER_AGENT", defaults.user_agent),
            theme=os.getenv(f"{ENV_PREFIX}THEME", defaults.theme),
        )


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = ClientConfig.from_env()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
