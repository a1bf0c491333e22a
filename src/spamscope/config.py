# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating SpamScope configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spamscope/  (default: ~/.config/spamscope/)
#   - State:   $XDG_STATE_HOME/spamscope/   (default: ~/.local/state/spamscope/)
#
# Files:
#   - config.toml: User configuration (classifier URL, export directory)
#   - spamscope.log: Debug log (in state directory, only with --debug)
#
# Environment:
#   - SPAMSCOPE_API_URL: Overrides [api] base_url
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spamscope"

# Environment variable that overrides the classifier URL
API_URL_ENV = "SPAMSCOPE_API_URL"

DEFAULT_API_URL = "http://localhost:8000"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for SpamScope.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spamscope/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for SpamScope.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spamscope/
    This is where the debug log lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def default_export_dir() -> Path:
    """~/Downloads if it exists, otherwise the home directory."""
    downloads = Path.home() / "Downloads"
    if downloads.is_dir():
        return downloads
    return Path.home()


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class ApiConfig:
    """
    Where and how to reach the classifier service.

    Attributes:
        base_url: Service root. Endpoints are appended to this.
        timeout: Seconds to wait for a response. 0 means no timeout.
    """
    base_url: str = DEFAULT_API_URL
    timeout: float = 0

    @property
    def request_timeout(self) -> float | None:
        """Timeout in the form requests expects (None = wait forever)."""
        return self.timeout if self.timeout > 0 else None


@dataclass
class ExportConfig:
    """
    Configuration for exported analyses.

    Attributes:
        directory: Where export files are written. Empty string means
                   ~/Downloads (or home if there is no Downloads folder).
    """
    directory: str = ""

    @property
    def path(self) -> Path:
        """Resolved export directory."""
        if self.directory:
            return Path(self.directory).expanduser()
        return default_export_dir()


@dataclass
class Config:
    """
    Main configuration container for SpamScope.

    Attributes:
        api: Classifier service settings.
        export: Export settings.

    Usage:
        >>> config = Config.load()
        >>> config.api.base_url
        'http://localhost:8000'
    """
    api: ApiConfig = field(default_factory=ApiConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the debug log."""
        return get_xdg_state_home() / "spamscope.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from the config file.

        If the config file doesn't exist, returns default configuration.
        The SPAMSCOPE_API_URL environment variable wins over the file.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if config_path.exists():
            try:
                with open(config_path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file: {e}") from e
            config = cls._from_dict(data)
        else:
            # No config file yet - use defaults
            config = cls()

        env_url = os.environ.get(API_URL_ENV)
        if env_url:
            config.api.base_url = env_url

        return config

    def save(self, path: Path | None = None) -> Path:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.

        Returns:
            The path written.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

        return config_path

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type.
        """
        api = data.get("api", {})
        export = data.get("export", {})

        base_url = api.get("base_url", DEFAULT_API_URL)
        timeout = api.get("timeout", 0)
        directory = export.get("directory", "")

        if not isinstance(base_url, str) or not base_url:
            raise ConfigError("[api] base_url must be a non-empty string")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise ConfigError("[api] timeout must be a non-negative number")
        if not isinstance(directory, str):
            raise ConfigError("[export] directory must be a string")

        return cls(
            api=ApiConfig(base_url=base_url, timeout=timeout),
            export=ExportConfig(directory=directory),
        )

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "api": {
                "base_url": self.api.base_url,
                "timeout": self.api.timeout,
            },
            "export": {
                "directory": self.export.directory,
            },
        }


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Debug log:    {Config.log_file_path()}")
