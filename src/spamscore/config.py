# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating spamscore configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spamscore/  (default: ~/.config/spamscore/)
#   - State:   $XDG_STATE_HOME/spamscore/   (default: ~/.local/state/spamscore/)
#
# Files:
#   - config.toml: User configuration (data paths, labels, threshold)
#   - spamscore.log: Log file (in state directory; the TUI owns the terminal)
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from spamscore.core.errors import SpamScoreError
from spamscore.spam.scorer import DEFAULT_THRESHOLD
from spamscore.storage.dataset import DEFAULT_SEED
from spamscore.storage.stopwords import bundled_stopwords_path


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spamscore"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for spamscore.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spamscore/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for spamscore.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spamscore/
    This is where the log file lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates all required XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DataConfig:
    """
    Where the reference data comes from.

    Attributes:
        stopwords_path: Stop word list, one word per line.
                        Empty string means the list bundled with spamscore.
        dataset_path: Labeled CSV with label and message columns.
                      Relative paths are resolved against the working directory.
        spam_label: Label value of spam rows in the dataset.
        ham_label: Label value of human (ham) rows in the dataset.
        encoding: Text encoding of the dataset. The SMS spam collection
                  is latin-1.
        seed: Seed for the shuffle that balances the two corpora.
    """
    stopwords_path: str = ""
    dataset_path: str = "spam.csv"
    spam_label: str = "spam"
    ham_label: str = "ham"
    encoding: str = "latin-1"
    seed: int = DEFAULT_SEED

    @property
    def stopwords_file(self) -> Path:
        """Resolved stop word path, falling back to the bundled list."""
        if self.stopwords_path:
            return Path(self.stopwords_path).expanduser()
        return bundled_stopwords_path()

    @property
    def dataset_file(self) -> Path:
        """Resolved dataset path."""
        return Path(self.dataset_path).expanduser()


@dataclass
class ScoringConfig:
    """
    Configuration for the scorer.

    Attributes:
        threshold: Scores strictly above this are classified as spam.
                   Unlike a probability cutoff this isn't limited to 0-1.
    """
    threshold: float = DEFAULT_THRESHOLD


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
        show_tokens: Show the normalized tokens under each result.
    """
    theme: str = "dark"
    show_tokens: bool = True


@dataclass
class Config:
    """
    Main configuration container for spamscore.

    Attributes:
        data: Reference data locations and dataset format.
        scoring: Scorer configuration.
        ui: User interface configuration.

    Usage:
        >>> config = Config.load()
        >>> config.scoring.threshold
        0.7787889031513116
    """
    data: DataConfig = field(default_factory=DataConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the log file."""
        return get_xdg_state_home() / "spamscore.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a config file.

        Args:
            path: File to write. Uses the XDG location if None.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type.
        """
        config = cls()

        # Data settings
        section = _section(data, "data")
        config.data = DataConfig(
            stopwords_path=_get(section, "data", "stopwords_path", str, ""),
            dataset_path=_get(section, "data", "dataset_path", str, "spam.csv"),
            spam_label=_get(section, "data", "spam_label", str, "spam"),
            ham_label=_get(section, "data", "ham_label", str, "ham"),
            encoding=_get(section, "data", "encoding", str, "latin-1"),
            seed=_get(section, "data", "seed", int, DEFAULT_SEED),
        )

        # Scoring settings (TOML may give an int for a whole-number threshold)
        section = _section(data, "scoring")
        config.scoring = ScoringConfig(
            threshold=float(
                _get(section, "scoring", "threshold", (int, float), DEFAULT_THRESHOLD)
            ),
        )

        # UI settings
        section = _section(data, "ui")
        config.ui = UIConfig(
            theme=_get(section, "ui", "theme", str, "dark"),
            show_tokens=_get(section, "ui", "show_tokens", bool, True),
        )

        if config.data.spam_label == config.data.ham_label:
            raise ConfigError("data.spam_label and data.ham_label must differ")

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        data: dict[str, Any] = {}

        data["data"] = {
            "stopwords_path": self.data.stopwords_path,
            "dataset_path": self.data.dataset_path,
            "spam_label": self.data.spam_label,
            "ham_label": self.data.ham_label,
            "encoding": self.data.encoding,
            "seed": self.data.seed,
        }

        data["scoring"] = {
            "threshold": self.scoring.threshold,
        }

        data["ui"] = {
            "theme": self.ui.theme,
            "show_tokens": self.ui.show_tokens,
        }

        return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Fetch one [section] table, defaulting to empty."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {section!r}")
    return section


def _get(section: dict[str, Any], name: str, key: str, kind, default):
    """Read one setting, checking its type."""
    value = section.get(key, default)
    # bool is an int subclass; don't let `seed = true` through
    if isinstance(value, bool) and kind is not bool:
        raise ConfigError(f"{name}.{key} must not be a boolean")
    if not isinstance(value, kind):
        raise ConfigError(f"{name}.{key} has the wrong type: {value!r}")
    return value


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(SpamScoreError):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths(config: Config | None = None) -> None:
    """
    Print all paths for debugging.
    Useful for users wondering where their config and data come from.
    """
    config = config or Config()
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Log file:     {Config.log_file_path()}")
    print(f"Stop words:   {config.data.stopwords_file}")
    print(f"Dataset:      {config.data.dataset_file}")
