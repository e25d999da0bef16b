"""Configuration handling for git-desk"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_desk.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_DESK_PREFIX,
    DEFAULT_MAIN_BRANCH,
    DEFAULT_REMOTE,
    DEFAULT_STACK_COMMAND,
    DEFAULT_SUBMIT_BODY,
)
from git_desk.exceptions import ConfigError
from git_desk.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Config:
    """Configuration for git-desk with validation."""

    # Branch naming
    main_branch: str = DEFAULT_MAIN_BRANCH
    desk_prefix: str = DEFAULT_DESK_PREFIX
    remote: str = DEFAULT_REMOTE

    # Stacking tool
    stack_command: str = DEFAULT_STACK_COMMAND
    submit_body: str = DEFAULT_SUBMIT_BODY

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_main_branch()
        self._validate_desk_prefix()
        self._validate_remote()
        self._validate_stack_command()
        self._validate_submit_body()

    def _require_text(self, name: str) -> str:
        """Return the stripped value of a required string field."""
        value = getattr(self, name)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        return value.strip()

    def _validate_main_branch(self):
        """Validate main_branch is not empty."""
        self.main_branch = self._require_text("main_branch")

    def _validate_desk_prefix(self):
        """Validate desk_prefix is a plain, non-empty directory name prefix."""
        self.desk_prefix = self._require_text("desk_prefix")
        if "/" in self.desk_prefix:
            raise ValueError(f"desk_prefix cannot contain '/', got '{self.desk_prefix}'")

    def _validate_remote(self):
        """Validate remote is not empty."""
        self.remote = self._require_text("remote")

    def _validate_stack_command(self):
        """Validate stack_command is not empty."""
        self.stack_command = self._require_text("stack_command")

    def _validate_submit_body(self):
        """An empty body becomes a single space."""
        if not isinstance(self.submit_body, str):
            raise ValueError(f"submit_body must be a string, got {self.submit_body!r}")
        if not self.submit_body:
            self.submit_body = DEFAULT_SUBMIT_BODY

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "main_branch": self.main_branch,
            "desk_prefix": self.desk_prefix,
            "remote": self.remote,
            "stack_command": self.stack_command,
            "submit_body": self.submit_body,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "main_branch",
            "desk_prefix",
            "remote",
            "stack_command",
            "submit_body",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)


def get_config_path() -> Path:
    """Location of the JSON config file, honouring the GIT_DESK_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".git-desk" / "config.json"


def load_config(path: Optional[Path] = None, **overrides) -> Config:
    """Load configuration from the JSON config file, then apply overrides.

    A missing file is not an error; defaults are used. Overrides whose value
    is None are ignored so unset CLI flags do not clobber file values.

    Raises:
        ConfigError: If the file exists but is not a JSON object
        ValueError: If a configured value fails validation
    """
    config_path = path if path is not None else get_config_path()
    values: dict = {}

    if config_path.is_file():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(str(config_path), str(e)) from e
        if not isinstance(values, dict):
            raise ConfigError(str(config_path), "top-level value must be an object")
        logger.debug(f"Loaded config from {config_path}")
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    values.update({k: v for k, v in overrides.items() if v is not None})
    return Config.from_dict(values)
