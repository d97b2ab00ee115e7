"""
Runtime configuration for the command-line front end.

Settings are read from environment variables; command-line flags override
them. The library modules never read the environment themselves and never
install logging handlers, only ``configure_logging`` does.

Environment variables:
    GRAPHER_LOG_LEVEL: Standard logging level name (default WARNING)
    GRAPHER_COMMENT_PREFIX: Comment marker for edge-list files (default "#")
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError
from .core.loader import DEFAULT_COMMENT_PREFIX

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Configuration values for a CLI run.

    Attributes:
        log_level (str): Name of the root logging level
        comment_prefix (str): Edge-list comment marker
    """

    log_level: str = "WARNING"
    comment_prefix: str = DEFAULT_COMMENT_PREFIX

    def __post_init__(self):
        """Validate settings after initialization."""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}', expected one of {', '.join(LOG_LEVELS)}"
            )
        if not self.comment_prefix:
            raise ConfigurationError("comment_prefix must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Create settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("GRAPHER_LOG_LEVEL", "WARNING"),
            comment_prefix=env.get("GRAPHER_COMMENT_PREFIX", DEFAULT_COMMENT_PREFIX),
        )


def configure_logging(settings: Settings) -> None:
    """Install a stderr handler and set the root level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, settings.log_level))
