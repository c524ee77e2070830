"""
Configuration for refactoring extraction.

Values come from keyword arguments or from REFMATCH_* environment
variables, optionally seeded from a .env file in the working directory.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

ENV_THRESHOLD = "REFMATCH_SIMILARITY_THRESHOLD"
ENV_LOG_LEVEL = "REFMATCH_LOG_LEVEL"
ENV_LOG_DIR = "REFMATCH_LOG_DIR"

DEFAULT_SIMILARITY_THRESHOLD = 0.6
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigurationError(ValueError):
    """Raised when configuration values cannot be used."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


def load_env(env_path: Optional[Path] = None) -> None:
    """Load .env from the working directory (or env_path) if present.
    Variables already set in the environment win.
    """
    if env_path is None:
        env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True)
class MatchingConfig:
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    def validate(self) -> List[str]:
        """
        Returns a list of validation error messages. Empty list means valid.
        """
        errors: List[str] = []

        threshold = self.similarity_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            errors.append("similarity_threshold must be a number")
        elif not math.isfinite(threshold):
            errors.append("similarity_threshold must be finite")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        return errors

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MatchingConfig":
        """
        Build a config from REFMATCH_* variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ConfigurationError: listing every invalid variable
        """
        if environ is None:
            environ = os.environ

        errors: List[str] = []
        threshold = DEFAULT_SIMILARITY_THRESHOLD
        raw_threshold = environ.get(ENV_THRESHOLD, "").strip()
        if raw_threshold:
            try:
                threshold = float(raw_threshold)
            except ValueError:
                errors.append(f"{ENV_THRESHOLD} is not a number: {raw_threshold!r}")

        log_level = environ.get(ENV_LOG_LEVEL, "").strip().upper() or "INFO"
        raw_dir = environ.get(ENV_LOG_DIR, "").strip()
        log_dir = Path(raw_dir) if raw_dir else None

        config = cls(similarity_threshold=threshold, log_level=log_level, log_dir=log_dir)
        errors.extend(config.validate())
        if errors:
            raise ConfigurationError(errors)
        return config
