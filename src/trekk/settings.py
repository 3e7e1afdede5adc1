"""Application settings, read from the environment and the command line."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from trekk.core.locale import NotationLocale, get_locale
from trekk.core.notation.fen import STARTING_FEN

ENV_LANGUAGE = "TREKK_LANGUAGE"
ENV_LOG_LEVEL = "TREKK_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Notation
    language: str = "Norwegian"

    # Logging
    log_level: str = "WARNING"

    # Position used when no FEN is given
    start_fen: str = STARTING_FEN

    def __post_init__(self) -> None:
        get_locale(self.language)
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}; choose from {_LOG_LEVELS}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            language=env.get(ENV_LANGUAGE, defaults.language),
            log_level=env.get(ENV_LOG_LEVEL, defaults.log_level),
        )

    @property
    def locale(self) -> NotationLocale:
        return get_locale(self.language)

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(levelname)s %(name)s: %(message)s",
        )
