"""Runtime settings for the validator, read from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

MAX_DEPTH_ENV = "SCHEMACHECK_MAX_DEPTH"
LOG_LEVEL_ENV = "SCHEMACHECK_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ValidatorConfigError(ValueError):
    """Raised when validator settings are invalid."""


@dataclass(frozen=True)
class ValidatorConfig:
    """Depth guard and log level used by the command line entry point."""

    max_depth: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
                raise ValidatorConfigError("max_depth must be an integer")
            if self.max_depth < 1:
                raise ValidatorConfigError("max_depth must be >= 1")
        if self.log_level not in _LOG_LEVELS:
            raise ValidatorConfigError(f"log_level must be one of {list(_LOG_LEVELS)}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ValidatorConfig":
        source = os.environ if env is None else env

        raw_depth = source.get(MAX_DEPTH_ENV, "").strip()
        max_depth: int | None = None
        if raw_depth:
            try:
                max_depth = int(raw_depth)
            except ValueError as exc:
                raise ValidatorConfigError(
                    f"{MAX_DEPTH_ENV} must be a positive integer"
                ) from exc

        log_level = source.get(LOG_LEVEL_ENV, "").strip().upper() or "WARNING"
        return cls(max_depth=max_depth, log_level=log_level)

    def with_max_depth(self, max_depth: int | None) -> "ValidatorConfig":
        """Return a copy with ``max_depth`` overridden when one is given."""
        if max_depth is None:
            return self
        return ValidatorConfig(max_depth=max_depth, log_level=self.log_level)
