"""CLI configuration (environment-backed)."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ConfigError

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class CliConfig:
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def load_cli_config() -> CliConfig:
    cfg = CliConfig()
    level = os.environ.get("CONFSTORE_LOG_LEVEL", cfg.log_level).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid CONFSTORE_LOG_LEVEL: {level}")
    cfg.log_level = level
    return cfg
