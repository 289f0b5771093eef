"""
Centralized configuration for bwenv.

All configuration is loaded from environment variables with sensible defaults.

Usage:
    from bwenv.config import get_config
    cfg = get_config()
    print(cfg.folder)        # "bwenv" or $BWENV_FOLDER
    print(cfg.rbw.binary)    # "rbw" or $BWENV_RBW_BIN
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class RbwConfig:
    """How the rbw CLI is invoked."""

    binary: str = "rbw"
    show_spinner: bool = True


@dataclass(frozen=True)
class Config:
    """Top-level bwenv configuration."""

    # Vault folder that holds the notes
    folder: str = "bwenv"

    rbw: RbwConfig = field(default_factory=RbwConfig)


# Singleton
_config: Config | None = None


def get_config() -> Config:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config (for testing)."""
    global _config
    _config = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSE_VALUES


def _load_from_env() -> Config:
    """Load configuration from environment variables."""
    rbw = RbwConfig(
        binary=os.environ.get("BWENV_RBW_BIN", "rbw"),
        show_spinner=_env_flag("BWENV_SPINNER", True),
    )
    return Config(
        folder=os.environ.get("BWENV_FOLDER", "bwenv"),
        rbw=rbw,
    )
