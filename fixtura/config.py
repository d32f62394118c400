"""
Config system - layered settings for blueprint construction.

Merge precedence (later overrides earlier):
defaults < .env file < FIXTURA_* environment variables < manual overrides
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from dotenv import dotenv_values


@dataclass(frozen=True)
class FixturaSettings:
    """Active settings for blueprint construction."""

    serial_format: str = "{:04d}"
    log_level: Optional[str] = None

    def format_serial(self, number: int) -> str:
        return self.serial_format.format(number)


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources with precedence:
    overrides > environment variables > .env file > defaults
    """

    def __init__(self, env_prefix: str = "FIXTURA_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        env_prefix: str = "FIXTURA_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "ConfigLoader":
        """
        Load configuration from every source.

        Args:
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Configured ConfigLoader instance
        """
        loader = cls(env_prefix=env_prefix)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader.config_data.update(overrides)

        return loader

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        env_path = Path(path)
        if not env_path.exists():
            return

        for key, value in dotenv_values(env_path).items():
            if value is not None and key.startswith(self.env_prefix):
                self._set(key, value)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set(key, value)

    def _set(self, key: str, value: str):
        """Convert FIXTURA_SERIAL_FORMAT to ``serial_format``."""
        self.config_data[key[len(self.env_prefix):].lower()] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config_data.get(key, default)

    def to_settings(self) -> FixturaSettings:
        """Build settings from the known keys, ignoring the rest."""
        known = {f.name for f in fields(FixturaSettings)}
        return FixturaSettings(**{k: v for k, v in self.config_data.items() if k in known})


_active: Optional[FixturaSettings] = None


def get_settings() -> FixturaSettings:
    """Return the active settings, loading them from the environment once."""
    global _active
    if _active is None:
        set_settings(ConfigLoader.load().to_settings())
    return _active


def set_settings(settings: FixturaSettings) -> None:
    global _active
    _active = settings
    if settings.log_level:
        logging.getLogger("fixtura").setLevel(settings.log_level.upper())


@contextmanager
def override_settings(**overrides: Any) -> Iterator[FixturaSettings]:
    """
    Temporarily replace settings values.

    Usage::

        with override_settings(serial_format="{:06d}"):
            post = Post.make()
    """
    previous = get_settings()
    set_settings(replace(previous, **overrides))
    try:
        yield get_settings()
    finally:
        set_settings(previous)
