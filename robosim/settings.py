"""Process-wide record of the configuration file in use."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class _Settings:
    config_path: str = ""


_settings = _Settings()


def set_config_path(path: str | os.PathLike[str]) -> None:
    """Remember ``path`` as the current configuration file."""
    _settings.config_path = os.fspath(path)


def get_config_path() -> str:
    """Return the configuration file path last set, or an empty string."""
    return _settings.config_path