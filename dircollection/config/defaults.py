from __future__ import annotations

from dircollection.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()
