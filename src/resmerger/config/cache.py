"""Location of the serialized data cache."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_setting

APP_DIR_NAME: Final[str] = "resmerger"
CACHE_FILENAME: Final[str] = "merged-data-cache.db"


@dataclass(frozen=True, slots=True)
class CacheConfig:
    uri: str

    @classmethod
    def in_directory(cls, directory: Path) -> CacheConfig:
        """Use a SQLite file inside ``directory``, creating the directory."""

        directory = directory.expanduser().resolve()
        directory.mkdir(parents=True, exist_ok=True)
        return cls(uri=f"sqlite+pysqlite:///{directory / CACHE_FILENAME}")


def default_cache_dir() -> Path:
    base = os.getenv("XDG_CACHE_HOME")
    return (Path(base) if base else Path.home() / ".cache") / APP_DIR_NAME


def get_cache_config() -> CacheConfig:
    """Resolve the cache from ``RESMERGER_CACHE_URI`` or ``RESMERGER_CACHE_DIR``.

    An explicit URI wins. Otherwise the cache is a SQLite file in the cache
    directory, which defaults to ``$XDG_CACHE_HOME/resmerger``.
    """

    uri = optional_setting("cache_uri")
    if uri is not None:
        return CacheConfig(uri=uri)
    directory = optional_setting("cache_dir")
    return CacheConfig.in_directory(Path(directory) if directory else default_cache_dir())
