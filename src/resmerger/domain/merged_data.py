"""Result of a committed merge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class MergedData:
    """Merged data that has been flushed to durable storage."""

    resource_dir: Path
    asset_dir: Path
    manifest: Path | None = None
