"""Output tree layout for written merged data."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import require_setting

RESOURCE_DIR_NAME: Final[str] = "res"
ASSET_DIR_NAME: Final[str] = "assets"


@dataclass(frozen=True, slots=True)
class OutputLayout:
    """Directories a merged data write lands in."""

    resource_dir: Path
    asset_dir: Path
    manifest_dir: Path

    @classmethod
    def from_root(cls, root: Path) -> OutputLayout:
        return cls(
            resource_dir=root / RESOURCE_DIR_NAME,
            asset_dir=root / ASSET_DIR_NAME,
            manifest_dir=root,
        )


def get_output_layout() -> OutputLayout:
    root = Path(require_setting("output_dir"))
    return OutputLayout.from_root(root.expanduser().resolve())
