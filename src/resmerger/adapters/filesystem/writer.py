"""Writer placing merged data into a resource tree on disk."""

from __future__ import annotations

import filecmp
import logging
import shutil
from typing import TYPE_CHECKING, Final

from resmerger.config.output import OutputLayout
from resmerger.domain.errors import DestinationConflictError

if TYPE_CHECKING:
    from pathlib import Path

    from resmerger.domain.keys import FullyQualifiedName

log = logging.getLogger(__name__)

MANIFEST_FILENAME: Final[str] = "AndroidManifest.xml"
VALUES_FILENAME: Final[str] = "values.xml"
VALUES_HEADER: Final[str] = '<?xml version="1.0" encoding="utf-8"?>\n<resources>\n'
VALUES_FOOTER: Final[str] = "</resources>\n"


class FilesystemDataWriter:
    """Copies files eagerly and writes values files on ``flush``.

    The first write to a destination wins. Writing the same content again is
    a no-op, writing different content raises ``DestinationConflictError``.
    """

    def __init__(self, *, resource_dir: Path, asset_dir: Path, manifest_dir: Path) -> None:
        self._resource_dir = resource_dir
        self._asset_dir = asset_dir
        self._manifest_dir = manifest_dir
        self._copied: dict[Path, Path] = {}
        self._values: dict[str, dict[FullyQualifiedName, str]] = {}
        self._dirty: set[str] = set()

    @classmethod
    def create_with_defaults(cls, output_dir: Path) -> FilesystemDataWriter:
        return cls.from_layout(OutputLayout.from_root(output_dir))

    @classmethod
    def from_layout(cls, layout: OutputLayout) -> FilesystemDataWriter:
        return cls(
            resource_dir=layout.resource_dir,
            asset_dir=layout.asset_dir,
            manifest_dir=layout.manifest_dir,
        )

    def resource_directory(self) -> Path:
        return self._resource_dir

    def asset_directory(self) -> Path:
        return self._asset_dir

    def copy_asset(self, source: Path, relative_destination: str) -> None:
        self._copy(source, self._asset_dir / relative_destination)

    def copy_resource(self, source: Path, relative_destination: str) -> None:
        self._copy(source, self._resource_dir / relative_destination)

    def define_value(self, key: FullyQualifiedName, xml_fragment: str) -> None:
        directory = key.directory_name()
        fragments = self._values.setdefault(directory, {})
        existing = fragments.get(key)
        if existing is not None:
            if existing == xml_fragment:
                log.debug("Skipping duplicate definition of %s", key)
                return
            raise DestinationConflictError(key, existing, xml_fragment)
        fragments[key] = xml_fragment
        self._dirty.add(directory)

    def copy_manifest(self, source: Path) -> Path:
        destination = self._manifest_dir / MANIFEST_FILENAME
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        return destination

    def flush(self) -> None:
        for directory in sorted(self._dirty):
            path = self._resource_dir / directory / VALUES_FILENAME
            path.parent.mkdir(parents=True, exist_ok=True)
            fragments = self._values[directory]
            body = "".join(f"  {fragments[key]}\n" for key in sorted(fragments))
            path.write_text(VALUES_HEADER + body + VALUES_FOOTER, encoding="utf-8")
            log.debug("Wrote %s values to %s", len(fragments), path)
        self._dirty.clear()

    def _copy(self, source: Path, destination: Path) -> None:
        previous = self._copied.get(destination)
        if previous is not None:
            if previous == source or filecmp.cmp(previous, source, shallow=False):
                log.debug("Skipping %s: %s was already written", source, destination)
                return
            raise DestinationConflictError(destination, previous, source)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        self._copied[destination] = source
