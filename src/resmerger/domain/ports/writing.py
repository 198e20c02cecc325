"""Ports receiving merged data writes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from resmerger.domain.keys import FullyQualifiedName, ResourceType


@runtime_checkable
class DataWritingVisitor(Protocol):
    """Sink that entry values write themselves into."""

    def copy_asset(self, source: Path, relative_destination: str) -> None: ...

    def copy_resource(self, source: Path, relative_destination: str) -> None: ...

    def define_value(self, key: FullyQualifiedName, xml_fragment: str) -> None: ...


@runtime_checkable
class DataWriter(DataWritingVisitor, Protocol):
    """Write sink for a whole merge commit.

    Writes are only durable once ``flush`` has returned.
    """

    def copy_manifest(self, source: Path) -> Path: ...

    def flush(self) -> None: ...

    def resource_directory(self) -> Path: ...

    def asset_directory(self) -> Path: ...


@runtime_checkable
class ResourceClassSink(Protocol):
    """Sink collecting resource symbols for a generated resource class."""

    def write_simple_resource(self, resource_type: ResourceType, name: str) -> None: ...

    def write_styleable_resource(self, key: FullyQualifiedName, attrs: Sequence[str]) -> None: ...

    def flush(self) -> None: ...
