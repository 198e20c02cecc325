"""Entry values: assets and resources that know how to write themselves."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from resmerger.domain.keys import ResourceType

if TYPE_CHECKING:
    from resmerger.domain.keys import FullyQualifiedName, RelativeAssetPath
    from resmerger.domain.ports.writing import DataWritingVisitor, ResourceClassSink


@runtime_checkable
class DataAsset(Protocol):
    """Value stored under a ``RelativeAssetPath``."""

    @property
    def source(self) -> Path: ...

    def write_asset(self, key: RelativeAssetPath, writer: DataWritingVisitor) -> None: ...


@runtime_checkable
class DataResource(Protocol):
    """Value stored under a ``FullyQualifiedName``."""

    @property
    def source(self) -> Path: ...

    def write_resource(self, key: FullyQualifiedName, writer: DataWritingVisitor) -> None: ...

    def write_resource_to_class(
        self, key: FullyQualifiedName, class_writer: ResourceClassSink
    ) -> None: ...


type DataValue = DataAsset | DataResource


@dataclass(frozen=True, slots=True)
class AssetFile:
    """An asset file copied verbatim into the asset tree."""

    source: Path

    def write_asset(self, key: RelativeAssetPath, writer: DataWritingVisitor) -> None:
        writer.copy_asset(self.source, key.path)


@dataclass(frozen=True, slots=True)
class ResourceFile:
    """A resource backed by its own file, e.g. a drawable or a layout."""

    source: Path

    def write_resource(self, key: FullyQualifiedName, writer: DataWritingVisitor) -> None:
        # keep compound extensions such as ".9.png"
        extension = "".join(self.source.suffixes)
        writer.copy_resource(self.source, f"{key.directory_name()}/{key.name}{extension}")

    def write_resource_to_class(
        self, key: FullyQualifiedName, class_writer: ResourceClassSink
    ) -> None:
        class_writer.write_simple_resource(key.resource_type, key.name)


@dataclass(frozen=True, slots=True)
class XmlResource:
    """A resource declared inside a values file.

    ``xml`` is the serialized declaration, e.g. ``<string name="app">App</string>``.
    ``attrs`` lists the attribute names of a styleable and is empty otherwise.
    """

    source: Path
    xml: str
    attrs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.xml.strip():
            raise ValueError(f"Empty value declaration in {self.source}")

    def write_resource(self, key: FullyQualifiedName, writer: DataWritingVisitor) -> None:
        writer.define_value(key, self.xml)

    def write_resource_to_class(
        self, key: FullyQualifiedName, class_writer: ResourceClassSink
    ) -> None:
        if key.resource_type is ResourceType.STYLEABLE:
            class_writer.write_styleable_resource(key, self.attrs)
        else:
            class_writer.write_simple_resource(key.resource_type, key.name)
