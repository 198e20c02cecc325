"""Translate between domain entries and cached payloads."""

from __future__ import annotations

from functools import singledispatch
from pathlib import Path

from resmerger.adapters.sqlalchemy.mappings import KeyKind
from resmerger.adapters.sqlalchemy.schema import (
    AssetFilePayload,
    AssetKeyPayload,
    ResourceFilePayload,
    ResourceKeyPayload,
    SerializedEntry,
    XmlResourcePayload,
)
from resmerger.domain.keys import FullyQualifiedName, RelativeAssetPath
from resmerger.domain.values import AssetFile, ResourceFile, XmlResource


@singledispatch
def key_to_payload(key: object) -> AssetKeyPayload | ResourceKeyPayload:
    raise TypeError(f"Cannot serialize key of type {type(key).__name__}")


@key_to_payload.register
def _(key: RelativeAssetPath) -> AssetKeyPayload:
    return AssetKeyPayload(path=key.path)


@key_to_payload.register
def _(key: FullyQualifiedName) -> ResourceKeyPayload:
    return ResourceKeyPayload(
        package=key.package,
        resource_type=key.resource_type,
        name=key.name,
        qualifiers=key.qualifiers,
    )


@singledispatch
def value_to_payload(
    value: object,
) -> AssetFilePayload | ResourceFilePayload | XmlResourcePayload:
    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


@value_to_payload.register
def _(value: AssetFile) -> AssetFilePayload:
    return AssetFilePayload(source=str(value.source))


@value_to_payload.register
def _(value: ResourceFile) -> ResourceFilePayload:
    return ResourceFilePayload(source=str(value.source))


@value_to_payload.register
def _(value: XmlResource) -> XmlResourcePayload:
    return XmlResourcePayload(source=str(value.source), xml=value.xml, attrs=value.attrs)


def entry_to_payload(
    key: RelativeAssetPath | FullyQualifiedName,
    value: AssetFile | ResourceFile | XmlResource,
) -> SerializedEntry:
    return SerializedEntry(key=key_to_payload(key), value=value_to_payload(value))


def key_kind(key: RelativeAssetPath | FullyQualifiedName) -> KeyKind:
    return KeyKind.ASSET if isinstance(key, RelativeAssetPath) else KeyKind.RESOURCE


def key_text(key: RelativeAssetPath | FullyQualifiedName) -> str:
    return key.path if isinstance(key, RelativeAssetPath) else key.to_pretty_string()


def asset_from_payload(entry: SerializedEntry) -> tuple[RelativeAssetPath, AssetFile]:
    if not isinstance(entry.key, AssetKeyPayload) or not isinstance(
        entry.value, AssetFilePayload
    ):
        raise ValueError(f"Not an asset entry: {entry!r}")
    return RelativeAssetPath(entry.key.path), AssetFile(source=Path(entry.value.source))


def resource_from_payload(
    entry: SerializedEntry,
) -> tuple[FullyQualifiedName, ResourceFile | XmlResource]:
    if not isinstance(entry.key, ResourceKeyPayload):
        raise ValueError(f"Not a resource entry: {entry!r}")
    key = FullyQualifiedName(
        package=entry.key.package,
        resource_type=entry.key.resource_type,
        name=entry.key.name,
        qualifiers=entry.key.qualifiers,
    )
    value = entry.value
    if isinstance(value, ResourceFilePayload):
        return key, ResourceFile(source=Path(value.source))
    if isinstance(value, XmlResourcePayload):
        return key, XmlResource(source=Path(value.source), xml=value.xml, attrs=value.attrs)
    raise ValueError(f"Resource {key} has an asset payload")
