"""Pydantic models describing cached entry payloads."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resmerger.domain.keys import ResourceType


class CacheBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class AssetKeyPayload(CacheBaseModel):
    kind: Literal["asset"] = "asset"
    path: str


class ResourceKeyPayload(CacheBaseModel):
    kind: Literal["resource"] = "resource"
    package: str
    resource_type: ResourceType
    name: str
    qualifiers: tuple[str, ...] = ()


class AssetFilePayload(CacheBaseModel):
    kind: Literal["asset_file"] = "asset_file"
    source: str


class ResourceFilePayload(CacheBaseModel):
    kind: Literal["resource_file"] = "resource_file"
    source: str


class XmlResourcePayload(CacheBaseModel):
    kind: Literal["xml_resource"] = "xml_resource"
    source: str
    xml: str
    attrs: tuple[str, ...] = ()

    @field_validator("xml")
    @classmethod
    def _require_xml(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("cached value declaration must not be blank")
        return value


KeyPayload = Annotated[AssetKeyPayload | ResourceKeyPayload, Field(discriminator="kind")]
ValuePayload = Annotated[
    AssetFilePayload | ResourceFilePayload | XmlResourcePayload, Field(discriminator="kind")
]


class SerializedEntry(CacheBaseModel):
    key: KeyPayload
    value: ValuePayload
