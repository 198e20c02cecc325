"""Domain model of merged resource data."""

from __future__ import annotations

from .errors import DestinationConflictError, MergingError
from .keys import DataKey, FullyQualifiedName, RelativeAssetPath, ResourceType
from .merged_data import MergedData
from .parsed_data import ParsedData
from .unwritten import UnwrittenMergedData
from .values import AssetFile, DataAsset, DataResource, DataValue, ResourceFile, XmlResource

__all__ = [
    "AssetFile",
    "DataAsset",
    "DataKey",
    "DataResource",
    "DataValue",
    "DestinationConflictError",
    "FullyQualifiedName",
    "MergedData",
    "MergingError",
    "ParsedData",
    "RelativeAssetPath",
    "ResourceFile",
    "ResourceType",
    "UnwrittenMergedData",
    "XmlResource",
]
