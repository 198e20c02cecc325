"""Immutable partitions of parsed assets and resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from resmerger.domain.keys import DataKey, FullyQualifiedName, RelativeAssetPath
    from resmerger.domain.values import DataAsset, DataResource

type _Entries[K, V] = Mapping[K, V] | Iterable[tuple[K, V]]


def _pairs[K, V](entries: _Entries[K, V]) -> tuple[tuple[K, V], ...]:
    return tuple(entries.items() if isinstance(entries, Mapping) else entries)


def _require_unique_keys(entries: Iterable[tuple[object, object]], kind: str) -> None:
    seen: set[object] = set()
    for key, _ in entries:
        if key in seen:
            raise ValueError(f"Duplicate {kind} key in parsed data: {key}")
        seen.add(key)


@dataclass(frozen=True, slots=True, eq=False)
class ParsedData:
    """Already merged data of one build layer, split into assets and resources.

    Keys are unique within a partition. Iteration follows insertion order so
    writes stay reproducible; equality ignores that order.
    """

    assets: tuple[tuple[RelativeAssetPath, DataAsset], ...] = ()
    resources: tuple[tuple[FullyQualifiedName, DataResource], ...] = ()

    def __post_init__(self) -> None:
        _require_unique_keys(self.assets, "asset")
        _require_unique_keys(self.resources, "resource")

    @classmethod
    def of(
        cls,
        *,
        assets: _Entries[RelativeAssetPath, DataAsset] = (),
        resources: _Entries[FullyQualifiedName, DataResource] = (),
    ) -> ParsedData:
        return cls(
            assets=_pairs(assets),
            resources=_pairs(resources),
        )

    @classmethod
    def empty(cls) -> ParsedData:
        return cls()

    def iterate_asset_entries(self) -> Iterator[tuple[RelativeAssetPath, DataAsset]]:
        return iter(self.assets)

    def iterate_data_resource_entries(
        self,
    ) -> Iterator[tuple[FullyQualifiedName, DataResource]]:
        return iter(self.resources)

    @property
    def asset_count(self) -> int:
        return len(self.assets)

    @property
    def resource_count(self) -> int:
        return len(self.resources)

    def __len__(self) -> int:
        return self.asset_count + self.resource_count

    def __contains__(self, key: object) -> bool:
        return key in self.keys()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ParsedData):
            return NotImplemented
        return dict(self.assets) == dict(other.assets) and dict(self.resources) == dict(
            other.resources
        )

    def __hash__(self) -> int:
        return hash((frozenset(self.assets), frozenset(self.resources)))

    def __repr__(self) -> str:
        assets = ", ".join(f"{key}={value!r}" for key, value in self.assets)
        resources = ", ".join(f"{key}={value!r}" for key, value in self.resources)
        return f"ParsedData(assets={{{assets}}}, resources={{{resources}}})"

    def keys(self) -> tuple[DataKey, ...]:
        return (*(key for key, _ in self.assets), *(key for key, _ in self.resources))
