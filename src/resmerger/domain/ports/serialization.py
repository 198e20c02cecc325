"""Ports for caching parsed data across processes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resmerger.domain.keys import DataKey
    from resmerger.domain.values import DataValue


@runtime_checkable
class SerializationQueue(Protocol):
    """Collects entries for later serialization; queueing never fails."""

    def queue_for_serialization(self, key: DataKey, value: DataValue) -> None: ...
