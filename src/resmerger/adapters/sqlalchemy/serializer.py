"""Serialized data cache backed by SQLAlchemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select

from resmerger.adapters.sqlalchemy.mappings import KeyKind, serialized_entry_table
from resmerger.adapters.sqlalchemy.schema import SerializedEntry
from resmerger.adapters.sqlalchemy.translator import (
    asset_from_payload,
    entry_to_payload,
    key_kind,
    key_text,
    resource_from_payload,
)
from resmerger.domain.parsed_data import ParsedData

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from resmerger.domain.keys import DataKey
    from resmerger.domain.values import DataValue

log = logging.getLogger(__name__)


class SqlAlchemyDataSerializer:
    """Queues entries and stores them under a cache key on ``flush``.

    Queueing the same key twice keeps the later value. Rows are written in key
    order so the same data always produces the same cache contents.
    """

    def __init__(self) -> None:
        self._entries: dict[DataKey, DataValue] = {}

    def queue_for_serialization(self, key: DataKey, value: DataValue) -> None:
        self._entries[key] = value

    @property
    def queued(self) -> int:
        return len(self._entries)

    def flush(self, session: Session, *, cache_key: str) -> int:
        """Replace the rows stored under ``cache_key`` with the queued entries."""

        ordered = sorted(self._entries.items(), key=lambda item: _sort_key(item[0]))
        rows = [
            {
                "cache_key": cache_key,
                "position": position,
                "key_kind": key_kind(key),
                "key": key_text(key),
                "payload": entry_to_payload(key, value).model_dump_json(),
            }
            for position, (key, value) in enumerate(ordered)
        ]
        session.execute(
            delete(serialized_entry_table).where(serialized_entry_table.c.cache_key == cache_key)
        )
        if rows:
            session.execute(insert(serialized_entry_table), rows)
        log.debug("Serialized %s entries under %s", len(rows), cache_key)
        return len(rows)


def read_parsed_data(session: Session, cache_key: str) -> ParsedData:
    """Rebuild the parsed data stored under ``cache_key``."""

    stmt = (
        select(serialized_entry_table.c.key_kind, serialized_entry_table.c.payload)
        .where(serialized_entry_table.c.cache_key == cache_key)
        .order_by(serialized_entry_table.c.position)
    )
    assets = []
    resources = []
    for kind, payload in session.execute(stmt):
        entry = SerializedEntry.model_validate_json(payload)
        if kind == KeyKind.ASSET:
            assets.append(asset_from_payload(entry))
        else:
            resources.append(resource_from_payload(entry))
    return ParsedData.of(assets=assets, resources=resources)


def _sort_key(key: DataKey) -> tuple[str, str]:
    return key_kind(key).value, key_text(key)
