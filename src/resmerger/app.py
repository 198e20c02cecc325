"""Application services committing merged data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resmerger.adapters.filesystem import FilesystemDataWriter, ResourceClassWriter
from resmerger.adapters.sqlalchemy import SqlAlchemyDataSerializer, read_parsed_data
from resmerger.config import get_output_layout

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from resmerger.adapters.sqlalchemy import SqlAlchemyCacheUnitOfWork
    from resmerger.config import OutputLayout
    from resmerger.domain import MergedData, ParsedData, UnwrittenMergedData

log = logging.getLogger(__name__)


def write_merged_data(
    data: UnwrittenMergedData, *, layout: OutputLayout | None = None
) -> MergedData:
    """Write merged data into ``layout``, defaulting to ``RESMERGER_OUTPUT_DIR``."""

    resolved_layout = layout or get_output_layout()
    return data.write(FilesystemDataWriter.from_layout(resolved_layout))


def write_resource_class(data: UnwrittenMergedData, *, package: str, output_dir: Path) -> Path:
    """Generate the resource class of merged data and return its path."""

    writer = ResourceClassWriter(package=package, output_dir=output_dir)
    data.write_resource_class(writer)
    return writer.path


def cache_primary_data(
    data: UnwrittenMergedData,
    *,
    cache_key: str,
    unit_of_work_factory: Callable[[], SqlAlchemyCacheUnitOfWork],
) -> int:
    """Store the primary entries of ``data`` under ``cache_key``."""

    serializer = SqlAlchemyDataSerializer()
    data.serialize_to(serializer)
    with unit_of_work_factory() as uow:
        stored = serializer.flush(uow.session, cache_key=cache_key)
        uow.commit()
    log.info("Cached %s primary entries under %s", stored, cache_key)
    return stored


def load_cached_data(
    cache_key: str,
    *,
    unit_of_work_factory: Callable[[], SqlAlchemyCacheUnitOfWork],
) -> ParsedData:
    """Read back parsed data cached by ``cache_primary_data``."""

    with unit_of_work_factory() as uow:
        return read_parsed_data(uow.session, cache_key)
