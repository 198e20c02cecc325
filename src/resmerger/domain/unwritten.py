"""Merged data staged in memory until it is committed to a sink."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from resmerger.domain.merged_data import MergedData

if TYPE_CHECKING:
    from pathlib import Path

    from resmerger.domain.parsed_data import ParsedData
    from resmerger.domain.ports import (
        DataWriter,
        DataWritingVisitor,
        ResourceClassSink,
        SerializationQueue,
    )

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UnwrittenMergedData:
    """Primary and transitive data of one build unit, not yet written.

    Primary entries are always written before transitive ones. Keys shared by
    both partitions are not detected here; what a second write to the same
    destination does is up to the sink.
    """

    manifest: Path | None
    primary: ParsedData
    transitive: ParsedData

    @classmethod
    def of(
        cls, manifest: Path | None, primary: ParsedData, transitive: ParsedData
    ) -> UnwrittenMergedData:
        return cls(manifest=manifest, primary=primary, transitive=transitive)

    def write(self, writer: DataWriter) -> MergedData:
        """Write both partitions and the manifest, then flush ``writer`` once.

        The flush happens on every exit path. If writing fails and the flush
        fails as well, the write error is raised and the flush error is
        attached to it as a note.

        Raises:
            OSError: when the sink cannot write, copy or flush.
            MergingError: when the sink rejects a write as inconsistent.
        """

        try:
            _write_parsed_data(self.primary, writer)
            _write_parsed_data(self.transitive, writer)
            manifest = writer.copy_manifest(self.manifest) if self.manifest is not None else None
            merged = MergedData(
                resource_dir=writer.resource_directory(),
                asset_dir=writer.asset_directory(),
                manifest=manifest,
            )
        except BaseException as exc:
            _flush_after_failure(writer, exc)
            raise

        writer.flush()
        log.info(
            "Wrote merged data: primary=%s, transitive=%s, manifest=%s",
            len(self.primary),
            len(self.transitive),
            merged.manifest,
        )
        return merged

    def write_resource_class(self, class_writer: ResourceClassSink) -> None:
        """Emit the symbols of all resources, primary first, then flush once."""

        _write_resource_class_items(self.primary, class_writer)
        _write_resource_class_items(self.transitive, class_writer)
        class_writer.flush()

    def serialize_to(self, serializer: SerializationQueue) -> None:
        """Queue the primary entries for serialization.

        Transitive entries are owned by the dependencies that declared them and
        are cached there.
        """

        for key, asset in self.primary.iterate_asset_entries():
            serializer.queue_for_serialization(key, asset)
        for key, resource in self.primary.iterate_data_resource_entries():
            serializer.queue_for_serialization(key, resource)


def _write_parsed_data(data: ParsedData, writer: DataWritingVisitor) -> None:
    for key, asset in data.iterate_asset_entries():
        log.debug("Writing asset %s", key)
        asset.write_asset(key, writer)
    for key, resource in data.iterate_data_resource_entries():
        log.debug("Writing resource %s", key)
        resource.write_resource(key, writer)


def _write_resource_class_items(data: ParsedData, class_writer: ResourceClassSink) -> None:
    for key, resource in data.iterate_data_resource_entries():
        resource.write_resource_to_class(key, class_writer)


def _flush_after_failure(writer: DataWriter, error: BaseException) -> None:
    try:
        writer.flush()
    except Exception as flush_error:  # noqa: BLE001
        log.warning("Flush failed after an aborted write: %s", flush_error)
        error.add_note(f"Flushing the writer also failed: {flush_error!r}")
