"""Filesystem sinks for merged data."""

from __future__ import annotations

from .resource_class import ResourceClassWriter
from .writer import FilesystemDataWriter

__all__ = ["FilesystemDataWriter", "ResourceClassWriter"]
