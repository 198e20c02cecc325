"""Domain port definitions for adapters."""

from __future__ import annotations

from .serialization import SerializationQueue
from .writing import DataWriter, DataWritingVisitor, ResourceClassSink

__all__ = [
    "DataWriter",
    "DataWritingVisitor",
    "ResourceClassSink",
    "SerializationQueue",
]
