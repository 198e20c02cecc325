"""Merge-semantic error definitions.

I/O failures are not represented here: they propagate as ``OSError`` so callers
can tell an environment problem from a build-logic problem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class MergingError(Exception):
    """Raised when merged data cannot be written consistently."""


class DestinationConflictError(MergingError):
    """Raised when two different payloads target the same destination."""

    def __init__(self, destination: Path | str, first: object, second: object) -> None:
        super().__init__(
            f"Conflicting writes to {destination}: {first!r} was written before {second!r}"
        )
        self.destination = destination
        self.first = first
        self.second = second
