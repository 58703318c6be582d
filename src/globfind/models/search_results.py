"""
Search results data models for globfind.

This module defines the collection that accumulates matched paths during a
walk and the record describing an entry the walk had to skip.
"""

import threading
from enum import Enum
from typing import Iterator, List, Set

from pydantic import BaseModel, Field


class SkipReason(Enum):
    """Classification of a traversal failure, used for diagnostics only."""
    ACCESS_DENIED = "Access Denied"
    UNHANDLED = "Unhandled Error"


class WalkError(BaseModel):
    """
    A filesystem entry the walk could not read.

    Walk errors are reported as they happen and then dropped; they are never
    collected into the search result.

    Attributes:
        path: Path reported by the traversal for the failed entry
        reason: Whether the failure looks permission related
        detail: Raw error text from the operating system
    """

    path: str = Field(..., description="Path of the entry that failed")
    reason: SkipReason = Field(..., description="Failure classification")
    detail: str = Field("", description="Raw error text")

    def format_message(self) -> str:
        """Get the diagnostic line printed for this skipped entry."""
        message = f"Skipping: {self.path} ({self.reason.value})"
        if self.reason is SkipReason.UNHANDLED and self.detail:
            message = f"{message} {self.detail}"
        return message

    def __str__(self) -> str:
        return self.format_message()


class MatchSet:
    """
    Unordered collection of matched paths filled concurrently.

    Match workers call add() from any thread; the lock is held only for the
    append itself. Readers should wait until the walk has finished, after
    which the collection no longer changes.
    """

    def __init__(self):
        self._paths: List[str] = []
        self._lock = threading.Lock()

    def add(self, path: str) -> None:
        """Append a matched path."""
        with self._lock:
            self._paths.append(path)

    @property
    def paths(self) -> List[str]:
        """Snapshot of the matched paths in insertion order."""
        with self._lock:
            return list(self._paths)

    def as_set(self) -> Set[str]:
        """Get the matched paths as a set, for order-insensitive comparison."""
        return set(self.paths)

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths

    def __bool__(self) -> bool:
        return len(self) > 0

    def __str__(self) -> str:
        return f"Found {len(self)} matches"
