"""Outcomes reported by the replication engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SyncOutcome:
    """Describe a completed sync of one album folder."""

    message: str
    source_path: str
    target_path: str
    files_copied: int
    directories_created: int


@dataclass(slots=True, frozen=True)
class UnsyncOutcome:
    """Describe a completed removal of one album folder."""

    message: str
    album_name: str
    target_path: str


__all__ = ["SyncOutcome", "UnsyncOutcome"]
