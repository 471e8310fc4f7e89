"""Append-only index from tag to the photos carrying it."""

from __future__ import annotations

from collections.abc import Iterable

from core.models import TagEntry


class TagIndex:
    """Maps each tag to a `TagEntry` listing photo ids in first-seen order."""

    def __init__(self) -> None:
        self._entries: dict[str, TagEntry] = {}

    def register(self, photo_id: int, tags: Iterable[str]) -> None:
        """Append `photo_id` to every tag entry, creating entries on first use."""
        seen: set[str] = set()
        for tag in tags:
            if tag in seen:
                continue
            seen.add(tag)
            entry = self._entries.get(tag)
            if entry is None:
                entry = TagEntry(tag=tag)
                self._entries[tag] = entry
            entry.photo_ids.append(photo_id)

    def popularity(self, tag: str) -> int:
        """Number of distinct photos carrying `tag` (0 when unknown)."""
        entry = self._entries.get(tag)
        return entry.popularity if entry is not None else 0

    def get(self, tag: str) -> TagEntry | None:
        return self._entries.get(tag)

    def entries(self) -> list[TagEntry]:
        """Tag entries in first-seen order."""
        return list(self._entries.values())

    def by_popularity(self) -> list[TagEntry]:
        """Tag entries by descending popularity; ties keep first-seen order."""
        return sorted(self._entries.values(), key=lambda e: -e.popularity)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries
