"""Core service interfaces and shared data structures.

This module defines the strategy protocols the pipeline is assembled from and
the simple dataclasses passed between its stages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from core.catalog import PhotoCatalog
from core.models import Photo, Slide


@dataclass(frozen=True)
class RankedPhoto:
    """A photo paired with the score its ranking policy assigned it.

    Attributes:
        photo: The ranked photo.
        tag_score: Derived tag score, or 0 for policies that do not compute one.
    """

    photo: Photo
    tag_score: int = 0


@dataclass
class SlideSet:
    """Slides built from a ranked photo sequence, split by orientation.

    Attributes:
        horizontal: Singleton slides in ranked order.
        vertical: Paired vertical slides in ranked order.
        dropped: Trailing vertical photo left without a partner, if any.
    """

    horizontal: list[Slide] = field(default_factory=list)
    vertical: list[Slide] = field(default_factory=list)
    dropped: list[Photo] = field(default_factory=list)

    def in_construction_order(self) -> list[Slide]:
        """Horizontal slides followed by vertical slides."""
        return [*self.horizontal, *self.vertical]

    def __len__(self) -> int:
        return len(self.horizontal) + len(self.vertical)


@dataclass
class FileResult:
    """Outcome of processing one catalog file.

    Attributes:
        input_path: Catalog file that was processed.
        output_path: Written slideshow file, or None when processing failed.
        ranking: Name of the ranking policy used.
        sequencing: Name of the sequencing policy used.
        photo_count: Photos read from the catalog.
        slide_count: Slides in the final sequence.
        dropped_count: Vertical photos left off every slide.
        score: Total interest factor of the slideshow.
        seconds: Wall time spent on the file.
        error: Failure description, or None on success.
    """

    input_path: str
    output_path: str | None
    ranking: str
    sequencing: str
    photo_count: int = 0
    slide_count: int = 0
    dropped_count: int = 0
    score: int = 0
    seconds: float = 0.0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReportRepository(Protocol):
    """Persists the results of a batch run."""

    def save(self, path: str, results: list[FileResult]) -> None:
        """Write `results` to `path`."""
        raise NotImplementedError


class RankingStrategy(Protocol):
    """Orders every photo of a catalog before slides are built."""

    name: str

    def rank(self, catalog: PhotoCatalog) -> list[RankedPhoto]:
        """Return a total order over the catalog's photos."""
        raise NotImplementedError


class SequencingStrategy(Protocol):
    """Merges horizontal and vertical slides into the final sequence."""

    name: str

    def sequence(self, slide_set: SlideSet) -> list[Slide]:
        """Return every slide of `slide_set` in display order."""
        raise NotImplementedError
