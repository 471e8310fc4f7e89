"""Core domain models for photos, tag entries, slides and slideshows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Orientation(str, Enum):
    """Photo orientation as encoded in the input catalog."""

    HORIZONTAL = "H"
    VERTICAL = "V"


@dataclass(frozen=True)
class Photo:
    """A single photo read from the catalog.

    `id` is the 0-based position of the photo among the non-empty input lines.
    """

    id: int
    orientation: Orientation
    tags: frozenset[str]

    @property
    def is_vertical(self) -> bool:
        """True for vertical photos, which must be paired on a slide."""
        return self.orientation is Orientation.VERTICAL


@dataclass
class TagEntry:
    """All photos carrying `tag`, in first-seen order."""

    tag: str
    photo_ids: list[int] = field(default_factory=list)

    @property
    def popularity(self) -> int:
        """Number of photos carrying the tag."""
        return len(self.photo_ids)


@dataclass(frozen=True)
class Slide:
    """One horizontal photo or a pair of vertical photos shown together."""

    photos: tuple[Photo, ...]
    tags: frozenset[str]

    def __post_init__(self) -> None:
        if len(self.photos) == 1:
            if self.photos[0].is_vertical:
                raise ValueError(f"Vertical photo {self.photos[0].id} cannot stand alone")
        elif len(self.photos) == 2:
            if not all(p.is_vertical for p in self.photos):
                raise ValueError(
                    "Paired slide requires two vertical photos, got ids "
                    f"{[p.id for p in self.photos]}"
                )
        else:
            raise ValueError(f"Slide must hold 1 or 2 photos, got {len(self.photos)}")

    @classmethod
    def horizontal(cls, photo: Photo) -> Slide:
        """Singleton slide for a horizontal photo."""
        return cls(photos=(photo,), tags=photo.tags)

    @classmethod
    def vertical(cls, first: Photo, second: Photo) -> Slide:
        """Slide for two vertical photos; tags are the union of both."""
        return cls(photos=(first, second), tags=first.tags | second.tags)

    @property
    def photo_ids(self) -> list[int]:
        return [p.id for p in self.photos]


@dataclass
class Slideshow:
    """Final ordered slides and their total interest factor."""

    slides: list[Slide] = field(default_factory=list)
    score: int = 0
