"""Photo catalog for a single input file.

A catalog owns its `TagIndex` and is built fresh for every file, so tag
popularity never leaks from one run into the next.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from core.models import Orientation, Photo
from core.tag_index import TagIndex


class PhotoCatalog:
    """All photos of one catalog file plus the tag index derived from them."""

    def __init__(self) -> None:
        self._photos: list[Photo] = []
        self.tag_index = TagIndex()

    @classmethod
    def from_photos(cls, photos: Iterable[Photo]) -> PhotoCatalog:
        """Build a catalog from photos whose ids already match their position."""
        catalog = cls()
        for photo in photos:
            if photo.id != len(catalog._photos):
                raise ValueError(
                    f"Photo id {photo.id} does not match its position {len(catalog._photos)}"
                )
            catalog._append(photo)
        return catalog

    def add(self, orientation: Orientation, tags: Iterable[str]) -> Photo:
        """Create the next photo, register its tags and return it."""
        photo = Photo(id=len(self._photos), orientation=orientation, tags=frozenset(tags))
        self._append(photo)
        return photo

    def _append(self, photo: Photo) -> None:
        self._photos.append(photo)
        self.tag_index.register(photo.id, photo.tags)

    def tag_score(self, photo: Photo) -> int:
        """Sum of the popularity of each of the photo's tags."""
        return sum(self.tag_index.popularity(tag) for tag in photo.tags)

    def get(self, photo_id: int) -> Photo:
        return self._photos[photo_id]

    @property
    def horizontal_count(self) -> int:
        return sum(1 for p in self._photos if not p.is_vertical)

    @property
    def vertical_count(self) -> int:
        return sum(1 for p in self._photos if p.is_vertical)

    def __len__(self) -> int:
        return len(self._photos)

    def __iter__(self) -> Iterator[Photo]:
        return iter(self._photos)
