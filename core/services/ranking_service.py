"""Photo ranking policies applied before slide construction.

Both policies produce a deterministic total order over the catalog. Python's
sort is stable, so photos with equal keys keep their input order.
"""

from __future__ import annotations

from core.catalog import PhotoCatalog
from core.services.interfaces import RankedPhoto


class TagScoreRanking:
    """Photos with the highest tag score come first."""

    name = "tag_score"

    def rank(self, catalog: PhotoCatalog) -> list[RankedPhoto]:
        scored = [RankedPhoto(photo=p, tag_score=catalog.tag_score(p)) for p in catalog]
        return sorted(scored, key=lambda r: -r.tag_score)


class TagPopularityRanking:
    """Photos carrying the most popular tags come first.

    Tags are walked by descending popularity and each tag's photos are emitted
    in the order they were registered. A photo is only emitted the first time
    it is reached; photos without any tag are appended in input order.
    """

    name = "tag_popularity"

    def rank(self, catalog: PhotoCatalog) -> list[RankedPhoto]:
        emitted: set[int] = set()
        ordered: list[RankedPhoto] = []
        for entry in catalog.tag_index.by_popularity():
            for photo_id in entry.photo_ids:
                if photo_id in emitted:
                    continue
                emitted.add(photo_id)
                ordered.append(RankedPhoto(photo=catalog.get(photo_id)))

        # Residual photos share no tag with anything listed above
        for photo in catalog:
            if photo.id not in emitted:
                emitted.add(photo.id)
                ordered.append(RankedPhoto(photo=photo))
        return ordered
