"""Groups ranked photos into horizontal and vertical slides."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from core.models import Photo, Slide
from core.services.interfaces import RankedPhoto, SlideSet


class SlideBuilder:
    """Builds singleton horizontal slides and paired vertical slides."""

    def build(self, ranked: Iterable[RankedPhoto | Photo]) -> SlideSet:
        """Partition `ranked` by orientation and build slides in ranked order.

        Vertical photos are paired two at a time (0+1, 2+3, ...). When the
        vertical count is odd the last one has no partner and is reported in
        `SlideSet.dropped` instead of being placed on a slide.
        """
        result = SlideSet()
        verticals: list[Photo] = []
        for item in ranked:
            photo = item.photo if isinstance(item, RankedPhoto) else item
            if photo.is_vertical:
                verticals.append(photo)
            else:
                result.horizontal.append(Slide.horizontal(photo))

        for i in range(0, len(verticals) - 1, 2):
            result.vertical.append(Slide.vertical(verticals[i], verticals[i + 1]))

        if len(verticals) % 2 == 1:
            leftover = verticals[-1]
            result.dropped.append(leftover)
            logger.debug("Dropping unpaired vertical photo {}", leftover.id)

        return result
