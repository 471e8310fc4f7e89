"""Slide sequencing policies.

Each policy turns a `SlideSet` into the display order that gets scored. Only
`GreedySequencing` looks at tags; the other two keep the built order.
"""

from __future__ import annotations

from core.models import Slide
from core.services.interfaces import SlideSet
from core.services.scoring_service import interest_factor


class BlockSequencing:
    """All horizontal slides first, then all vertical slides."""

    name = "block"

    def sequence(self, slide_set: SlideSet) -> list[Slide]:
        return slide_set.in_construction_order()


class InterleaveSequencing:
    """Alternate horizontal and vertical slides, then append the remainder."""

    name = "interleave"

    def sequence(self, slide_set: SlideSet) -> list[Slide]:
        horizontal = slide_set.horizontal
        vertical = slide_set.vertical
        slides: list[Slide] = []
        for i in range(max(len(horizontal), len(vertical))):
            if i < len(horizontal):
                slides.append(horizontal[i])
            if i < len(vertical):
                slides.append(vertical[i])
        return slides


class GreedySequencing:
    """Repeatedly append the unplaced slide scoring best against the last one.

    Slides are indexed in construction order (horizontal, then vertical). The
    sequence starts at index 0 and ties go to the lowest index. Runs in
    O(n^2) over the number of slides.
    """

    name = "greedy"

    def sequence(self, slide_set: SlideSet) -> list[Slide]:
        remaining = slide_set.in_construction_order()
        if not remaining:
            return []

        slides = [remaining.pop(0)]
        while remaining:
            last = slides[-1]
            best_pos = 0
            best_score = interest_factor(last, remaining[0])
            for pos in range(1, len(remaining)):
                score = interest_factor(last, remaining[pos])
                if score > best_score:
                    best_pos, best_score = pos, score
            slides.append(remaining.pop(best_pos))
        return slides
