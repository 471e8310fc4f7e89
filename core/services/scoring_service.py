"""Interest factor between adjacent slides and total slideshow score."""

from __future__ import annotations

from collections.abc import Sequence

from core.models import Slide


def interest_factor(left: Slide, right: Slide) -> int:
    """Return min(common tags, tags only on `left`, tags only on `right`)."""
    common = len(left.tags & right.tags)
    only_left = len(left.tags - right.tags)
    only_right = len(right.tags - left.tags)
    return min(common, only_left, only_right)


def total_score(slides: Sequence[Slide]) -> int:
    """Sum of the interest factor over every adjacent pair of slides."""
    return sum(interest_factor(slides[i], slides[i + 1]) for i in range(len(slides) - 1))
