"""Per-file slideshow pipeline and the registry of selectable strategies.

Stages run strictly in order because each needs the complete output of the
previous one: rank -> build -> sequence -> score.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from core.catalog import PhotoCatalog
from core.models import Slideshow
from core.services.interfaces import RankedPhoto, RankingStrategy, SequencingStrategy, SlideSet
from core.services.ranking_service import TagPopularityRanking, TagScoreRanking
from core.services.scoring_service import total_score
from core.services.sequencing_service import (
    BlockSequencing,
    GreedySequencing,
    InterleaveSequencing,
)
from core.services.slide_builder import SlideBuilder

RANKING_STRATEGIES: dict[str, type] = {
    TagScoreRanking.name: TagScoreRanking,
    TagPopularityRanking.name: TagPopularityRanking,
}

SEQUENCING_STRATEGIES: dict[str, type] = {
    BlockSequencing.name: BlockSequencing,
    InterleaveSequencing.name: InterleaveSequencing,
    GreedySequencing.name: GreedySequencing,
}

DEFAULT_RANKING = TagScoreRanking.name
DEFAULT_SEQUENCING = BlockSequencing.name


@dataclass
class PipelineResult:
    """Everything one pipeline run produced.

    Attributes:
        slideshow: Final slide order and its score.
        slide_set: Slides as built, before sequencing.
        ranked: Photo order used to build the slides.
    """

    slideshow: Slideshow
    slide_set: SlideSet
    ranked: list[RankedPhoto] = field(default_factory=list)


class SlideshowPipeline:
    """Runs one ranking policy and one sequencing policy over a catalog."""

    def __init__(
        self,
        ranking: RankingStrategy,
        sequencing: SequencingStrategy,
        builder: SlideBuilder | None = None,
    ) -> None:
        self.ranking = ranking
        self.sequencing = sequencing
        self._builder = builder or SlideBuilder()

    def run(self, catalog: PhotoCatalog) -> PipelineResult:
        """Rank, build, sequence and score `catalog`."""
        ranked = self.ranking.rank(catalog)
        slide_set = self._builder.build(ranked)
        slides = self.sequencing.sequence(slide_set)
        slideshow = Slideshow(slides=slides, score=total_score(slides))
        logger.debug(
            "Pipeline {}/{}: {} photos -> {} slides ({} dropped), score {}",
            self.ranking.name,
            self.sequencing.name,
            len(catalog),
            len(slides),
            len(slide_set.dropped),
            slideshow.score,
        )
        return PipelineResult(slideshow=slideshow, slide_set=slide_set, ranked=ranked)


def _lookup(registry: dict[str, type], name: str, kind: str) -> type:
    try:
        return registry[name]
    except KeyError:
        choices = ", ".join(sorted(registry))
        raise ValueError(f"Unknown {kind} strategy {name!r}; expected one of: {choices}") from None


def create_pipeline(
    ranking: str = DEFAULT_RANKING, sequencing: str = DEFAULT_SEQUENCING
) -> SlideshowPipeline:
    """Build a pipeline from strategy names as they appear in settings."""
    ranking_cls = _lookup(RANKING_STRATEGIES, ranking, "ranking")
    sequencing_cls = _lookup(SEQUENCING_STRATEGIES, sequencing, "sequencing")
    return SlideshowPipeline(ranking=ranking_cls(), sequencing=sequencing_cls())
