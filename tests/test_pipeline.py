"""
Tests for the end-to-end slideshow pipeline and strategy registry.
"""

import pytest

from conftest import build_catalog
from core.pipeline import (
    RANKING_STRATEGIES,
    SEQUENCING_STRATEGIES,
    SlideshowPipeline,
    create_pipeline,
)
from core.services.ranking_service import TagScoreRanking
from core.services.sequencing_service import BlockSequencing

ALL_COMBINATIONS = [(r, s) for r in RANKING_STRATEGIES for s in SEQUENCING_STRATEGIES]


@pytest.fixture
def mixed_catalog():
    return build_catalog(
        [
            ("H", ["cat", "beach", "sun"]),
            ("V", ["selfie", "smile"]),
            ("V", ["garden", "selfie"]),
            ("H", ["garden", "cat"]),
            ("H", ["sun", "beach", "sea", "cat"]),
            ("V", ["smile", "sea"]),
            ("H", ["garden"]),
            ("V", ["cat", "dog"]),
            ("V", ["dog"]),
        ]
    )


class TestExampleScenario:
    """The four-photo example with the default policies."""

    def test_block_order_and_score(self, example_catalog):
        result = create_pipeline().run(example_catalog)
        slides = result.slideshow.slides

        assert [s.photo_ids for s in slides] == [[0], [3], [1, 2]]
        assert [s.tags for s in slides] == [{"a", "b"}, {"a"}, {"c"}]
        assert result.slideshow.score == 0

    def test_result_exposes_intermediate_stages(self, example_catalog):
        result = create_pipeline().run(example_catalog)
        assert [r.photo.id for r in result.ranked] == [0, 1, 2, 3]
        assert len(result.slide_set.horizontal) == 2
        assert len(result.slide_set.vertical) == 1


class TestPipelineProperties:
    """Properties that hold for every policy combination."""

    @pytest.mark.parametrize("ranking,sequencing", ALL_COMBINATIONS)
    def test_score_non_negative(self, mixed_catalog, ranking, sequencing):
        assert create_pipeline(ranking, sequencing).run(mixed_catalog).slideshow.score >= 0

    @pytest.mark.parametrize("ranking,sequencing", ALL_COMBINATIONS)
    def test_deterministic(self, mixed_catalog, ranking, sequencing):
        first = create_pipeline(ranking, sequencing).run(mixed_catalog).slideshow
        second = create_pipeline(ranking, sequencing).run(mixed_catalog).slideshow

        assert [s.photo_ids for s in first.slides] == [s.photo_ids for s in second.slides]
        assert first.score == second.score

    @pytest.mark.parametrize("ranking,sequencing", ALL_COMBINATIONS)
    def test_partition(self, mixed_catalog, ranking, sequencing):
        result = create_pipeline(ranking, sequencing).run(mixed_catalog)
        placed = [pid for s in result.slideshow.slides for pid in s.photo_ids]
        dropped = [p.id for p in result.slide_set.dropped]

        assert len(placed) == len(set(placed))
        assert sorted(placed + dropped) == list(range(len(mixed_catalog)))
        assert len(dropped) == mixed_catalog.vertical_count % 2

    @pytest.mark.parametrize("sequencing", list(SEQUENCING_STRATEGIES))
    def test_no_shared_tags_scores_zero(self, sequencing):
        catalog = build_catalog(
            [("H", ["a"]), ("H", ["b"]), ("V", ["c"]), ("V", ["d"]), ("H", [])]
        )
        assert create_pipeline(sequencing=sequencing).run(catalog).slideshow.score == 0

    def test_three_verticals_drop_one(self):
        catalog = build_catalog([("V", ["a"]), ("V", ["a"]), ("V", ["a"])])
        result = create_pipeline().run(catalog)

        assert len(result.slideshow.slides) == 1
        assert len(result.slide_set.dropped) == 1
        assert result.slide_set.dropped[0].id not in result.slideshow.slides[0].photo_ids

    def test_greedy_at_least_matches_block_here(self, mixed_catalog):
        block = create_pipeline(sequencing="block").run(mixed_catalog).slideshow.score
        greedy = create_pipeline(sequencing="greedy").run(mixed_catalog).slideshow.score
        assert greedy >= block


class TestRegistry:
    """Strategy lookup by configured name."""

    def test_defaults(self):
        pipeline = create_pipeline()
        assert isinstance(pipeline.ranking, TagScoreRanking)
        assert isinstance(pipeline.sequencing, BlockSequencing)

    def test_unknown_ranking(self):
        with pytest.raises(ValueError, match="tag_popularity, tag_score"):
            create_pipeline(ranking="random")

    def test_unknown_sequencing(self):
        with pytest.raises(ValueError, match="sequencing strategy 'zigzag'"):
            create_pipeline(sequencing="zigzag")

    def test_pipeline_accepts_strategy_instances(self, example_catalog):
        pipeline = SlideshowPipeline(TagScoreRanking(), BlockSequencing())
        assert pipeline.run(example_catalog).slideshow.score == 0
