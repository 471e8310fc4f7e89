"""Batch runner orchestrating catalog IO and the slideshow pipeline."""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from multiprocessing.context import BaseContext
from pathlib import Path
import time

from loguru import logger

from core.errors import SlideshowError
from core.pipeline import DEFAULT_RANKING, DEFAULT_SEQUENCING, create_pipeline
from core.services.interfaces import FileResult, ReportRepository
from infrastructure.logging import init_worker_logging
from infrastructure.text_repository import (
    DEFAULT_OUTPUT_EXTENSION,
    TextPhotoRepository,
    TextSlideshowRepository,
    output_path_for,
)


@dataclass
class BatchConfig:
    """What to process and how.

    Attributes:
        inputs: Catalog files, processed in this order.
        output_dir: Folder receiving one output file per catalog.
        output_extension: Extension appended to each catalog's stem.
        ranking: Ranking policy name.
        sequencing: Sequencing policy name.
        workers: Number of files processed concurrently (1 = sequential).
        report_path: Optional CSV summary path.
        log_dir: Log folder handed to worker processes, None to leave their
            logging untouched.
        log_level: Minimum level logged by worker processes.
    """

    inputs: list[str] = field(default_factory=list)
    output_dir: str = "output"
    output_extension: str = DEFAULT_OUTPUT_EXTENSION
    ranking: str = DEFAULT_RANKING
    sequencing: str = DEFAULT_SEQUENCING
    workers: int = 1
    report_path: str | None = None
    log_dir: str | None = None
    log_level: str = "INFO"


def process_file(
    input_path: str,
    output_dir: str,
    output_extension: str = DEFAULT_OUTPUT_EXTENSION,
    ranking: str = DEFAULT_RANKING,
    sequencing: str = DEFAULT_SEQUENCING,
) -> FileResult:
    """Read, solve and write one catalog.

    Every call builds its own catalog and pipeline, so nothing carries over
    between files. `SlideshowError` is recorded on the result; anything else
    propagates.
    """
    started = time.perf_counter()
    result = FileResult(
        input_path=input_path, output_path=None, ranking=ranking, sequencing=sequencing
    )
    logger.info("Solving {}", input_path)
    try:
        pipeline = create_pipeline(ranking, sequencing)
        catalog = TextPhotoRepository().load(input_path)
        run = pipeline.run(catalog)

        out_path = output_path_for(input_path, output_dir, output_extension)
        logger.info("Writing solution for {} to {}", Path(input_path).stem, out_path)
        TextSlideshowRepository().save(out_path, run.slideshow)
    except SlideshowError as ex:
        result.error = str(ex)
        result.seconds = time.perf_counter() - started
        logger.error("Failed {}: {}", input_path, ex)
        return result

    result.output_path = str(out_path)
    result.photo_count = len(catalog)
    result.slide_count = len(run.slideshow.slides)
    result.dropped_count = len(run.slide_set.dropped)
    result.score = run.slideshow.score
    result.seconds = time.perf_counter() - started
    logger.info("{}: {}", input_path, result.score)
    return result


class BatchRunner:
    """Runs every configured catalog through the pipeline.

    Mediates between the text repositories, the pipeline and the optional
    CSV report.
    """

    def __init__(
        self,
        config: BatchConfig,
        report_repo: ReportRepository | None = None,
        mp_context: BaseContext | None = None,
    ) -> None:
        """Create a BatchRunner.

        Args:
            config: Batch configuration.
            report_repo: Repository with a `save(path, results)` method, used
                when `config.report_path` is set.
            mp_context: Multiprocessing context for the worker pool (platform
                default when None).
        """
        # Fail on unknown policy names before touching any file
        create_pipeline(config.ranking, config.sequencing)
        self._config = config
        self._report_repo = report_repo
        self._mp_context = mp_context
        self.results: list[FileResult] = []

    def _run_sequential(self) -> list[FileResult]:
        cfg = self._config
        return [
            process_file(
                path, cfg.output_dir, cfg.output_extension, cfg.ranking, cfg.sequencing
            )
            for path in cfg.inputs
        ]

    def _run_parallel(self) -> list[FileResult]:
        cfg = self._config
        pool_kwargs: dict = {}
        if cfg.log_dir is not None:
            pool_kwargs["initializer"] = init_worker_logging
            pool_kwargs["initargs"] = (cfg.log_dir, cfg.log_level)
        with ProcessPoolExecutor(
            max_workers=cfg.workers, mp_context=self._mp_context, **pool_kwargs
        ) as pool:
            futures = [
                pool.submit(
                    process_file,
                    path,
                    cfg.output_dir,
                    cfg.output_extension,
                    cfg.ranking,
                    cfg.sequencing,
                )
                for path in cfg.inputs
            ]
            return [f.result() for f in futures]

    def run(self) -> list[FileResult]:
        """Process all inputs and return one result per input, in input order."""
        cfg = self._config
        if not cfg.inputs:
            logger.warning("No input files configured")
            self.results = []
            return self.results

        logger.info(
            "Processing {} files (ranking={}, sequencing={}, workers={})",
            len(cfg.inputs),
            cfg.ranking,
            cfg.sequencing,
            cfg.workers,
        )
        if cfg.workers > 1 and len(cfg.inputs) > 1:
            self.results = self._run_parallel()
        else:
            self.results = self._run_sequential()

        logger.info(
            "Batch done: {}/{} files succeeded, total score {}",
            self.succeeded_count,
            len(self.results),
            self.total_score,
        )
        if cfg.report_path and self._report_repo is not None:
            self._report_repo.save(cfg.report_path, self.results)
        return self.results

    @property
    def total_score(self) -> int:
        """Sum of scores over successful files."""
        return sum(r.score for r in self.results if r.ok)

    @property
    def succeeded_count(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def all_succeeded(self) -> bool:
        return all(r.ok for r in self.results)
