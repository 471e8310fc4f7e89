from __future__ import annotations

from pathlib import Path
import sys

from loguru import logger

from app.batch_runner import BatchConfig, BatchRunner
from core.errors import SlideshowError
from core.pipeline import DEFAULT_RANKING, DEFAULT_SEQUENCING
from infrastructure.logging import find_latest_log_file, init_logging
from infrastructure.report_repository import CsvReportRepository
from infrastructure.settings import JsonSettings
from infrastructure.text_repository import DEFAULT_OUTPUT_EXTENSION

BASE_DIR = Path(__file__).parent


def _parse_inputs(settings: JsonSettings) -> list[str]:
    # Expect a list of catalog paths, relative to the settings file
    raw = settings.get("batch.inputs", [])
    result: list[str] = []
    if isinstance(raw, list):
        for item in raw:
            if isinstance(item, str) and item.strip():
                path = Path(item)
                result.append(str(path if path.is_absolute() else settings.path.parent / path))
    return result


def build_config(settings: JsonSettings, inputs: list[str] | None = None) -> BatchConfig:
    """Translate settings (and optional input overrides) into a `BatchConfig`."""
    report = settings.resolve_path("report.path")
    return BatchConfig(
        inputs=list(inputs) if inputs else _parse_inputs(settings),
        output_dir=str(settings.resolve_path("batch.output_dir", "output")),
        output_extension=str(settings.get("batch.output_extension", DEFAULT_OUTPUT_EXTENSION)),
        ranking=str(settings.get("strategies.ranking", DEFAULT_RANKING)),
        sequencing=str(settings.get("strategies.sequencing", DEFAULT_SEQUENCING)),
        workers=max(1, int(settings.get("batch.workers", 1) or 1)),
        report_path=str(report) if report is not None else None,
        log_dir=str(settings.resolve_path("logging.dir", "logs")),
        log_level=str(settings.get("logging.level", "INFO")),
    )


def main(argv: list[str] | None = None, settings_path: str | Path | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = JsonSettings(settings_path or BASE_DIR / "settings.json")
    config = build_config(settings, inputs=args)
    init_logging(config.log_dir, level=config.log_level)
    logger.info("Logging to {}", find_latest_log_file(config.log_dir))

    runner = BatchRunner(config, report_repo=CsvReportRepository())
    try:
        runner.run()
    except SlideshowError as ex:
        logger.error("Batch report failed: {}", ex)
        return 1
    return 0 if runner.all_succeeded else 1


if __name__ == "__main__":
    raise SystemExit(main())
