"""CSV summary of a batch run, one row per catalog file."""

from __future__ import annotations

from collections.abc import Iterable
import csv
from pathlib import Path

from loguru import logger

from core.errors import SlideshowIOError
from core.services.interfaces import FileResult

CSV_HEADERS = [
    "File",
    "Photos",
    "Slides",
    "Dropped",
    "Score",
    "Ranking",
    "Sequencing",
    "Seconds",
    "Error",
]


class CsvReportRepository:
    """Write batch results as CSV."""

    def save(self, path: str | Path, results: Iterable[FileResult]) -> None:
        """Write `results` to `path` using canonical headers."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.DictWriter(f, fieldnames=CSV_HEADERS)
                writer.writeheader()
                count = 0
                for result in results:
                    writer.writerow(
                        {
                            "File": result.input_path,
                            "Photos": result.photo_count,
                            "Slides": result.slide_count,
                            "Dropped": result.dropped_count,
                            "Score": result.score,
                            "Ranking": result.ranking,
                            "Sequencing": result.sequencing,
                            "Seconds": f"{result.seconds:.3f}",
                            "Error": result.error or "",
                        }
                    )
                    count += 1
        except OSError as ex:
            raise SlideshowIOError(f"Cannot write report {path}: {ex}") from ex
        logger.info("Wrote batch report for {} files to {}", count, path)
