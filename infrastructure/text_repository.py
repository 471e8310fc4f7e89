"""Plain-text persistence for photo catalogs and slideshows.

Input: a header line with the declared photo count, then one photo per
non-empty line as `<H|V> <tagCount> <tag1> ... <tagN>`. Output: the slide
count, then one line of space-separated photo ids per slide.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from core.catalog import PhotoCatalog
from core.errors import MalformedInputError, SlideshowIOError
from core.models import Orientation, Photo, Slideshow

DEFAULT_OUTPUT_EXTENSION = ".output"
CATALOG_ENCODING = "utf-8"


def _parse_int(token: str, what: str, path: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInputError(
            f"{what} is not an integer: {token!r}", path=path, line_number=line_number
        ) from None


def _parse_photo(line: str, photo_id: int, path: str, line_number: int) -> Photo:
    """Parse one stripped, non-empty catalog line into a `Photo`."""
    parts = line.split()
    if len(parts) < 2:
        raise MalformedInputError(
            "expected '<orientation> <tagCount> <tags...>'", path=path, line_number=line_number
        )

    try:
        orientation = Orientation(parts[0])
    except ValueError:
        raise MalformedInputError(
            f"unknown orientation {parts[0]!r}", path=path, line_number=line_number
        ) from None

    tag_count = _parse_int(parts[1], "tag count", path, line_number)
    if tag_count < 0:
        raise MalformedInputError(
            f"negative tag count {tag_count}", path=path, line_number=line_number
        )

    tags = parts[2:]
    if len(tags) < tag_count:
        raise MalformedInputError(
            f"declared {tag_count} tags but found {len(tags)}", path=path, line_number=line_number
        )
    if len(tags) > tag_count:
        logger.debug(
            "{}:{} ignoring {} tokens past the declared tag count",
            path,
            line_number,
            len(tags) - tag_count,
        )

    return Photo(id=photo_id, orientation=orientation, tags=frozenset(tags[:tag_count]))


def output_path_for(
    input_path: str | Path, output_dir: str | Path, extension: str = DEFAULT_OUTPUT_EXTENSION
) -> Path:
    """Output artifact path: `<output_dir>/<input stem><extension>`."""
    return Path(output_dir) / f"{Path(input_path).stem}{extension}"


class TextPhotoRepository:
    """Load photo catalogs from the plain-text input format."""

    def iter_photos(self, path: str | Path) -> Iterator[Photo]:
        """Yield photos from `path`, assigning ids by non-empty line order."""
        path_str = str(path)
        try:
            # Undecodable bytes map to lone surrogates, so tags stay distinct in any encoding
            with Path(path).open("r", encoding=CATALOG_ENCODING, errors="surrogateescape") as f:
                lines = f.read().splitlines()
        except UnicodeError as ex:
            raise MalformedInputError(f"cannot decode catalog: {ex}", path=path_str) from ex
        except OSError as ex:
            raise SlideshowIOError(f"Cannot read catalog {path_str}: {ex}") from ex

        if not lines or not lines[0].strip():
            raise MalformedInputError("missing photo count header", path=path_str, line_number=1)
        declared = _parse_int(lines[0].strip(), "photo count", path_str, 1)

        next_id = 0
        for line_number, raw in enumerate(lines[1:], start=2):
            line = raw.strip()
            if not line:
                continue
            yield _parse_photo(line, next_id, path_str, line_number)
            next_id += 1

        if next_id != declared:
            logger.warning("{} declares {} photos but contains {}", path_str, declared, next_id)

    def load(self, path: str | Path) -> PhotoCatalog:
        """Read `path` into a fresh `PhotoCatalog`."""
        return PhotoCatalog.from_photos(self.iter_photos(path))


class TextSlideshowRepository:
    """Save slideshows in the plain-text output format."""

    def save(self, path: str | Path, slideshow: Slideshow) -> None:
        """Write `slideshow` to `path`, creating parent directories."""
        out = Path(path)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            with out.open("w", encoding=CATALOG_ENCODING, newline="\n") as f:
                f.write(f"{len(slideshow.slides)}\n")
                for slide in slideshow.slides:
                    f.write(" ".join(str(pid) for pid in slide.photo_ids) + "\n")
        except OSError as ex:
            raise SlideshowIOError(f"Cannot write slideshow {out}: {ex}") from ex
