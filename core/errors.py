"""Error types raised while building a slideshow from a catalog file."""

from __future__ import annotations


class SlideshowError(Exception):
    """Base class for failures that abort processing of one input file."""


class MalformedInputError(SlideshowError, ValueError):
    """A catalog line cannot be parsed into photo fields.

    Photo ids are positional, so a single bad line fails the whole file
    rather than being skipped.
    """

    def __init__(self, message: str, *, path: str | None = None, line_number: int | None = None):
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}"
            if line_number is not None:
                location += f":{line_number}"
            location += ": "
        super().__init__(f"{location}{message}")


class SlideshowIOError(SlideshowError, OSError):
    """The source catalog is unreadable or the destination is unwritable."""
