"""Shared fixtures for the slideshow tests."""

from pathlib import Path

import pytest
from loguru import logger

from core.catalog import PhotoCatalog
from core.models import Orientation


def build_catalog(rows):
    """Catalog from (orientation letter, tags) rows, ids in row order."""
    catalog = PhotoCatalog()
    for orientation, tags in rows:
        catalog.add(Orientation(orientation), tags)
    return catalog


@pytest.fixture
def example_catalog():
    """The four-photo example: H {a,b}, V {c}, V {c}, H {a}."""
    return build_catalog([("H", ["a", "b"]), ("V", ["c"]), ("V", ["c"]), ("H", ["a"])])


@pytest.fixture
def write_catalog(tmp_path):
    """Write catalog text to a file under tmp_path and return its path."""

    def _write(text, name="catalog.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


EXAMPLE_TEXT = "4\nH 2 a b\nV 1 c\nV 1 c\nH 1 a\n"


@pytest.fixture
def example_file(write_catalog) -> Path:
    return write_catalog(EXAMPLE_TEXT, name="a_example.txt")
