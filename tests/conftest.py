"""Pytest marker auto-assignment by folder and shared PDF fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from pagesplit import logger

if TYPE_CHECKING:
    from collections.abc import Callable


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def make_pdf_bytes() -> Callable[..., bytes]:
    """Return a factory building real PDFs whose pages read `Page <n>`."""
    import fitz  # noqa: PLC0415

    def _make(pages: int, **save_options: object) -> bytes:
        doc = fitz.open()
        for number in range(1, pages + 1):
            page = doc.new_page(width=200, height=200)
            page.insert_text((20, 40), f"Page {number}")
        data = doc.tobytes(**save_options)
        doc.close()
        return data

    return _make
