from __future__ import annotations

import pytest

from pagesplit.dependencies import ensure_cli_dependencies
from pagesplit.exceptions import DependencyError


def test_ensure_cli_dependencies_succeeds(monkeypatch) -> None:
    monkeypatch.setattr("pagesplit.dependencies._is_module_available", lambda module_name: True)
    ensure_cli_dependencies("split")


def test_ensure_cli_dependencies_raises(monkeypatch) -> None:
    monkeypatch.setattr("pagesplit.dependencies._is_module_available", lambda module_name: False)
    with pytest.raises(DependencyError, match="Missing runtime dependencies for 'split': pymupdf"):
        ensure_cli_dependencies("split")
