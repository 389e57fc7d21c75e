from __future__ import annotations

from typing import TYPE_CHECKING

import fitz
import pytest

from pagesplit.exceptions import PdfLoadError
from pagesplit.pdf_engine import PyMuPDFEngine
from pagesplit.settings import Settings
from pagesplit.splitter import iter_page_outcomes, load_source, run_split
from pagesplit.typing.enums import PageStatus, ProcessStage
from pagesplit.typing.models import ProgressSnapshot, SplitRequest

if TYPE_CHECKING:
    from pathlib import Path


def _page_text(artifact: bytes) -> str:
    with fitz.open(stream=artifact, filetype="pdf") as doc:
        assert doc.page_count == 1
        return doc[0].get_text()


def test_pymupdf_pipeline_produces_single_page_pdfs(make_pdf_bytes) -> None:
    engine = PyMuPDFEngine()
    document = load_source(make_pdf_bytes(5), engine=engine, settings=Settings())
    snapshots: list[ProgressSnapshot] = []

    try:
        outcomes = list(iter_page_outcomes(document, snapshots.append, "2,4-5", engine=engine))
    finally:
        engine.close(document)

    assert [outcome.page_number for outcome in outcomes] == [2, 4, 5]
    assert all(outcome.status == PageStatus.OK for outcome in outcomes)
    for outcome in outcomes:
        assert outcome.artifact is not None
        assert outcome.final_size == len(outcome.artifact)
        assert f"Page {outcome.page_number}" in _page_text(outcome.artifact)
    assert snapshots[-1].stage == ProcessStage.DONE


def test_pymupdf_rejects_garbage_bytes() -> None:
    with pytest.raises(PdfLoadError):
        load_source(b"definitely not a pdf", engine=PyMuPDFEngine(), settings=Settings())


def test_pymupdf_rejects_user_password_protected_pdf(make_pdf_bytes) -> None:
    data = make_pdf_bytes(
        2,
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner",
        user_pw="user",
    )

    with pytest.raises(PdfLoadError, match="password"):
        load_source(data, engine=PyMuPDFEngine(), settings=Settings())


def test_pymupdf_opens_owner_only_encrypted_pdf(make_pdf_bytes) -> None:
    data = make_pdf_bytes(2, encryption=fitz.PDF_ENCRYPT_AES_256, owner_pw="owner")
    engine = PyMuPDFEngine()

    document = load_source(data, engine=engine, settings=Settings())
    try:
        outcomes = list(iter_page_outcomes(document, lambda snapshot: None, engine=engine))
    finally:
        engine.close(document)

    assert [outcome.status for outcome in outcomes] == [PageStatus.OK, PageStatus.OK]


def test_run_split_writes_readable_page_files(make_pdf_bytes, tmp_path: Path) -> None:
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(make_pdf_bytes(3))
    output_dir = tmp_path / "pages"

    status = run_split(SplitRequest(input_path=pdf, output_dir=output_dir), Settings())

    assert status.ok_count == 3
    assert sorted(path.name for path in output_dir.iterdir()) == ["page_1.pdf", "page_2.pdf", "page_3.pdf"]
    assert "Page 3" in _page_text((output_dir / "page_3.pdf").read_bytes())
