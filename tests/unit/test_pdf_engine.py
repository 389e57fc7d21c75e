from __future__ import annotations

import pytest

from pagesplit.exceptions import DependencyError, PdfLoadError
from pagesplit.pdf_engine import PyMuPDFEngine


class _FakeDoc:
    def __init__(self, pages: int = 2, *, needs_pass: bool = False, password_ok: bool = False) -> None:
        self.page_count = pages
        self.needs_pass = needs_pass
        self._password_ok = password_ok
        self.closed = False
        self.inserted: list[tuple[int, int]] = []

    def authenticate(self, password: str) -> int:
        assert password == ""
        return 1 if self._password_ok else 0

    def insert_pdf(self, source: _FakeDoc, *, from_page: int, to_page: int) -> None:
        _ = source
        self.inserted.append((from_page, to_page))

    def tobytes(self) -> bytes:
        return b"%PDF-fake"

    def close(self) -> None:
        self.closed = True


class _FakeFitzModule:
    def __init__(self, doc: _FakeDoc | None = None) -> None:
        self.doc = doc or _FakeDoc()

    def open(self, stream: bytes | None = None, filetype: str | None = None) -> _FakeDoc:
        if stream is None:
            return _FakeDoc(pages=0)
        assert filetype == "pdf"
        if not stream.startswith(b"%PDF"):
            raise RuntimeError("cannot open broken document")
        return self.doc


def test_engine_requires_pymupdf(monkeypatch) -> None:
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", None)

    with pytest.raises(DependencyError, match="pymupdf"):
        PyMuPDFEngine()


def test_load_document_wraps_open_errors(monkeypatch) -> None:
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule())

    with pytest.raises(PdfLoadError) as exc_info:
        PyMuPDFEngine().load_document(b"not a pdf")

    assert isinstance(exc_info.value.exc, RuntimeError)


def test_load_document_unlocks_empty_password(monkeypatch) -> None:
    doc = _FakeDoc(needs_pass=True, password_ok=True)
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule(doc))

    assert PyMuPDFEngine().load_document(b"%PDF-1.7") is doc


def test_load_document_rejects_password_protected_pdf(monkeypatch) -> None:
    doc = _FakeDoc(needs_pass=True, password_ok=False)
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule(doc))

    with pytest.raises(PdfLoadError, match="password"):
        PyMuPDFEngine().load_document(b"%PDF-1.7")
    assert doc.closed is True


def test_load_document_respects_disabled_encryption_tolerance(monkeypatch) -> None:
    doc = _FakeDoc(needs_pass=True, password_ok=True)
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule(doc))

    with pytest.raises(PdfLoadError):
        PyMuPDFEngine().load_document(b"%PDF-1.7", ignore_encryption=False)


def test_copy_page_inserts_single_page(monkeypatch) -> None:
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule())
    engine = PyMuPDFEngine()
    source = _FakeDoc(pages=3)
    target = engine.create_empty_document()

    engine.copy_page(source, 2, into=target)

    assert target.inserted == [(2, 2)]
    assert engine.serialize(target) == b"%PDF-fake"
    assert engine.page_count(source) == 3


@pytest.mark.parametrize("index", [-1, 3])
def test_copy_page_rejects_out_of_range_index(monkeypatch, index: int) -> None:
    monkeypatch.setattr("pagesplit.pdf_engine.fitz", _FakeFitzModule())
    engine = PyMuPDFEngine()
    target = engine.create_empty_document()

    with pytest.raises(IndexError):
        engine.copy_page(_FakeDoc(pages=3), index, into=target)
    assert target.inserted == []
