"""PyMuPDF implementation of the PDF engine."""

from __future__ import annotations

from typing import Any

try:
    import fitz
except Exception:  # pragma: no cover - optional dependency at runtime
    fitz: Any
    fitz = None

from pagesplit.exceptions import DependencyError, PdfLoadError
from pagesplit.logging import get_logger

logger = get_logger(__name__)


class PyMuPDFEngine:
    """Engine backed by `fitz` documents."""

    def __init__(self) -> None:
        if fitz is None:
            raise DependencyError(missing_package=["pymupdf"], message="PDF engine")

    def load_document(self, data: bytes, *, ignore_encryption: bool = True) -> fitz.Document:
        """Open PDF bytes as a `fitz.Document`.

        Encrypted documents are unlocked with the empty user password when
        `ignore_encryption` is set; documents that still need a password fail.

        Args:
            data (bytes): Raw PDF bytes.
            ignore_encryption (bool): Try the empty password on encrypted files.

        Raises:
            PdfLoadError: If the bytes are not a readable PDF.

        Returns:
            fitz.Document: Loaded document.
        """
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as exc:
            raise PdfLoadError(exc=exc) from exc

        if doc.needs_pass and not (ignore_encryption and doc.authenticate("")):
            doc.close()
            raise PdfLoadError(message="PDF is encrypted and requires a password")

        logger.debug("PDF loaded", extra={"bytes": len(data), "pages": doc.page_count})
        return doc

    def page_count(self, document: fitz.Document) -> int:
        """Return the number of pages of a document."""
        return document.page_count

    def create_empty_document(self) -> fitz.Document:
        """Create a new in-memory PDF."""
        return fitz.open()

    def copy_page(self, source: fitz.Document, index: int, *, into: fitz.Document) -> None:
        """Append page `index` of `source` to `into`.

        Args:
            source (fitz.Document): Document to copy from.
            index (int): 0-based page index.
            into (fitz.Document): Document receiving the page.

        Raises:
            IndexError: If `index` is outside the source page range.
        """
        # insert_pdf clamps out-of-range indices instead of failing.
        if not 0 <= index < source.page_count:
            raise IndexError(f"Page index {index} out of range for {source.page_count} pages")  # noqa: TRY003
        into.insert_pdf(source, from_page=index, to_page=index)

    def serialize(self, document: fitz.Document) -> bytes:
        """Return the PDF bytes of a document."""
        return document.tobytes()

    def close(self, document: fitz.Document) -> None:
        """Close a document handle."""
        document.close()
