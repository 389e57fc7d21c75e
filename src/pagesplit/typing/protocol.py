"""PDF engine interfaces."""

from __future__ import annotations

from typing import Protocol, TypeVar

DocumentT = TypeVar("DocumentT")


class PdfEngine(Protocol[DocumentT]):
    """Binary PDF capability consumed by the extraction pipeline.

    Document handles are opaque to the pipeline; only the engine that produced
    a handle knows how to read or write it.
    """

    def load_document(self, data: bytes, *, ignore_encryption: bool = True) -> DocumentT:
        """Parse PDF bytes into a document handle.

        Args:
            data: Raw PDF bytes.
            ignore_encryption: Open encrypted files without a password when possible.

        Returns:
            DocumentT: Loaded document handle.
        """

    def page_count(self, document: DocumentT) -> int:
        """Return the number of pages of a document.

        Args:
            document: Document handle.

        Returns:
            int: Page count.
        """

    def create_empty_document(self) -> DocumentT:
        """Create a document without pages.

        Returns:
            DocumentT: New empty document handle.
        """

    def copy_page(self, source: DocumentT, index: int, *, into: DocumentT) -> None:
        """Copy one page of `source` and append it to `into`.

        Args:
            source: Document to read from (never mutated).
            index: 0-based page index in `source`.
            into: Document receiving the page.
        """

    def serialize(self, document: DocumentT) -> bytes:
        """Serialize a document to PDF bytes.

        Args:
            document: Document handle.

        Returns:
            bytes: PDF file content.
        """

    def close(self, document: DocumentT) -> None:
        """Release resources held by a document handle.

        Args:
            document: Document handle.
        """
