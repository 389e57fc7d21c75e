"""Page extraction pipeline and split orchestration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias

from pagesplit.exceptions import EmptyPdfError, FileTooLargeError
from pagesplit.logging import get_logger, split_job_context
from pagesplit.pdf_engine import PyMuPDFEngine
from pagesplit.processing.page_selection import parse_page_selection
from pagesplit.processing.sizes import format_bytes
from pagesplit.typing.enums import ProcessStage
from pagesplit.typing.models import JobStatus, PageOutcome, ProgressSnapshot

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from pagesplit.settings import Settings
    from pagesplit.typing.models import SplitRequest
    from pagesplit.typing.protocol import PdfEngine

ProgressCallback: TypeAlias = "Callable[[ProgressSnapshot], None]"

logger = get_logger(__name__)

ANALYZING_PROGRESS = 5.0
SPLITTING_START_PROGRESS = 10.0
DONE_PROGRESS = 100.0


def resolve_target_indices(selection: str | None, page_count: int) -> list[int]:
    """Return the 0-based page indices to extract.

    Args:
        selection (str | None): Page-selection string; falsy means every page.
        page_count (int): Page count of the source document.

    Returns:
        list[int]: Ascending 0-based indices.
    """
    if selection:
        return [page_number - 1 for page_number in parse_page_selection(selection, page_count)]
    return list(range(page_count))


def iter_page_outcomes(
    document: Any,
    on_progress: ProgressCallback,
    selection: str | None = None,
    *,
    engine: PdfEngine[Any] | None = None,
) -> Iterator[PageOutcome]:
    """Extract pages one at a time, yielding one outcome per target page.

    Nothing runs until the first value is requested. Selection errors are
    raised from that first request, before any outcome exists. A page whose
    copy or serialization fails yields an ERROR outcome and the loop moves on.
    Each outcome is preceded by its progress snapshot; consumers cancel by
    no longer iterating.

    Args:
        document (Any): Source document handle, read but never closed here.
        on_progress (ProgressCallback): Called synchronously with every snapshot.
        selection (str | None): Optional page-selection string.
        engine (PdfEngine[Any] | None): Engine that produced `document`, PyMuPDF by default.

    Raises:
        EmptyPdfError: If the document has no pages.
        PageSelectionError: If `selection` cannot be resolved against the page count.

    Yields:
        PageOutcome: Terminal outcome of each target page, by ascending page number.
    """
    pdf_engine = engine or PyMuPDFEngine()
    on_progress(
        ProgressSnapshot(stage=ProcessStage.ANALYZING, overall_progress=ANALYZING_PROGRESS, processed_pages=0),
    )
    page_count = pdf_engine.page_count(document)
    if page_count == 0:
        raise EmptyPdfError
    targets = resolve_target_indices(selection, page_count)
    total = len(targets)

    logger.info("Splitting pages", extra={"document_pages": page_count, "selected_pages": total})
    on_progress(
        ProgressSnapshot(
            stage=ProcessStage.SPLITTING,
            overall_progress=SPLITTING_START_PROGRESS,
            processed_pages=0,
            total_pages=total,
        ),
    )

    processed = 0
    try:
        for index in targets:
            outcome = _extract_page(document, index, engine=pdf_engine)
            processed += 1
            on_progress(
                ProgressSnapshot(
                    stage=ProcessStage.SPLITTING,
                    overall_progress=SPLITTING_START_PROGRESS
                    + (DONE_PROGRESS - SPLITTING_START_PROGRESS) * (processed / total),
                    processed_pages=processed,
                ),
            )
            yield outcome
    except GeneratorExit:
        logger.info("Split stopped by consumer", extra={"processed_pages": processed, "selected_pages": total})
        raise

    on_progress(ProgressSnapshot(stage=ProcessStage.DONE, overall_progress=DONE_PROGRESS, processed_pages=total))


def _extract_page(document: Any, index: int, *, engine: PdfEngine[Any]) -> PageOutcome:
    """Copy one page into its own document and serialize it.

    Args:
        document (Any): Source document handle.
        index (int): 0-based page index.
        engine (PdfEngine[Any]): PDF engine.

    Returns:
        PageOutcome: OK outcome with the page bytes, or ERROR on any failure.
    """
    page_number = index + 1
    single_page = None
    try:
        single_page = engine.create_empty_document()
        engine.copy_page(document, index, into=single_page)
        artifact = engine.serialize(single_page)
    except Exception:
        logger.warning("Failed to extract page", extra={"page_number": page_number}, exc_info=True)
        return PageOutcome.error(page_number)
    finally:
        if single_page is not None:
            _close_page_document(single_page, page_number, engine=engine)
    return PageOutcome.ok(page_number, artifact)


def _close_page_document(document: Any, page_number: int, *, engine: PdfEngine[Any]) -> None:
    """Close a single-page document; a failing close never aborts the batch."""
    try:
        engine.close(document)
    except Exception:
        logger.warning("Failed to close page document", extra={"page_number": page_number}, exc_info=True)


def check_source_size(size_bytes: int, settings: Settings) -> str | None:
    """Enforce the source size limits.

    Args:
        size_bytes (int): Source PDF size.
        settings (Settings): Runtime settings.

    Raises:
        FileTooLargeError: If the source exceeds `MAX_FILE_SIZE_MB`.

    Returns:
        str | None: Warning text when the source exceeds `LARGE_FILE_WARNING_MB`.
    """
    if size_bytes > settings.max_file_size_bytes:
        raise FileTooLargeError(size_bytes=size_bytes, max_bytes=settings.max_file_size_bytes)
    if size_bytes > settings.large_file_warning_bytes:
        warning = f"Large PDF ({format_bytes(size_bytes)}): splitting may be slow"
        logger.warning(warning, extra={"size_bytes": size_bytes})
        return warning
    return None


def load_source(data: bytes, *, engine: PdfEngine[Any], settings: Settings) -> Any:
    """Validate and open source PDF bytes.

    Args:
        data (bytes): Source PDF bytes.
        engine (PdfEngine[Any]): PDF engine.
        settings (Settings): Runtime settings.

    Raises:
        FileTooLargeError: If the bytes exceed the size limit.
        PdfLoadError: If the bytes cannot be parsed.
        EmptyPdfError: If the document has no pages.

    Returns:
        Any: Engine document handle, owned by the caller.
    """
    check_source_size(len(data), settings)
    return _open_document(data, engine=engine, settings=settings)


def _open_document(data: bytes, *, engine: PdfEngine[Any], settings: Settings) -> Any:
    document = engine.load_document(data, ignore_encryption=settings.ignore_encryption)
    if engine.page_count(document) == 0:
        engine.close(document)
        raise EmptyPdfError
    return document


def output_file_name(page_number: int) -> str:
    """Return the file name of an extracted page (`page_3.pdf`)."""
    return f"page_{page_number}.pdf"


def run_split(
    request: SplitRequest,
    settings: Settings,
    *,
    engine: PdfEngine[Any] | None = None,
    on_progress: ProgressCallback | None = None,
) -> JobStatus:
    """Top-level split flow used by CLI.

    Every OK page is written to `<output_dir>/page_<n>.pdf` as soon as it is
    produced; recorded outcomes keep their size but drop the bytes.

    Args:
        request (SplitRequest): Split request.
        settings (Settings): Runtime settings.
        engine (PdfEngine[Any] | None): PDF engine, PyMuPDF by default.
        on_progress (ProgressCallback | None): Extra progress observer.

    Returns:
        JobStatus: Final job status with one result per target page.
    """
    pdf_engine = engine or PyMuPDFEngine()
    output_dir = request.output_dir or Path(settings.output_dir)
    status = JobStatus()

    def _track(snapshot: ProgressSnapshot) -> None:
        status.apply(snapshot)
        logger.debug(
            "Progress",
            extra={"stage": snapshot.stage.value, "progress": round(snapshot.overall_progress, 2)},
        )
        if on_progress is not None:
            on_progress(snapshot)

    with split_job_context(input_path=str(request.input_path), mode=request.mode.value):
        status.warning = check_source_size(request.input_path.stat().st_size, settings)
        document = _open_document(request.input_path.read_bytes(), engine=pdf_engine, settings=settings)
        try:
            for outcome in iter_page_outcomes(document, _track, request.pages, engine=pdf_engine):
                if outcome.artifact is not None:
                    output_dir.mkdir(parents=True, exist_ok=True)
                    (output_dir / output_file_name(outcome.page_number)).write_bytes(outcome.artifact)
                status.record(outcome.without_artifact())
        finally:
            pdf_engine.close(document)

        logger.info(
            "Split completed",
            extra={
                "ok_pages": status.ok_count,
                "error_pages": status.error_count,
                "output_dir": str(output_dir),
            },
        )

    if request.report_path is not None:
        persist_report(status, request.report_path)
    return status


def report_to_json_dict(status: JobStatus) -> dict[str, object]:
    """Return a JSON-serializable job report without artifact bytes.

    Args:
        status (JobStatus): Job status.

    Returns:
        dict[str, object]: Report payload.
    """
    payload = json.loads(status.model_dump_json(exclude={"results": {"__all__": {"artifact"}}}))
    for page in payload["results"]:
        page["file"] = output_file_name(page["page_number"]) if page["status"] == "ok" else None
    return payload


def persist_report(status: JobStatus, path: Path) -> None:
    """Persist a job report as JSON.

    Args:
        status (JobStatus): Job status.
        path (Path): Output path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report_to_json_dict(status), indent=2), encoding="utf-8")
