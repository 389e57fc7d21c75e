"""CLI entry point for PageSplit."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pagesplit import __version__, logger
from pagesplit.dependencies import ensure_cli_dependencies
from pagesplit.exceptions import PackageError
from pagesplit.logging import configure_logging
from pagesplit.pdf_engine import PyMuPDFEngine
from pagesplit.processing.page_selection import parse_page_selection
from pagesplit.processing.sizes import format_bytes
from pagesplit.settings import get_settings
from pagesplit.splitter import load_source, run_split
from pagesplit.typing.models import SplitRequest

if TYPE_CHECKING:
    from pagesplit.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="pagesplit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    split_parser = subparsers.add_parser("split", help="Write one PDF per page of a document")
    split_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    split_parser.add_argument(
        "--pages",
        default=None,
        dest="pages",
        help="Pages to extract, e.g. '1, 3-5, 8' (default: all pages)",
    )
    split_parser.add_argument("--output-dir", type=Path, default=None, dest="output_dir")
    split_parser.add_argument("--report", type=Path, default=None, dest="report_path")

    info_parser = subparsers.add_parser("info", help="Show the page count and check a page selection")
    info_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    info_parser.add_argument("--pages", default=None, dest="pages")

    return parser


def _build_split_request(args: argparse.Namespace) -> SplitRequest:
    """Build split request from CLI arguments.

    Args:
        args (argparse.Namespace): Parsed CLI args.

    Returns:
        SplitRequest: Request object.
    """
    return SplitRequest(
        input_path=args.input_path,
        output_dir=args.output_dir,
        pages=args.pages,
        report_path=getattr(args, "report_path", None),
    )


def _run_split(args: argparse.Namespace, settings: Settings) -> None:
    request = _build_split_request(args)
    status = run_split(request, settings)
    written = sum(result.final_size for result in status.results)
    logger.info(
        "Pages written",
        extra={
            "ok_pages": status.ok_count,
            "error_pages": status.error_count,
            "total_size": format_bytes(written),
        },
    )


def _run_info(args: argparse.Namespace, settings: Settings) -> None:
    request = _build_split_request(args)
    engine = PyMuPDFEngine()
    document = load_source(request.input_path.read_bytes(), engine=engine, settings=settings)
    try:
        page_count = engine.page_count(document)
    finally:
        engine.close(document)

    payload: dict[str, object] = {"input_path": str(request.input_path), "page_count": page_count}
    if request.pages:
        payload["selected_pages"] = parse_page_selection(request.pages, page_count)
    logger.info("PDF info", extra=payload)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments to parse, `sys.argv` when omitted.

    Returns:
        int: Exit code (0 for success, 1 for error, 130 when interrupted).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {"split": _run_split, "info": _run_info}
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        ensure_cli_dependencies(args.command)
        commands[args.command](args, settings)
    except ValidationError:
        logger.exception("Invalid request")
        return 1
    except PackageError as exc:
        logger.error("Split failed", extra={"kind": exc.kind.value if exc.kind else None, "error": str(exc)})
        return 1
    except KeyboardInterrupt:
        logger.info("Split aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during split")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
