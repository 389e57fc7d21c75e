from __future__ import annotations

from pagesplit import logger as package_logger
from pagesplit.logging import configure_logging, get_logger, split_job_context
from pagesplit.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_split_job_context_is_attached_to_log_lines(capsys) -> None:
    configure_logging(settings=Settings(log_json=True, log_level="INFO"), force=True)
    logger = get_logger("tests.context")

    with split_job_context(input_path="doc.pdf"):
        logger.info("inside")
    logger.info("outside")

    lines = capsys.readouterr().err.strip().splitlines()
    assert '"input_path": "doc.pdf"' in lines[0]
    assert "input_path" not in lines[1]


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))
