import logging
from pathlib import Path

from colorama import Fore, Style

from strhelpers.shared import Logger
from strhelpers.shared.logger import ColorFormatter, DailyFileHandler


def test_console_handler_is_attached_once():
    first = Logger("strhelpers.tests.once", log_file="").get_logger()
    second = Logger("strhelpers.tests.once", log_file="").get_logger()

    assert first is second
    assert len(second.handlers) == 1


def test_level_is_applied():
    logger = Logger("strhelpers.tests.level", level=logging.ERROR).get_logger()
    assert logger.level == logging.ERROR


def test_file_handler_writes_plain_text(tmp_path):
    log_dir = tmp_path / "logs"
    logger = Logger(
        "strhelpers.tests.file", log_file=str(log_dir), level=logging.DEBUG
    ).get_logger()

    logger.info("Truncating to display width %d", 3)
    for handler in logger.handlers:
        handler.flush()

    log_files = list(log_dir.glob("*.log"))
    assert len(log_files) == 1

    content = log_files[0].read_text(encoding="utf-8")
    assert "Truncating to display width 3" in content
    assert "\x1b[" not in content

    for handler in logger.handlers:
        handler.close()


def test_color_formatter_wraps_message():
    formatter = ColorFormatter("%(message)s")
    record = logging.LogRecord(
        "strhelpers", logging.ERROR, __file__, 1, "boom", None, None
    )

    formatted = formatter.format(record)

    assert formatted.startswith(Fore.RED)
    assert formatted.endswith(Style.RESET_ALL)
    assert "boom" in formatted


def test_log_directory_is_created_on_first_record(tmp_path):
    log_dir = tmp_path / "nested" / "logs"
    logger = Logger(
        "strhelpers.tests.deferred", log_file=str(log_dir), level=logging.WARNING
    ).get_logger()

    logger.debug("below the level")
    assert not log_dir.exists()

    logger.warning("first record")
    assert len(list(log_dir.glob("*.log"))) == 1

    for handler in logger.handlers:
        handler.close()


def test_daily_file_handler_name(tmp_path):
    handler = DailyFileHandler(tmp_path)

    assert Path(handler.baseFilename).parent == tmp_path
    assert Path(handler.baseFilename).suffix == ".log"
    handler.close()
