import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from colorama import Fore, Style, init

from strhelpers.shared import Config, load_config

config: Config = load_config()


class ColorFormatter(logging.Formatter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.color_map = {
            logging.DEBUG: Fore.CYAN,
            logging.INFO: Fore.GREEN,
            logging.WARNING: Fore.YELLOW,
            logging.ERROR: Fore.RED,
            logging.CRITICAL: Fore.MAGENTA,
        }

    def format(self, record):
        color = self.color_map.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


class DailyFileHandler(logging.FileHandler):
    """Plain-text handler for ``<log_dir>/YYYY-MM-DD.log``.

    Neither the directory nor the file exists until the first record.
    """

    def __init__(self, log_dir):
        self.log_dir = Path(log_dir)
        super().__init__(
            self.log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log", delay=True
        )

    def _open(self):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        return super()._open()


class Logger:
    def __init__(self, name, log_file=config.paths.logs, level=config.logging.level):
        # Initialize colorama
        init()

        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Handlers are attached once per logger name
        if self.logger.handlers:
            return

        format_string_console = (
            f"{Style.BRIGHT}%(levelname)-10s "
            + f"{Style.DIM}%(name)-20s "
            + "%(module)s.%(funcName)-30s "
            + f"{Style.RESET_ALL}%(message)s"
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColorFormatter(format_string_console))
        self.logger.addHandler(console_handler)

        if log_file:
            format_string_file = re.sub(
                r"\x1b\[[0-9;]*m", "", "%(asctime)s - " + format_string_console
            )

            file_handler = DailyFileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(format_string_file))
            self.logger.addHandler(file_handler)

    def get_logger(self):
        return self.logger
