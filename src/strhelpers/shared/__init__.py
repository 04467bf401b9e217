from .config import Config, load_config
from .logger import Logger
from .errors import InvalidArgument, invalid_argument_handler

__all__ = [
    "Config",
    "InvalidArgument",
    "Logger",
    "invalid_argument_handler",
    "load_config",
]
