from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING, getLogger
from os import PathLike, environ
from pathlib import Path
from tomllib import TOMLDecodeError, load

from pydantic import BaseModel, ValidationError, field_validator

CONFIG_ENV_VAR = "STRHELPERS_CONFIG"
DEFAULT_CONFIG_PATH = Path("strhelpers.toml")

# Logger is built from this module, so warnings go through a plain logger
logger = getLogger(__name__)


class General(BaseModel):
    name: str = "strhelpers"


class Logging(BaseModel):
    level: int = WARNING

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value

        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(str(value).upper(), INFO)


class Paths(BaseModel):
    logs: str = ""  # empty disables the log file


class Config(BaseModel):
    general: General = General()
    logging: Logging = Logging()
    paths: Paths = Paths()


def default_config_path() -> Path:
    """``$STRHELPERS_CONFIG`` if set, otherwise ``strhelpers.toml``."""
    return Path(environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_config(
    shared_config_file: PathLike | None = None,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    A missing shared file yields the defaults, and so does a file that is
    not valid TOML or does not fit the ``Config`` schema.
    """
    shared_path = Path(shared_config_file or default_config_path())
    config_data = {}

    try:
        if shared_path.is_file():
            with shared_path.open("rb") as f:
                config_data = load(f)

        # Load and merge specific config if provided
        if specific_config_file:
            with Path(specific_config_file).open("rb") as f:
                specific_data = load(f)
                config_data.update(specific_data)

        return Config(**config_data)

    except (TOMLDecodeError, ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", shared_path, e)
        return Config()
