from contextlib import contextmanager

from pydantic import ValidationError

from strhelpers.shared import Logger

__all__ = ["InvalidArgument", "invalid_argument_handler"]

logger = Logger(__name__).get_logger()


class InvalidArgument(ValueError):
    """Raised when a helper is called with arguments outside its domain.

    ``errors`` holds pydantic error dicts without the rejected input.
    """

    def __init__(self, operation: str, errors: list[dict] | None = None):
        self.operation = operation
        self.errors = errors or []
        self.details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in self.errors
        )
        super().__init__(f"Invalid argument for {operation}: {self.details}")


@contextmanager
def invalid_argument_handler(operation: str, stacklevel=1):
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except ValidationError as e:
        error = InvalidArgument(
            operation, e.errors(include_url=False, include_input=False)
        )
        logger.warning("Rejected arguments for %s: %s", operation, error.details, **kw)
        raise error from e
