from .core import (
    StringHelpers,
    after,
    before,
    contains,
    contains_ignore_case,
    display_width,
    ends_with,
    ends_with_ignore_case,
    limit,
    limit_words,
    starts_with,
    starts_with_ignore_case,
)
from .shared import InvalidArgument

__version__ = "0.1.0"

__all__ = [
    "InvalidArgument",
    "StringHelpers",
    "after",
    "before",
    "contains",
    "contains_ignore_case",
    "display_width",
    "ends_with",
    "ends_with_ignore_case",
    "limit",
    "limit_words",
    "starts_with",
    "starts_with_ignore_case",
]
