from .string_helpers import (
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

__all__ = [
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
