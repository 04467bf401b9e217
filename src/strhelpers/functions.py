# Global style aliases for the string helpers, e.g.
#   str_before("fox", "The quick brown fox") == "The quick brown"
from strhelpers.core import StringHelpers as helpers

__all__ = [
    "str_after",
    "str_before",
    "str_contains",
    "str_ends_with",
    "str_icontains",
    "str_iends_with",
    "str_istarts_with",
    "str_limit",
    "str_limit_words",
    "str_starts_with",
]

str_after = helpers.after
str_before = helpers.before
str_limit_words = helpers.limit_words
str_limit = helpers.limit
str_contains = helpers.contains
str_icontains = helpers.contains_ignore_case
str_starts_with = helpers.starts_with
str_istarts_with = helpers.starts_with_ignore_case
str_ends_with = helpers.ends_with
str_iends_with = helpers.ends_with_ignore_case
