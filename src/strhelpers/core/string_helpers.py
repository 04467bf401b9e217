"""
Static string helpers: substring extraction, truncation and
case-sensitive or case-insensitive containment, prefix and suffix checks.

Every check accepts a single needle or an ordered collection of needles and
succeeds when any needle satisfies it. Case-insensitive variants compare
``str.casefold`` forms, so ``"STRASSE"`` matches ``"straße"``.
"""

from collections.abc import Callable, Iterable
from typing import TypeAlias

from wcwidth import wcwidth

from strhelpers.models import Match, Search, Truncation
from strhelpers.shared import Logger, invalid_argument_handler

logger = Logger(__name__).get_logger()

DEFAULT_WORD_LIMIT = 10
DEFAULT_WIDTH_LIMIT = 100
DEFAULT_SUFFIX = "..."

Needle: TypeAlias = str | Iterable[str]


def _match(operation: str, needle: Needle, haystack: str) -> Match:
    # stacklevel 2 attributes the warning to the public helper
    with invalid_argument_handler(operation, stacklevel=2):
        return Match(needle=needle, haystack=haystack)


def _any(match: Match, test: Callable[[str, str], bool], fold=False) -> bool:
    haystack = match.haystack.casefold() if fold else match.haystack

    for ndl in match.needles:
        if test(ndl.casefold() if fold else ndl, haystack):
            return True

    return False


def _char_width(char: str) -> int:
    width = wcwidth(char)
    # Non-printable characters occupy one column
    return width if width >= 0 else 1


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies.

    East Asian wide and fullwidth characters count as two, combining marks
    as zero.
    """
    return sum(_char_width(char) for char in text)


def after(search: str, haystack: str) -> str:
    """Return the remainder of a string after the first ``search``.

    An empty ``search`` returns ``haystack`` unchanged, a missing one
    returns an empty string. Leading whitespace is trimmed.
    """
    with invalid_argument_handler("after"):
        args = Search(search=search, haystack=haystack)

    if args.search == "":
        return args.haystack

    _, found, remainder = args.haystack.partition(args.search)
    return remainder.lstrip() if found else ""


def before(search: str, haystack: str) -> str:
    """Get the portion of a string before the first ``search``.

    An empty ``search`` returns ``haystack`` unchanged, a missing one
    returns the whole haystack. Trailing whitespace is trimmed.
    """
    with invalid_argument_handler("before"):
        args = Search(search=search, haystack=haystack)

    if args.search == "":
        return args.haystack

    return args.haystack.partition(args.search)[0].rstrip()


def limit_words(
    text: str, limit: int = DEFAULT_WORD_LIMIT, suffix: str = DEFAULT_SUFFIX
) -> str:
    """Limit the number of space separated words, appending ``suffix``."""
    with invalid_argument_handler("limit_words"):
        args = Truncation(text=text, limit=limit, suffix=suffix)

    words = args.text.split(" ")

    if len(words) <= args.limit:
        return args.text

    logger.debug("Truncating %d words to %d", len(words), args.limit)
    return " ".join(words[: args.limit]) + args.suffix


def limit(
    text: str, limit: int = DEFAULT_WIDTH_LIMIT, suffix: str = DEFAULT_SUFFIX
) -> str:
    """Limit the display width of a string, appending ``suffix``.

    A wide character that would cross the limit is dropped whole.
    """
    with invalid_argument_handler("limit"):
        args = Truncation(text=text, limit=limit, suffix=suffix)

    if display_width(args.text) <= args.limit:
        return args.text

    kept = []
    width = 0
    for char in args.text:
        width += _char_width(char)
        if width > args.limit:
            break
        kept.append(char)

    logger.debug("Truncating to display width %d", args.limit)
    return "".join(kept).rstrip() + args.suffix


def contains(needle: Needle, haystack: str) -> bool:
    """Test if a string contains any of the given needles."""
    match = _match("contains", needle, haystack)
    return _any(match, lambda ndl, hs: ndl in hs)


def contains_ignore_case(needle: Needle, haystack: str) -> bool:
    """Test if a string contains any of the given needles, ignoring case."""
    match = _match("contains_ignore_case", needle, haystack)
    return _any(match, lambda ndl, hs: ndl in hs, fold=True)


# An empty needle never starts a string but always ends one.
# TODO: make starts_with and ends_with agree on empty needles in the
# next major release.


def starts_with(needle: Needle, haystack: str) -> bool:
    """Determine if a string starts with any of the given needles."""
    match = _match("starts_with", needle, haystack)
    return _any(match, lambda ndl, hs: ndl != "" and hs.startswith(ndl))


def starts_with_ignore_case(needle: Needle, haystack: str) -> bool:
    match = _match("starts_with_ignore_case", needle, haystack)
    return _any(match, lambda ndl, hs: ndl != "" and hs.startswith(ndl), fold=True)


def ends_with(needle: Needle, haystack: str) -> bool:
    """Determine if a string ends with any of the given needles."""
    match = _match("ends_with", needle, haystack)
    return _any(match, lambda ndl, hs: hs.endswith(ndl))


def ends_with_ignore_case(needle: Needle, haystack: str) -> bool:
    match = _match("ends_with_ignore_case", needle, haystack)
    return _any(match, lambda ndl, hs: hs.endswith(ndl), fold=True)


class StringHelpers:
    """Class based access to the string helpers."""

    after = staticmethod(after)
    before = staticmethod(before)
    limit_words = staticmethod(limit_words)
    limit = staticmethod(limit)
    display_width = staticmethod(display_width)
    contains = staticmethod(contains)
    contains_ignore_case = staticmethod(contains_ignore_case)
    starts_with = staticmethod(starts_with)
    starts_with_ignore_case = staticmethod(starts_with_ignore_case)
    ends_with = staticmethod(ends_with)
    ends_with_ignore_case = staticmethod(ends_with_ignore_case)
