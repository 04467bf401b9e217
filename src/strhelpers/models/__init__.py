from .arguments import Match, NeedleSet, Search, Truncation

__all__ = [
    "Match",
    "NeedleSet",
    "Search",
    "Truncation",
]
