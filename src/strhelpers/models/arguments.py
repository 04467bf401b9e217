from pydantic import BaseModel, ConfigDict, NonNegativeInt, StrictStr
from typing import TypeAlias

# Tuples, sets and generators of text are accepted and become lists
NeedleSet: TypeAlias = StrictStr | list[StrictStr]


class Match(BaseModel):
    """A needle or an ordered collection of needles and the haystack to test."""

    model_config = ConfigDict(frozen=True)

    needle: NeedleSet
    haystack: StrictStr

    @property
    def needles(self) -> tuple[str, ...]:
        if isinstance(self.needle, str):
            return (self.needle,)
        return tuple(self.needle)


class Search(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    search: str
    haystack: str


class Truncation(BaseModel):
    """Arguments shared by the truncating helpers.

    A negative limit is rejected rather than clamped.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    text: str
    limit: NonNegativeInt
    suffix: str
