"""
SearchShare - Data Models

Keyword records shared by the scoring engine, the validation boundary and
the provider adapters. Records are immutable once built; the SOV calculator
returns enriched copies instead of mutating its input.

Field names are snake_case in Python and camelCase on the wire
(``searchVolume``, ``isOwnBrand``, ``visibleVolume``). Both spellings are
accepted when building a record.
"""

from typing import Dict, Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class KeywordRecord(BaseModel):
    """Base for keyword records: frozen, camelCase aliases."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire format, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BrandKeyword(KeywordRecord):
    """A keyword in the brand-awareness comparison set."""
    keyword: str
    search_volume: int
    is_own_brand: bool


class RankedKeyword(KeywordRecord):
    """
    A keyword the subject domain holds an organic ranking for.

    ``ctr`` (percentage, one decimal) and ``visible_volume`` are derived
    fields. They stay ``None`` on input and are filled in by the SOV
    calculator.
    """
    keyword: str
    search_volume: int
    position: int
    url: Optional[str] = None
    ctr: Optional[float] = None
    visible_volume: Optional[int] = None

    def with_visibility(self, ctr: float, visible_volume: int) -> "RankedKeyword":
        """Return a copy carrying the derived visibility fields."""
        return self.model_copy(update={"ctr": ctr, "visible_volume": visible_volume})


__all__ = [
    "KeywordRecord",
    "BrandKeyword",
    "RankedKeyword",
]
