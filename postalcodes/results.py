"""
Lookup results and the not-found taxonomy.

Resolver operations return either a success record or a NotFound value.
Message strings are only produced here, by `message()`, for callers that
want the human-readable form.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

REGION_NOT_FOUND = "region_not_found"
DISTRICT_NOT_FOUND = "district_not_found"
SETTLEMENT_NOT_FOUND = "settlement_not_found"
NO_CODE_AVAILABLE = "no_code_available"
NO_COMPOSITE_MATCH = "no_composite_match"
POSTAL_CODE_NOT_FOUND = "postal_code_not_found"


@dataclass(frozen=True)
class RegionCodes:
    """Coded districts of one region; both tuples are parallel."""

    postal_codes: Tuple[str, ...]
    districts: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "postal_codes": list(self.postal_codes),
            "districts": list(self.districts),
        }


@dataclass(frozen=True)
class SettlementCodes:
    """Every coded district holding a matching settlement; all tuples are parallel."""

    postal_codes: Tuple[str, ...]
    districts: Tuple[str, ...]
    regions: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "postal_codes": list(self.postal_codes),
            "districts": list(self.districts),
            "regions": list(self.regions),
        }


@dataclass(frozen=True)
class PostalMatch:
    postal_code: str
    district: str
    region: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "postal_code": self.postal_code,
            "district": self.district,
            "region": self.region,
        }


@dataclass(frozen=True)
class TownListing:
    towns: Tuple[str, ...]
    district: str
    region: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "towns": list(self.towns),
            "district": self.district,
            "region": self.region,
        }


@dataclass(frozen=True)
class NotFound:
    """
    A lookup that produced nothing.

    `query` carries the single search term of region/town/code lookups;
    `region`, `district` and `settlement` carry the criteria of composite
    searches, with omitted optional criteria as "". For NO_COMPOSITE_MATCH,
    `cause` names the deepest level at which the walk ran dry.
    """

    reason: str
    query: str = ""
    region: str = ""
    district: str = ""
    settlement: str = ""
    cause: Optional[str] = None


def is_found(result: Any) -> bool:
    return not isinstance(result, NotFound)


def message(result: NotFound) -> str:
    """Render a NotFound as the user-facing message."""
    if result.reason == REGION_NOT_FOUND:
        return f'Region "{result.query}" not found.'
    if result.reason == NO_CODE_AVAILABLE:
        return f'No postal codes found for "{result.query}".'
    if result.reason == SETTLEMENT_NOT_FOUND:
        return f'Town "{result.query}" not found.'
    if result.reason == POSTAL_CODE_NOT_FOUND:
        return f'Postal code "{result.query}" not found.'
    return (
        f'No match found for LGA: "{result.region}", '
        f'District: "{result.district}", and Town: "{result.settlement}".'
    )


def present(result: Any) -> Union[Dict[str, Any], str]:
    """Success records become dicts, NotFound becomes its message."""
    if isinstance(result, NotFound):
        return message(result)
    return result.as_dict()
