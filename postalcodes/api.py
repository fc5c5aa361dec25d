"""
Plain-value lookups over the default postal tree.

Each function returns a dict (or list) on success and the user-facing
message string when nothing matched, so callers tell the two apart with
`isinstance(result, str)`.
"""

from typing import Any, Dict, List, Optional, Union

from . import resolver
from .loader import default_tree
from .results import is_found, message, present


def by_region(region: str) -> Union[Dict[str, Any], str]:
    """Postal codes and districts for an area council, e.g. "Bwari"."""
    return present(resolver.fuzzy_by_region(default_tree(), region))


def by_town(town: str) -> Union[Dict[str, Any], str]:
    """Postal codes, districts and area councils for a town name."""
    return present(resolver.fuzzy_by_settlement(default_tree(), town))


def get_towns(postal_code: str) -> Union[Dict[str, Any], str]:
    return present(resolver.towns_by_postal_code(default_tree(), postal_code))


def get_all_regions() -> List[str]:
    return list(resolver.region_names(default_tree()))


def get_districts(region: str) -> Union[List[str], str]:
    result = resolver.districts_of_region(default_tree(), region)
    if not is_found(result):
        return message(result)
    return list(result)


def search_postal_code(region: str, district: str, town: str) -> Union[Dict[str, Any], str]:
    """Match all three of area council, district and town, tolerating typos in each."""
    return present(resolver.exact_search(default_tree(), region, district, town))


def flexible_search(
    region: str,
    district: Optional[str] = None,
    town: Optional[str] = None,
) -> Union[Dict[str, Any], str]:
    """
    Match an area council, optionally narrowed by district and town.

    A town that does not match inside a matched district still returns
    that district's code.
    """
    return present(resolver.flexible_search(default_tree(), region, district, town))
