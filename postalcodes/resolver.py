"""
Hierarchical postal resolution.

Responsibilities:
- Walk region -> district -> settlement, comparing every name with `is_match`.
- Return a success record, or a NotFound saying which level ran dry.

Non-Responsibilities:
- No loading or validation of the tree.
- No message formatting (see `results.message`).
- No ranking; the first adequate match wins.

Invariant:
Read-only over the tree and deterministic given the same inputs.
"""

from typing import Optional, Tuple, Union

from .logger import get_logger
from .models import District, PostalTree, Region
from .results import (
    DISTRICT_NOT_FOUND,
    NO_CODE_AVAILABLE,
    NO_COMPOSITE_MATCH,
    POSTAL_CODE_NOT_FOUND,
    REGION_NOT_FOUND,
    SETTLEMENT_NOT_FOUND,
    NotFound,
    PostalMatch,
    RegionCodes,
    SettlementCodes,
    TownListing,
)
from .similarity import is_match

_DEPTH = {REGION_NOT_FOUND: 0, DISTRICT_NOT_FOUND: 1, SETTLEMENT_NOT_FOUND: 2}


def _deeper(current: str, candidate: str) -> str:
    return candidate if _DEPTH[candidate] > _DEPTH[current] else current


def _finish(operation: str, result, **terms):
    logger = get_logger()
    logger.record_lookup(operation)
    if isinstance(result, NotFound):
        logger.record_miss(operation, result.reason)
        logger.debug(f"{operation}: no match", reason=result.reason, cause=result.cause, **terms)
    else:
        logger.record_hit(operation)
        logger.debug(f"{operation}: match", **terms)
    return result


def _first_region(tree: PostalTree, query: str) -> Optional[Region]:
    for region in tree.regions:
        if is_match(query, region.name):
            return region
    return None


def _has_settlement(district: District, query: str) -> bool:
    return any(is_match(query, s) for s in district.settlements)


def fuzzy_by_region(tree: PostalTree, query: str) -> Union[RegionCodes, NotFound]:
    """Postal codes of every coded district in the first region matching `query`."""
    region = _first_region(tree, query)
    if region is None:
        return _finish("fuzzy_by_region", NotFound(REGION_NOT_FOUND, query=query), query=query)

    codes = []
    names = []
    for district in region.districts:
        if district.postal_code:
            codes.append(district.postal_code)
            names.append(district.name)

    if not codes:
        result = NotFound(NO_CODE_AVAILABLE, query=query)
    else:
        result = RegionCodes(postal_codes=tuple(codes), districts=tuple(names))
    return _finish("fuzzy_by_region", result, query=query, region=region.name)


def fuzzy_by_settlement(tree: PostalTree, query: str) -> Union[SettlementCodes, NotFound]:
    """
    Every coded district holding a settlement that matches `query`.

    The whole tree is scanned, so one town name may yield entries from
    several districts and regions, in tree order. Each matching settlement
    contributes one entry.
    """
    codes = []
    districts = []
    regions = []
    for region in tree.regions:
        for district in region.districts:
            for settlement in district.settlements:
                if is_match(query, settlement) and district.postal_code:
                    codes.append(district.postal_code)
                    districts.append(district.name)
                    regions.append(region.name)

    if not codes:
        result = NotFound(SETTLEMENT_NOT_FOUND, query=query)
    else:
        result = SettlementCodes(
            postal_codes=tuple(codes),
            districts=tuple(districts),
            regions=tuple(regions),
        )
    return _finish("fuzzy_by_settlement", result, query=query)


def exact_search(
    tree: PostalTree,
    region: str,
    district: str,
    settlement: str,
) -> Union[PostalMatch, NotFound]:
    """
    Resolve a (region, district, settlement) triple; all three must match.

    Depth-first over the tree; the first settlement hit wins and its
    district's code is returned as-is, even when empty.
    """
    terms = {"region": region, "district": district, "settlement": settlement}
    cause = REGION_NOT_FOUND

    for r in tree.regions:
        if not is_match(region, r.name):
            continue
        cause = _deeper(cause, DISTRICT_NOT_FOUND)
        for d in r.districts:
            if not is_match(district, d.name):
                continue
            cause = SETTLEMENT_NOT_FOUND
            if _has_settlement(d, settlement):
                match = PostalMatch(postal_code=d.postal_code, district=d.name, region=r.name)
                return _finish("exact_search", match, **terms)

    return _finish("exact_search", NotFound(NO_COMPOSITE_MATCH, cause=cause, **terms), **terms)


def flexible_search(
    tree: PostalTree,
    region: str,
    district: Optional[str] = None,
    settlement: Optional[str] = None,
) -> Union[PostalMatch, NotFound]:
    """
    Resolve with a required region and optional district/settlement refinements.

    None and "" both mean "no constraint". With a district, the first
    matching district is the answer whether or not the settlement matches
    inside it. Without one, the first district is taken that holds a
    matching settlement (or any district when no settlement was given).
    A matching region whose districts yield nothing hands over to the next
    matching region.
    """
    terms = {"region": region, "district": district or "", "settlement": settlement or ""}
    cause = REGION_NOT_FOUND

    for r in tree.regions:
        if not is_match(region, r.name):
            continue

        if district:
            cause = _deeper(cause, DISTRICT_NOT_FOUND)
            for d in r.districts:
                if not is_match(district, d.name):
                    continue
                if settlement and not _has_settlement(d, settlement):
                    get_logger().debug(
                        "flexible_search: settlement not in district, using district",
                        district=d.name,
                        settlement=settlement,
                    )
                match = PostalMatch(postal_code=d.postal_code, district=d.name, region=r.name)
                return _finish("flexible_search", match, **terms)
            continue

        if not r.districts:
            cause = _deeper(cause, DISTRICT_NOT_FOUND)
            continue
        for d in r.districts:
            if not settlement or _has_settlement(d, settlement):
                match = PostalMatch(postal_code=d.postal_code, district=d.name, region=r.name)
                return _finish("flexible_search", match, **terms)
        cause = SETTLEMENT_NOT_FOUND

    return _finish("flexible_search", NotFound(NO_COMPOSITE_MATCH, cause=cause, **terms), **terms)


def towns_by_postal_code(tree: PostalTree, postal_code: str) -> Union[TownListing, NotFound]:
    """Settlements of the first district carrying exactly `postal_code`."""
    for region in tree.regions:
        for district in region.districts:
            if district.postal_code and district.postal_code == postal_code:
                listing = TownListing(
                    towns=district.settlements,
                    district=district.name,
                    region=region.name,
                )
                return _finish("towns_by_postal_code", listing, query=postal_code)
    result = NotFound(POSTAL_CODE_NOT_FOUND, query=postal_code)
    return _finish("towns_by_postal_code", result, query=postal_code)


def region_names(tree: PostalTree) -> Tuple[str, ...]:
    return tuple(region.name for region in tree.regions)


def districts_of_region(tree: PostalTree, region: str) -> Union[Tuple[str, ...], NotFound]:
    """District names of the first region matching `region`."""
    found = _first_region(tree, region)
    if found is None:
        return _finish("districts_of_region", NotFound(REGION_NOT_FOUND, query=region), query=region)
    names = tuple(d.name for d in found.districts)
    return _finish("districts_of_region", names, query=region, region=found.name)
