from typing import Any, Dict, List, Tuple


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _validate_district(district: Any, where: str) -> List[str]:
    errors: List[str] = []
    if not isinstance(district, dict):
        return [f"{where} must be an object"]

    if not _is_non_empty_str(district.get("name")):
        errors.append(f"{where}: field 'name' must be a non-empty string")

    code = district.get("postal_code")
    if code is not None and not isinstance(code, str):
        errors.append(f"{where}: field 'postal_code' must be a string or null")

    settlements = district.get("settlements", [])
    if not isinstance(settlements, list):
        errors.append(f"{where}: field 'settlements' must be a list")
    else:
        for k, s in enumerate(settlements):
            if not _is_non_empty_str(s):
                errors.append(f"{where}: settlement {k} must be a non-empty string")
    return errors


def validate_tree(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Shape checks only; postal code formats are never inspected.
    """
    if not isinstance(data, dict):
        return ["Document must be a JSON object"]

    regions = data.get("regions")
    if regions is None:
        return ["Missing required field: regions"]
    if not isinstance(regions, list):
        return ["Field 'regions' must be a list"]

    errors: List[str] = []
    for i, region in enumerate(regions):
        where = f"regions[{i}]"
        if not isinstance(region, dict):
            errors.append(f"{where} must be an object")
            continue
        if not _is_non_empty_str(region.get("name")):
            errors.append(f"{where}: field 'name' must be a non-empty string")

        districts = region.get("districts", [])
        if not isinstance(districts, list):
            errors.append(f"{where}: field 'districts' must be a list")
            continue
        for j, district in enumerate(districts):
            errors.extend(_validate_district(district, f"{where}.districts[{j}]"))

    return errors


def validate_tree_strict(data: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Shape checks plus name uniqueness: region names across the document and
    district names within a region, both case-insensitive.
    """
    errors = validate_tree(data)
    if errors:
        return False, errors

    seen_regions = set()
    for region in data["regions"]:
        name = region["name"].lower()
        if name in seen_regions:
            errors.append(f"Duplicate region name: {region['name']}")
        seen_regions.add(name)

        seen_districts = set()
        for district in region.get("districts", []):
            dname = district["name"].lower()
            if dname in seen_districts:
                errors.append(f"Duplicate district name in {region['name']}: {district['name']}")
            seen_districts.add(dname)

    return not errors, errors
