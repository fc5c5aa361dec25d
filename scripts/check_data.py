#!/usr/bin/env python3
"""
Audit a postal data document before shipping it.

Usage:
    python scripts/check_data.py --data postalcodes/data/postal_codes.json
"""

import argparse
import json
from collections import defaultdict
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from postalcodes.loader import parse_tree
from postalcodes.schema import validate_tree_strict


def audit(data_path: Path) -> bool:
    """
    Strictly validate the document and report coverage.

    Returns True if the document is valid.
    """
    print(f"Loading {data_path}...")
    with open(data_path, encoding="utf-8") as f:
        data = json.load(f)

    is_valid, errors = validate_tree_strict(data)
    if not is_valid:
        print(f"\n❌ {len(errors)} problem(s):")
        for e in errors:
            print(f"  - {e}")
        return False

    tree = parse_tree(data)
    districts = [(r.name, d) for r in tree.regions for d in r.districts]
    uncoded = [(region, d.name) for region, d in districts if not d.postal_code]

    homes = defaultdict(list)
    for region, d in districts:
        for s in d.settlements:
            homes[s.lower()].append(f"{region}/{d.name}")
    recurring = {s: where for s, where in homes.items() if len(where) > 1}

    print(f"\n✅ Valid: {len(tree.regions)} regions, {len(districts)} districts, "
          f"{sum(len(d.settlements) for _, d in districts)} settlements")

    if uncoded:
        print(f"\nDistricts without a postal code ({len(uncoded)}):")
        for region, name in uncoded:
            print(f"  - {region}/{name}")

    if recurring:
        print(f"\nSettlements under more than one district ({len(recurring)}):")
        for s, where in sorted(recurring.items()):
            print(f"  - {s}: {', '.join(where)}")

    return True


def main():
    parser = argparse.ArgumentParser(description="Audit a postal data document")
    parser.add_argument("--data", default="postalcodes/data/postal_codes.json", help="Postal data JSON path")
    args = parser.parse_args()

    data_path = Path(args.data)
    if not data_path.exists():
        print(f"❌ File not found: {data_path}")
        sys.exit(1)

    sys.exit(0 if audit(data_path) else 1)


if __name__ == "__main__":
    main()
