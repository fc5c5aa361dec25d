import argparse
import json
import sys
from pathlib import Path

from . import __version__
from . import resolver
from .env import load_env
from .loader import TreeLoadError, default_tree, load_tree
from .logger import reset_logger
from .models import PostalTree
from .results import NotFound, message
from .schema import validate_tree, validate_tree_strict


def _tree(args: argparse.Namespace) -> PostalTree:
    try:
        if args.data:
            return load_tree(Path(args.data))
        return default_tree()
    except TreeLoadError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)


def _emit(result) -> None:
    if isinstance(result, NotFound):
        print(message(result))
        raise SystemExit(1)
    if isinstance(result, tuple):
        print(json.dumps(list(result), indent=2, ensure_ascii=False))
        return
    print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))


def cmd_region(args: argparse.Namespace) -> None:
    _emit(resolver.fuzzy_by_region(_tree(args), args.name))


def cmd_town(args: argparse.Namespace) -> None:
    _emit(resolver.fuzzy_by_settlement(_tree(args), args.name))


def cmd_towns(args: argparse.Namespace) -> None:
    _emit(resolver.towns_by_postal_code(_tree(args), args.code))


def cmd_regions(args: argparse.Namespace) -> None:
    _emit(resolver.region_names(_tree(args)))


def cmd_districts(args: argparse.Namespace) -> None:
    _emit(resolver.districts_of_region(_tree(args), args.region))


def cmd_search(args: argparse.Namespace) -> None:
    _emit(resolver.exact_search(_tree(args), args.region, args.district, args.town))


def cmd_flexible(args: argparse.Namespace) -> None:
    _emit(resolver.flexible_search(_tree(args), args.region, args.district, args.town))


def cmd_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Input file not found: {input_path}", file=sys.stderr)
        raise SystemExit(2)
    with input_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            print("Invalid:")
            print(f" - Not valid JSON: {e}")
            raise SystemExit(2)
    if args.strict:
        _, errors = validate_tree_strict(data)
    else:
        errors = validate_tree(data)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def main(argv=None):
    # Load .env if present (POSTALCODES_DATA_PATH, POSTALCODES_LOG_LEVEL, etc.)
    load_env()
    # The logger is built from settings, so rebuild it once .env is applied
    reset_logger()
    parser = argparse.ArgumentParser(prog="postalcodes", description="FCT postal code lookup")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--data", help="Path to a postal data JSON document (default: bundled data)")

    subparsers = parser.add_subparsers(dest="command")
    reg = subparsers.add_parser("region", help="Postal codes of an area council")
    reg.add_argument("name", help="Area council name; typos tolerated")
    reg.set_defaults(func=cmd_region)

    twn = subparsers.add_parser("town", help="Postal codes for a town or settlement")
    twn.add_argument("name", help="Town name; typos tolerated")
    twn.set_defaults(func=cmd_town)

    tws = subparsers.add_parser("towns", help="Towns of the district carrying a postal code")
    tws.add_argument("code", help="Postal code, e.g. 900107")
    tws.set_defaults(func=cmd_towns)

    rgs = subparsers.add_parser("regions", help="List all area councils")
    rgs.set_defaults(func=cmd_regions)

    dst = subparsers.add_parser("districts", help="List districts of an area council")
    dst.add_argument("region", help="Area council name; typos tolerated")
    dst.set_defaults(func=cmd_districts)

    srch = subparsers.add_parser("search", help="Match area council, district and town together")
    srch.add_argument("--region", required=True, help="Area council (LGA) name")
    srch.add_argument("--district", required=True, help="District name")
    srch.add_argument("--town", required=True, help="Town or settlement name")
    srch.set_defaults(func=cmd_search)

    flx = subparsers.add_parser("flexible", help="Match area council, optionally narrowed by district and town")
    flx.add_argument("--region", required=True, help="Area council (LGA) name")
    flx.add_argument("--district", help="District name (optional)")
    flx.add_argument("--town", help="Town or settlement name (optional)")
    flx.set_defaults(func=cmd_flexible)

    val = subparsers.add_parser("validate", help="Validate a postal data JSON document")
    val.add_argument("--input", required=True, help="Path to postal data JSON")
    val.add_argument("--strict", action="store_true", help="Also require unique region and district names")
    val.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
