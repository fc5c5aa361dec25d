"""
Builds the immutable postal tree from a JSON document.

Sources, in the order `default_tree()` considers them:
- POSTALCODES_DATA_URL (fetched once with retry)
- POSTALCODES_DATA_PATH
- the document bundled with the package
"""

import functools
import json
from pathlib import Path
from typing import Any, Dict

import requests

from .env import get_settings
from .logger import get_logger
from .models import District, PostalTree, Region
from .retry import RetryError, exponential_backoff
from .schema import validate_tree

BUNDLED_DATA_PATH = Path(__file__).parent / "data" / "postal_codes.json"


class TreeLoadError(ValueError):
    """The postal data document could not be read or is malformed."""


def parse_tree(data: Dict[str, Any]) -> PostalTree:
    errors = validate_tree(data)
    if errors:
        raise TreeLoadError("Invalid postal data: " + "; ".join(errors))

    regions = []
    for region in data["regions"]:
        districts = tuple(
            District(
                name=d["name"],
                postal_code=d.get("postal_code") or "",
                settlements=tuple(d.get("settlements", [])),
            )
            for d in region.get("districts", [])
        )
        regions.append(Region(name=region["name"], districts=districts))
    return PostalTree(regions=tuple(regions))


def load_tree(path: Path) -> PostalTree:
    """Read and parse a postal data document from disk."""
    logger = get_logger()
    path = Path(path)
    if not path.exists():
        logger.error("Postal data file not found", path=str(path))
        raise TreeLoadError(f"Postal data file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Postal data is not valid JSON", path=str(path), error=str(e))
        raise TreeLoadError(f"Postal data is not valid JSON ({path}): {e}") from e
    except (UnicodeDecodeError, OSError) as e:
        logger.error("Postal data file could not be read", path=str(path), error=str(e))
        raise TreeLoadError(f"Postal data file could not be read ({path}): {e}") from e

    tree = parse_tree(data)
    logger.info("Loaded postal data", path=str(path), regions=len(tree.regions))
    return tree


def _log_retry(attempt: int, error: Exception, delay: float, url: str) -> None:
    get_logger().warning(
        "Retrying postal data request",
        url=url,
        attempt=attempt,
        delay=delay,
        error=str(error),
    )


@exponential_backoff(
    max_retries=3,
    base_delay=1.0,
    exceptions=(requests.exceptions.Timeout, requests.exceptions.ConnectionError),
    on_retry=_log_retry,
)
def _get_with_retry(url: str):
    return requests.get(url, timeout=15)


def fetch_tree(url: str) -> PostalTree:
    """Download and parse a postal data document.

    Raises TreeLoadError on HTTP errors, exhausted retries or a bad document.
    """
    logger = get_logger()
    try:
        resp = _get_with_retry(url)
        resp.raise_for_status()
        data = resp.json()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "HTTPError"
        logger.error("Postal data request failed", url=url, status=status)
        raise TreeLoadError(f"Postal data request failed ({status}): {url}") from e
    except RetryError as e:
        logger.error("Postal data request gave up", url=url, error=str(e))
        raise TreeLoadError(f"Postal data request error: {e}") from e
    # requests' JSONDecodeError is also a RequestException
    except (requests.exceptions.JSONDecodeError, ValueError) as e:
        logger.error("Postal data response is not JSON", url=url, error=str(e))
        raise TreeLoadError(f"Postal data response is not valid JSON: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Postal data request error", url=url, error=str(e))
        raise TreeLoadError(f"Postal data request error: {e}") from e

    tree = parse_tree(data)
    logger.info("Fetched postal data", url=url, regions=len(tree.regions))
    return tree


@functools.lru_cache(maxsize=1)
def default_tree() -> PostalTree:
    """The process-wide tree, loaded on first use."""
    settings = get_settings()
    if settings.data_url:
        return fetch_tree(settings.data_url)
    if settings.data_path:
        return load_tree(settings.data_path)
    return load_tree(BUNDLED_DATA_PATH)
