"""
Immutable records for the region -> district -> settlement hierarchy.

The tree is built once by the loader and never changed afterwards.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class District:
    name: str
    postal_code: str = ""  # empty when no code is assigned
    settlements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Region:
    """Area council (LGA) and its districts, in source order."""

    name: str
    districts: Tuple[District, ...] = ()


@dataclass(frozen=True)
class PostalTree:
    regions: Tuple[Region, ...] = ()
