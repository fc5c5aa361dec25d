"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Dict, Any

from postalcodes.loader import parse_tree
from postalcodes.models import PostalTree


@pytest.fixture
def tree_document() -> Dict[str, Any]:
    """Small postal data document.

    "Sabon Gari" recurs under two regions; Kwali has no coded district.
    """
    return {
        "regions": [
            {
                "name": "Abuja Municipal",
                "districts": [
                    {
                        "name": "Kabusa",
                        "postal_code": "900107",
                        "settlements": ["Kabusa", "Lugbe", "Chika"],
                    },
                    {
                        "name": "Garki-rural",
                        "postal_code": "900241",
                        "settlements": ["Garki village", "Durumi", "Sabon Gari"],
                    },
                ],
            },
            {
                "name": "Bwari",
                "districts": [
                    {
                        "name": "Bwari",
                        "postal_code": "901101",
                        "settlements": ["Bwari town", "Kubwa", "Sabon Gari"],
                    },
                    {"name": "Kawu", "postal_code": "", "settlements": ["Kawu"]},
                ],
            },
            {
                "name": "Kwali",
                "districts": [
                    {"name": "Kundu", "postal_code": None, "settlements": ["Kundu"]},
                    {"name": "Yangoji", "settlements": ["Yangoji"]},
                ],
            },
        ]
    }


@pytest.fixture
def tree(tree_document) -> PostalTree:
    """The small document as an immutable tree."""
    return parse_tree(tree_document)


@pytest.fixture
def tree_file(tmp_path, tree_document) -> Path:
    """The small document written to disk."""
    path = tmp_path / "postal_codes.json"
    path.write_text(json.dumps(tree_document, indent=2))
    return path
