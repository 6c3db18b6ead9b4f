"""
Pytest configuration for test discovery, import path setup and shared fixtures.

Ensures the project root is on sys.path so that `import logos` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)


def read_fixture(name: str) -> str:
    with open(os.path.join(FIXTURES_DIR, name), "r", encoding="utf-8") as f:
        return f.read()


def _make_response(status_code: int = 200, json_data: Optional[Any] = None, text: str = "", url: str = "") -> MagicMock:
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.url = url
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def logos_page() -> str:
    """Wiktionary article for λόγος with Ancient Greek and Greek sections."""
    return read_fixture("logos_wiktionary.html")


@pytest.fixture
def amor_page() -> str:
    """Wiktionary article for amor with Galician, Latin and Portuguese sections."""
    return read_fixture("amor_wiktionary.html")


@pytest.fixture
def greek_morpheus_response() -> Dict[str, Any]:
    """Morpheus analysis of λόγου: a single Body object."""
    return json.loads(read_fixture("morpheus_grc_logou.json"))


@pytest.fixture
def latin_morpheus_response() -> Dict[str, Any]:
    """Morpheus analysis of amor: a list of two Bodies."""
    return json.loads(read_fixture("morpheus_lat_amor.json"))


@pytest.fixture
def mock_session() -> MagicMock:
    """A requests session whose ``get`` is configured per test."""
    return MagicMock()


@pytest.fixture
def make_response():
    """Factory for stand-in ``requests.Response`` objects."""
    return _make_response
