"""
Text helpers for query handling.
"""

from __future__ import annotations

import re
import unicodedata

from logos.core.constants import GREEK_SCRIPT_PATTERN

_GREEK_RE = re.compile(GREEK_SCRIPT_PATTERN)


def clean_query(text: str) -> str:
    """
    Normalize a user-supplied word for lookup.

    Applies NFC composition so that decomposed polytonic input matches the
    precomposed forms used by Wiktionary titles, and trims surrounding whitespace.

    :param text: Raw user input
    :return: Cleaned query, possibly empty
    """
    if not text:
        return ""
    return unicodedata.normalize("NFC", text).strip()


def contains_greek(text: str) -> bool:
    """Return True if the text contains any Greek-script character."""
    return bool(text) and _GREEK_RE.search(text) is not None


def always(text: str) -> bool:
    return True


def detect_language(text: str) -> str:
    """
    Detect whether a query is Greek or Latin based on its script.

    :param text: Query text
    :return: "greek" or "latin"
    """
    return "greek" if contains_greek(text) else "latin"


def strip_homograph_number(headword: str) -> str:
    """
    Drop the homograph index Morpheus appends to headwords ("sum1" -> "sum").

    :param headword: Headword as returned by the analysis service
    :return: Headword usable as a dictionary title
    """
    return re.sub(r"\d+$", "", headword)
