"""
Languages Package.

Static per-language configuration shared by the morphology client, the
Wiktionary extractor and the lookup service.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from logos.core.errors import InputError
from logos.core.text import always, contains_greek


@dataclass(frozen=True)
class LanguageProfile:
    """Parameters that distinguish one supported language from another."""

    key: str
    name: str
    # Morpheus query parameters
    morpheus_lang: str
    morpheus_engine: str
    # Wiktionary heading anchors; a None boundary stops at the next language heading
    section: str
    boundary: Optional[str]
    # Decides whether a query is first resolved to a headword through Morpheus
    should_resolve: Callable[[str], bool]


GREEK = LanguageProfile(
    key="greek",
    name="Ancient Greek",
    morpheus_lang="grc",
    morpheus_engine="morpheusgrc",
    section="Ancient_Greek",
    boundary="Greek",
    should_resolve=contains_greek,
)

LATIN = LanguageProfile(
    key="latin",
    name="Latin",
    morpheus_lang="lat",
    morpheus_engine="morpheuslat",
    section="Latin",
    boundary=None,
    should_resolve=always,
)

LANGUAGES: Dict[str, LanguageProfile] = {
    GREEK.key: GREEK,
    LATIN.key: LATIN,
    # Aliases accepted in URLs and on the command line
    "grc": GREEK,
    "lat": LATIN,
    "la": LATIN,
}

SUPPORTED_LANGUAGES = [GREEK.key, LATIN.key]


def get_language(key: str) -> LanguageProfile:
    """
    Look up a language profile by key or alias.

    :param key: Language key such as "greek", "latin", "grc" or "lat"
    :return: The matching profile
    :raises InputError: If the language is not supported
    """
    profile = LANGUAGES.get((key or "").strip().lower())
    if profile is None:
        raise InputError(f"Unsupported language: {key!r}. Expected one of {', '.join(SUPPORTED_LANGUAGES)}.")
    return profile


__all__ = ["LanguageProfile", "GREEK", "LATIN", "LANGUAGES", "SUPPORTED_LANGUAGES", "get_language"]
