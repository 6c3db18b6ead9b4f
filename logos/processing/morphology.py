"""
Morphological analysis through the Perseids Morpheus service.

The service wraps its analyses in an RDF annotation envelope converted from XML.
Any node that can repeat (``Body``, ``infl``) is a bare object when there is one
occurrence and a list when there are several, and every leaf value sits under a
``"$"`` key. This module flattens that envelope into ``MorphologyEntry`` records.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from logos.core.errors import MalformedResponse, NoAnalysisError, ServiceError
from logos.core.models import InflectionForm, MorphologyEntry
from logos.core.text import clean_query
from logos.languages import LanguageProfile
from logos.logging_config import get_logger
from logos.processing.api_client import APIClient, get_api_client

logger = get_logger("morphology")

# Morpheus inflection keys -> InflectionForm fields
INFLECTION_FIELDS = {
    "case": "case",
    "num": "number",
    "gend": "gender",
    "pers": "person",
    "mood": "mood",
    "tense": "tense",
    "voice": "voice",
}


def _coerce_list(node: Any) -> List[Any]:
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def _string_value(node: Any) -> Optional[str]:
    if isinstance(node, str):
        return node
    if isinstance(node, dict) and "$" in node:
        return str(node["$"])
    return None


def _child(node: Any, *path: str) -> Any:
    """Walk nested dicts, returning None as soon as a step is missing."""
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _parse_inflection(infl: Any) -> InflectionForm:
    values = {field: _string_value(_child(infl, key)) for key, field in INFLECTION_FIELDS.items()}
    return InflectionForm(
        stem=_string_value(_child(infl, "term", "stem")) or "",
        suffix=_string_value(_child(infl, "term", "suff")) or "",
        **values,
    )


def _parse_body(body: Any, word: str) -> Optional[MorphologyEntry]:
    entry = _child(body, "rest", "entry")
    if not isinstance(entry, dict):
        return None

    dict_data = entry.get("dict")
    inflections = [_parse_inflection(infl) for infl in _coerce_list(entry.get("infl"))]

    return MorphologyEntry(
        headword=_string_value(_child(dict_data, "hdwd")) or word,
        part_of_speech=_string_value(_child(dict_data, "pofs")),
        declension=_string_value(_child(dict_data, "decl")),
        gender=_string_value(_child(dict_data, "gend")),
        inflections=inflections,
    )


def parse_morpheus_response(data: Any, word: str) -> List[MorphologyEntry]:
    """
    Parse the response from the Morpheus service.

    Args:
        data: Decoded JSON response
        word: The (trimmed) word that was queried, used as fallback headword

    Returns:
        One entry per annotation body carrying a dictionary entry, in service order

    Raises:
        MalformedResponse: If the annotation envelope is missing
        NoAnalysisError: If the annotation carries no bodies at all
    """
    annotation = _child(data, "RDF", "Annotation")
    if not isinstance(annotation, dict):
        raise MalformedResponse("No annotation data in morphology response.")

    bodies = _coerce_list(annotation.get("Body"))
    if not bodies:
        raise NoAnalysisError(f"No morphological data found for {word}.")

    entries = []
    for body in bodies:
        entry = _parse_body(body, word)
        if entry is not None:
            entries.append(entry)

    dropped = len(bodies) - len(entries)
    if dropped:
        logger.warning("Dropped %d of %d morphology bodies without an entry for %r", dropped, len(bodies), word)

    return entries


class MorphologyClient:
    """Resolve inflected forms to dictionary entries for one language."""

    def __init__(self, language: LanguageProfile, api_client: Optional[APIClient] = None) -> None:
        self.language = language
        self.api_client = api_client or get_api_client()

    @property
    def endpoint(self) -> str:
        return self.api_client.settings.morphology_endpoint

    def resolve(self, word: str) -> List[MorphologyEntry]:
        """
        Analyze a word form.

        :param word: Inflected form as typed by the user
        :return: Matching entries; empty for blank input (no request is made)
        """
        word = clean_query(word)
        if not word:
            return []

        params = {
            "lang": self.language.morpheus_lang,
            "engine": self.language.morpheus_engine,
            "word": word,
        }
        response = self.api_client.get(
            self.endpoint,
            params=params,
            error_cls=ServiceError,
            service="Morphology service",
        )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse("Morphology service returned invalid JSON.") from e

        entries = parse_morpheus_response(data, word)
        logger.debug("Resolved %r (%s) to %d entries", word, self.language.key, len(entries))
        return entries


def format_entry(entry: MorphologyEntry) -> str:
    """
    Format an entry as plain text for terminal output.

    Args:
        entry: Entry to format

    Returns:
        Headword line followed by one indented line per inflection
    """
    formatted = entry.headword

    meta = [
        f"{label}: {value}"
        for label, value in (
            ("POS", entry.part_of_speech),
            ("declension", entry.declension),
            ("gender", entry.gender),
        )
        if value
    ]
    if meta:
        formatted += f" [{', '.join(meta)}]"

    for infl in entry.inflections:
        attrs = [f"{field}: {getattr(infl, field)}" for field in INFLECTION_FIELDS.values() if getattr(infl, field)]
        line = "  "
        if infl.form:
            line += f"{infl.stem}-{infl.suffix}" if infl.stem and infl.suffix else infl.form
            if attrs:
                line += " "
        line += ", ".join(attrs)
        formatted += "\n" + line.rstrip()

    return formatted
