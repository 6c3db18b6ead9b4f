"""
Core domain models for word lookups.

Defines typed structures for morphological analyses returned by the Morpheus
service, cleaned Wiktionary definitions, and combined lookup results.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class InflectionForm(BaseModel):
    """One inflectional reading of a queried form."""

    case: Optional[str] = None
    number: Optional[str] = None
    gender: Optional[str] = None
    person: Optional[str] = None
    mood: Optional[str] = None
    tense: Optional[str] = None
    voice: Optional[str] = None
    stem: str = ""
    suffix: str = ""

    @property
    def form(self) -> str:
        return f"{self.stem}{self.suffix}"


class MorphologyEntry(BaseModel):
    """A dictionary headword with the inflections that match the queried form."""

    headword: str
    part_of_speech: Optional[str] = None
    declension: Optional[str] = None
    gender: Optional[str] = None
    inflections: List[InflectionForm] = Field(default_factory=list)


class DefinitionResult(BaseModel):
    """Sanitized HTML for one language section of a Wiktionary article."""

    lemma: str
    definition_html: str = ""
    language: Optional[str] = None


class LookupResult(BaseModel):
    """A query resolved (optionally) to a headword, with its definition."""

    query: str
    lemma: str
    resolved: bool = False
    entries: List[MorphologyEntry] = Field(default_factory=list)
    definition_html: str = ""
