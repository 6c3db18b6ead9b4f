"""
Combined lookup: resolve a query to a headword, then define it.
"""

from __future__ import annotations

from typing import Callable, Optional

from logos.core.errors import InputError
from logos.core.models import LookupResult
from logos.core.text import clean_query, strip_homograph_number
from logos.languages import LanguageProfile
from logos.logging_config import get_logger
from logos.processing.morphology import MorphologyClient
from logos.processing.wiktionary import DefinitionExtractor

logger = get_logger("lookup")


class WordLookup:
    """
    Look up a word for one language.

    Whether the query is first resolved through the morphology service is
    decided by a predicate over the query text. By default the language
    profile's policy applies: Greek queries are resolved only when they are
    written in Greek script, Latin queries always.
    """

    def __init__(
        self,
        language: LanguageProfile,
        morphology: Optional[MorphologyClient] = None,
        extractor: Optional[DefinitionExtractor] = None,
        should_resolve: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.language = language
        self.morphology = morphology or MorphologyClient(language)
        self.extractor = extractor or DefinitionExtractor()
        self.should_resolve = should_resolve or language.should_resolve

    def lookup(self, query: str) -> LookupResult:
        """
        Resolve and define a query.

        :param query: Word as typed by the user
        :return: The lemma used, the morphology entries (if resolved) and the definition
        :raises InputError: If the query is empty
        """
        query = clean_query(query)
        if not query:
            raise InputError("Query parameter is required.")

        lemma = query
        entries = []
        resolved = self.should_resolve(query)
        if resolved:
            entries = self.morphology.resolve(query)
            if entries:
                lemma = strip_homograph_number(entries[0].headword) or query
            logger.info("Resolved %r to %r (%d entries)", query, lemma, len(entries))

        definition = self.extractor.define(lemma, self.language)
        return LookupResult(
            query=query,
            lemma=definition.lemma,
            resolved=resolved,
            entries=entries,
            definition_html=definition.definition_html,
        )
