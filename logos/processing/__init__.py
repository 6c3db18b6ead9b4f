"""
Processing Package.

Clients for the upstream services and the lookup built on top of them.
"""

from logos.processing.api_client import APIClient, get_api_client
from logos.processing.lookup import WordLookup
from logos.processing.morphology import MorphologyClient, format_entry, parse_morpheus_response
from logos.processing.wiktionary import (
    DefinitionExtractor,
    isolate_section,
    sanitize_fragment,
    truncate_at_cutoff,
)

__all__ = [
    "APIClient",
    "get_api_client",
    "MorphologyClient",
    "parse_morpheus_response",
    "format_entry",
    "DefinitionExtractor",
    "isolate_section",
    "truncate_at_cutoff",
    "sanitize_fragment",
    "WordLookup",
]
