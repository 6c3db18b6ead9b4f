"""
Core Package.

Models, errors, configuration and text helpers shared by the rest of the package.
"""

from logos.core.config import Settings
from logos.core.errors import (
    FetchError,
    InputError,
    LogosError,
    MalformedResponse,
    NoAnalysisError,
    NotFoundError,
    ServiceError,
    UpstreamUnavailable,
)
from logos.core.models import DefinitionResult, InflectionForm, LookupResult, MorphologyEntry
from logos.core.text import clean_query, contains_greek, detect_language, strip_homograph_number

__all__ = [
    # Configuration
    "Settings",
    # Errors
    "LogosError",
    "InputError",
    "NotFoundError",
    "UpstreamUnavailable",
    "FetchError",
    "ServiceError",
    "NoAnalysisError",
    "MalformedResponse",
    # Models
    "InflectionForm",
    "MorphologyEntry",
    "DefinitionResult",
    "LookupResult",
    # Text
    "clean_query",
    "contains_greek",
    "detect_language",
    "strip_homograph_number",
]
