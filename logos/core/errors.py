"""
Error taxonomy for lookups.

Every exception carries the HTTP status code the web layer answers with, so that
request handlers can convert any failure into a structured ``{"error": ...}`` payload.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LogosError(Exception):
    """Base class for all lookup failures."""

    status_code = 500

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.upstream_status = upstream_status

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InputError(LogosError):
    """A required parameter is missing or empty."""

    status_code = 400


class NotFoundError(LogosError):
    """The requested language section is absent from an otherwise valid page."""

    status_code = 404


class UpstreamUnavailable(LogosError):
    """An external service answered with a non-success status or could not be reached."""

    status_code = 503


class FetchError(UpstreamUnavailable):
    """The Wiktionary article could not be fetched."""


class ServiceError(UpstreamUnavailable):
    """The morphology service failed."""


class NoAnalysisError(ServiceError):
    """The morphology service returned an annotation without any analyses."""

    status_code = 404


class MalformedResponse(ServiceError):
    """The morphology service returned a success status without the expected structure."""

    status_code = 502
