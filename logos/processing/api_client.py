"""
Shared HTTP client for the upstream services.
"""

from typing import Dict, Optional, Type

import requests
from requests.adapters import HTTPAdapter

from logos.core.config import Settings
from logos.core.errors import UpstreamUnavailable
from logos.logging_config import get_logger

logger = get_logger("api_client")


class APIClient:
    """
    Thin wrapper around a pooled ``requests.Session``.

    Every call is a single round trip: no retries and no caching. Failures are
    reported as ``UpstreamUnavailable`` (or the subclass passed by the caller)
    carrying the upstream status code when there is one.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        :param settings: Runtime settings (timeout, user agent)
        :param session: Pre-built session, mainly for tests
        """
        self.settings = settings or Settings()

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=0, pool_connections=10, pool_maxsize=20)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def get(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        error_cls: Type[UpstreamUnavailable] = UpstreamUnavailable,
        service: str = "upstream service",
    ) -> requests.Response:
        """
        Make a GET request.

        :param url: Absolute URL
        :param params: Query parameters
        :param headers: Extra request headers
        :param error_cls: Exception raised on failure
        :param service: Human-readable service name for error messages
        :return: The successful response
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.settings.request_timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("%s unreachable: %s", service, e)
            raise error_cls(f"Could not reach {service}: {e}") from e

        # Morpheus answers 201 Created for a successful analysis
        if not 200 <= response.status_code < 300:
            logger.warning("%s returned status %s for %s", service, response.status_code, response.url)
            raise error_cls(
                f"{service} returned status {response.status_code}",
                upstream_status=response.status_code,
            )
        return response


# Shared instance for the default settings
_api_client: Optional[APIClient] = None


def get_api_client() -> APIClient:
    """Get or create the shared API client."""
    global _api_client
    if _api_client is None:
        _api_client = APIClient(Settings.from_env())
    return _api_client
