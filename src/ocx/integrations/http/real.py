"""httpx-backed HTTP client."""

import logging

import httpx

from ocx.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from ocx.exceptions import FetchError
from ocx.integrations.http.abc import HttpClient

logger = logging.getLogger(__name__)


class RealHttpClient(HttpClient):
    """Fetch documents with httpx, following redirects."""

    def __init__(self, timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def get_text(self, url: str) -> str:
        logger.debug("GET %s", url)
        try:
            response = httpx.get(url, follow_redirects=True, timeout=self._timeout)
        except httpx.HTTPError as e:
            raise FetchError(url, str(e)) from e

        if not response.is_success:
            raise FetchError(url, response.reason_phrase, status_code=response.status_code)
        return response.text
