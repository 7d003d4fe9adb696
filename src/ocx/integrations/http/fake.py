"""In-memory HTTP client for tests."""

from ocx.exceptions import FetchError
from ocx.integrations.http.abc import HttpClient


class FakeHttpClient(HttpClient):
    """Serve pre-configured responses and record requested URLs.

    Unknown URLs respond with 404.
    """

    def __init__(self, responses: dict[str, str | tuple[int, str]] | None = None) -> None:
        """Initialize with responses keyed by URL.

        Args:
            responses: URL to body (status 200) or to (status, body)
        """
        self._responses = dict(responses) if responses is not None else {}
        self._requested: list[str] = []

    @property
    def requested_urls(self) -> list[str]:
        return list(self._requested)

    def get_text(self, url: str) -> str:
        self._requested.append(url)
        response = self._responses.get(url)
        if response is None:
            raise FetchError(url, "Not Found", status_code=404)

        if isinstance(response, tuple):
            status, body = response
        else:
            status, body = 200, response

        if not 200 <= status < 300:
            raise FetchError(url, "HTTP error", status_code=status)
        return body
