"""Abstract base class for HTTP fetches."""

from abc import ABC, abstractmethod


class HttpClient(ABC):
    """Abstract interface for fetching documents over HTTP.

    Implementations include:
    - FakeHttpClient: In-memory responses for testing
    - RealHttpClient: httpx-backed for production
    """

    @abstractmethod
    def get_text(self, url: str) -> str:
        """Fetch a URL and return the response body as text.

        Args:
            url: Absolute http:// or https:// URL

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On transport failure or a non-2xx status (status code in message)
        """
        ...
