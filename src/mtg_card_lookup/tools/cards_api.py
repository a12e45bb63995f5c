from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlencode, urlsplit

import requests

from ..config import MTG_API_BASE_URL, CARDS_ENDPOINT, USER_AGENT
from ..exceptions import UrlBuildError


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single GET request; any of the fields may be missing"""
    status_code: Optional[int] = None
    body: Optional[bytes] = None
    error: Optional[str] = None


class CardsAPI:
    """Tool for interacting with the magicthegathering.io cards endpoint"""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or MTG_API_BASE_URL).rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': USER_AGENT,
            'Accept': 'application/json'
        })

    def build_url(self, name: str) -> str:
        """
        Build the exact-name search URL for a card

        The name is wrapped in double quotes, which the API treats as an
        exact match instead of a partial one.

        Raises:
            UrlBuildError: If the name cannot be encoded or the result is not an HTTPS URL
        """
        try:
            query = urlencode({'name': f'"{name}"'}, quote_via=quote)
        except UnicodeEncodeError as e:
            raise UrlBuildError(name, str(e)) from e

        url = f"{self.base_url}{CARDS_ENDPOINT}?{query}"
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise UrlBuildError(name, str(e)) from e
        if parts.scheme != "https" or not parts.netloc:
            raise UrlBuildError(name, f"not an absolute https URL: {url}")
        return url

    def fetch(self, url: str) -> FetchResult:
        """
        Issue exactly one GET request, without retries

        HTTP error statuses are not raised; their body is still returned so
        the caller can decide what to do with it.
        """
        try:
            response = self.session.get(url)
        except requests.exceptions.RequestException as e:
            # Some request errors still carry the response that triggered them
            response = e.response
            if response is None:
                return FetchResult(error=str(e))
            return FetchResult(status_code=response.status_code, body=response.content, error=str(e))
        except ValueError as e:
            # Host labels that fail IDNA encoding surface as UnicodeError
            return FetchResult(error=str(e))

        return FetchResult(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self.session.close()
