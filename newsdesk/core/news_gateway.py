# newsdesk/core/news_gateway.py

import logging
import re
import requests

from newsdesk.config import Settings
from newsdesk.core.errors import UpstreamFailure
from newsdesk.schemas import Envelope


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 80
DEFAULT_QUERY = "world"
DEFAULT_CATEGORY = "general"

SUCCESS_MESSAGE = "Successfully fetched the data"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_page_param(value, default: int) -> int:
    """
    Coerces a pagination query value to a positive int.
    Leading digits are kept ("2abc" and "1.5" read as 2 and 1); missing,
    non-numeric and non-positive values give the default.
    """
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(value) if isinstance(value, str) else None
        if match is None:
            return default
        number = int(match.group(1))
    return number if number > 0 else default


class NewsGateway:
    """
    Thin client for the news provider (NewsAPI.org v2).
    Every public method returns an Envelope; provider and network failures
    are reported inside it and never raised to the caller.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.api_key = settings.news_api_key
        self.base_url = settings.news_api_url.rstrip("/")
        self.timeout = settings.news_api_timeout
        self.session = session or requests.Session()

    def fetch_everything(self, query: str | None = None, page: int = DEFAULT_PAGE,
                         page_size: int = DEFAULT_PAGE_SIZE) -> Envelope:
        params = {
            "q": (query or "").strip() or DEFAULT_QUERY,
            "page": page,
            "pageSize": page_size,
        }
        return self._request("everything", params)

    def fetch_top_headlines(self, category: str | None = None, page: int = DEFAULT_PAGE,
                            page_size: int = DEFAULT_PAGE_SIZE) -> Envelope:
        params = {
            "category": (category or "").strip() or DEFAULT_CATEGORY,
            "language": "en",
            "page": page,
            "pageSize": page_size,
        }
        return self._request("top-headlines", params)

    def fetch_country(self, iso_code: str, page: int = DEFAULT_PAGE,
                      page_size: int = DEFAULT_PAGE_SIZE) -> Envelope:
        country = iso_code.strip().lower()
        params = {
            "country": country,
            "page": page,
            "pageSize": page_size,
        }
        result = self._request("top-headlines", params)

        if result.success and not _articles(result.data):
            logger.info("No top-headlines for %s, falling back to search", country)
            result = self.fetch_everything(country, page, page_size)

        return result

    # -------------------------------
    # Internals
    # -------------------------------

    def _request(self, endpoint: str, params: dict) -> Envelope:
        try:
            return Envelope(
                status=200,
                success=True,
                message=SUCCESS_MESSAGE,
                data=self._get(endpoint, params),
            )
        except UpstreamFailure as e:
            logger.error("API request error on /%s: %s", endpoint, e.detail)
            return Envelope(
                status=e.status_code,
                success=False,
                message=e.message,
                error=e.detail,
            )

    def _get(self, endpoint: str, params: dict):
        headers = {"X-Api-Key": self.api_key} if self.api_key else {}
        try:
            response = self.session.get(
                f"{self.base_url}/{endpoint}",
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamFailure(detail=str(e)) from e

        try:
            body = response.json()
        except ValueError:
            body = response.text

        if not response.ok:
            raise UpstreamFailure(detail=body, status_code=response.status_code)
        if not isinstance(body, dict):
            raise UpstreamFailure(detail="Unexpected response from the news provider")
        return body


def _articles(data) -> list:
    if not isinstance(data, dict):
        return []
    return data.get("articles") or []
