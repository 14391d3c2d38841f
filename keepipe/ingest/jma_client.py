"""JMA (Japan Meteorological Agency) forecast API client.

The forecast for an office region is published at::

    https://www.jma.go.jp/bosai/forecast/data/forecast/{office}.json

Office codes are listed in https://www.jma.go.jp/bosai/common/const/area.json
(e.g. 016000 is Ishikari, Sorachi and Shiribeshi).
"""

import logging
from typing import Any

import httpx

from keepipe import __version__

logger = logging.getLogger(__name__)

JMA_BASE_URL = "https://www.jma.go.jp/bosai/forecast/data/forecast"
DEFAULT_USER_AGENT = f"keepipe/{__version__}"
DEFAULT_TIMEOUT = 60.0


class FetchError(Exception):
    """Raised when the forecast document can't be fetched or decoded."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class JmaClient:
    def __init__(
        self,
        base_url: str = JMA_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, office_code: str) -> Any:
        """Fetch the forecast document for an office. Single attempt."""
        url = f"{self.base_url}/{office_code}.json"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("JMA request failed: %s -> %s", url, e)
            raise FetchError(f"Request failed: {e}") from e

        if not resp.is_success:
            logger.error("JMA %s returned %d", url, resp.status_code)
            raise FetchError(f"HTTP {resp.status_code}: {url}", resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise FetchError(f"can't get json from response: {e}") from e
