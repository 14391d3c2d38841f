"""WiFiDigit HTTP client.

WiFiDigit is an Arduino LED matrix that takes commands as URL paths. A
command ``blink/1000.10`` against ``http://192.168.0.1`` becomes a
request to ``http://192.168.0.1/blink/1000.10``.
"""

import logging

import httpx

from keepipe.config.schema import HttpMethod

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class SendError(Exception):
    """Raised when a command can't be delivered to the device."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DeviceClient:
    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def url_for(self, command: str) -> str:
        return f"{self.base_url}/{command}"

    def send(self, method: str, command: str) -> str:
        """Send one command with GET or PUT and return the response body."""
        try:
            verb = HttpMethod(method.upper())
        except ValueError:
            raise SendError(f"unknown method: {method}") from None

        url = self.url_for(command)
        logger.debug("%s %s", verb, url)
        try:
            resp = httpx.request(verb.value, url, timeout=self.timeout)
        except httpx.RequestError as e:
            raise SendError(f"Request failed: {verb} {url}: {e}") from e

        if not resp.is_success:
            raise SendError(
                f"HTTP {resp.status_code}: {verb} {url} -> {resp.text}",
                resp.status_code,
            )
        return resp.text
