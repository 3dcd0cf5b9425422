"""
Minimal SwitchBot API client
"""

import logging
from typing import Dict, Optional

import httpx

from .auth import build_headers
from .config import DEFAULT_BASE_URL, Credentials
from .errors import APIError, ReadError, RequestError

logger = logging.getLogger(__name__)


def call_api(client: httpx.Client, url: str, headers: Dict[str, str]) -> bytes:
    """
    Perform a single GET request and return the raw response body

    Args:
        client: HTTP client used to send the request
        url: Absolute request URL
        headers: Headers to attach to the request

    Returns:
        Response body bytes

    Raises:
        RequestError: If the request cannot be built or sent
        APIError: If the status code is not 200 (body is discarded)
        ReadError: If the body cannot be fully read
    """
    logger.debug(f"GET {url}")
    try:
        with client.stream("GET", url, headers=headers) as response:
            logger.debug(f"{url} -> {response.status_code}")
            if response.status_code != 200:
                raise APIError(response.status_code)

            try:
                return response.read()
            except (httpx.HTTPError, httpx.StreamError) as e:
                raise ReadError(f"error reading response body: {e}") from e

    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise RequestError(f"error executing HTTP request: {e}") from e


class SwitchBotClient:
    """SwitchBot API client signing every request with token and secret"""

    def __init__(self, credentials: Credentials,
                 base_url: str = DEFAULT_BASE_URL,
                 http_client: Optional[httpx.Client] = None):
        """
        Initialize SwitchBot client

        Args:
            credentials: API token and secret
            base_url: API base URL without trailing slash
            http_client: Optional preconfigured httpx client
        """
        self.credentials = credentials
        self.base_url = base_url
        self.client = http_client or httpx.Client()

    def _get_headers(self) -> Dict[str, str]:
        """Fresh signed headers; nonce and timestamp differ per call."""
        return build_headers(self.credentials.token, self.credentials.secret)

    def device_status_url(self, device_id: str) -> str:
        return f"{self.base_url}/devices/{device_id}/status"

    def get_devices(self) -> bytes:
        """
        Get the raw device list

        Returns:
            Raw JSON body of GET /devices

        Raises:
            SwitchBotError: If the request fails
        """
        return call_api(self.client, f"{self.base_url}/devices", self._get_headers())

    def get_device_status(self, device_id: str) -> bytes:
        """
        Get the raw status of a specific device

        Args:
            device_id: SwitchBot device ID

        Returns:
            Raw JSON body of GET /devices/{device_id}/status

        Raises:
            SwitchBotError: If the request fails
        """
        return call_api(self.client, self.device_status_url(device_id), self._get_headers())

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "SwitchBotClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
