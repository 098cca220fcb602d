"""Outline API client."""

import json
from typing import Any
from urllib.parse import urljoin

import requests
from loguru import logger

from outline_site.config import Settings
from outline_site.errors import UpstreamFetchError

# Seconds before an upstream call is abandoned.
REQUEST_TIMEOUT: float = 30.0


class OutlineApi:
    """Authenticated Outline API client.

    Every endpoint is a POST with a JSON body; the token goes in a bearer header.
    """

    def __init__(self, *, api_host: str, api_key: str, timeout: float = REQUEST_TIMEOUT) -> None:
        self.api_host = api_host
        self.timeout = timeout
        self.sess = requests.Session()
        self.sess.headers.update(
            {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            }
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OutlineApi":
        return cls(api_host=settings.api_host, api_key=settings.api_key)

    def endpoint_url(self, path: str) -> str:
        return urljoin(self.api_host, f"/api/{path}")

    def call(self, path: str, args: dict[str, Any]) -> dict[str, Any]:
        """Invoke an Outline API method, return json.

        Raises:
            UpstreamFetchError: On transport failure, non-2xx status, or a body
                that is not a JSON object.
        """
        url = self.endpoint_url(path)
        logger.debug("Making request: {!r} {}", path, repr(args)[:32])

        try:
            r = self.sess.post(url, json.dumps(args), timeout=self.timeout)
        except requests.RequestException as e:
            msg = f"Request to {path!r} failed: {e}"
            raise UpstreamFetchError(msg, path=path) from e

        if not r.ok:
            msg = f"HTTP error when calling {path!r}! status: {r.status_code}"
            raise UpstreamFetchError(msg, path=path, status=r.status_code)

        try:
            rv = r.json()
        except ValueError as e:
            msg = f"Response from {path!r} is not JSON"
            raise UpstreamFetchError(msg, path=path, status=r.status_code) from e

        if not isinstance(rv, dict):
            msg = f"Response from {path!r} is not a JSON object: {type(rv).__name__}"
            raise UpstreamFetchError(msg, path=path, status=r.status_code)
        return rv
