"""HTTP request probe.

HttpProbe is a zero-argument callable that issues one request per call and
returns True when the server answered with a 2xx status. Transport errors
(connection refused, timeouts) are raised as httpx.HTTPError subclasses and
left for the driver to record.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

logger = logging.getLogger(__name__)


class HttpProbe:
    """Issues a single HTTP request per call.

    Args:
        url: Target URL.
        method: HTTP method. Defaults to GET.
        timeout_s: Per-request timeout in seconds.
        headers: Extra request headers.
        client: Pre-built httpx.Client. When given, the probe does not close it.
    """

    def __init__(
        self,
        url: str,
        method: str = "GET",
        timeout_s: float = 10.0,
        headers: Mapping[str, str] | None = None,
        client: httpx.Client | None = None,
    ):
        if not url:
            raise ValueError("Probe URL must not be empty.")
        self.url = url
        self.method = method.upper()
        self.headers = dict(headers or {})
        self.last_status: int | None = None
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_s)

    def __call__(self) -> bool:
        self.last_status = None
        response = self._client.request(self.method, self.url, headers=self.headers)
        self.last_status = response.status_code
        if not response.is_success:
            logger.debug("%s %s returned %d", self.method, self.url, response.status_code)
            return False
        return True

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpProbe:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpProbe({self.method} {self.url})"
