"""HTTP request executor for the Kitsu JSON:API."""

from __future__ import annotations

import httpx

from libsync.config import settings
from libsync.pagination.errors import TransportError
from libsync.pagination.requests import PageRequest

_JSON_API = "application/vnd.api+json"

_DEFAULT_HEADERS = {
    "Accept": _JSON_API,
    "Content-Type": _JSON_API,
    "User-Agent": "libsync/0.1 (+https://kitsu.io)",
}


class HttpxExecutor:
    """Execute :class:`PageRequest` descriptors with ``httpx``.

    Relative request URLs are joined onto *base_url*; absolute URLs (the
    pagination links returned by the server) are requested as they are.

    Args:
        base_url: API root.  Defaults to ``settings.kitsu_base_url``.
        access_token: OAuth2 bearer token.  Defaults to
            ``settings.kitsu_access_token``; empty means anonymous.
        timeout: Seconds per request.  Defaults to
            ``settings.request_timeout``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        access_token: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.kitsu_base_url).rstrip("/")
        self.access_token = (
            access_token if access_token is not None else settings.kitsu_access_token
        )
        self.timeout = timeout if timeout is not None else settings.request_timeout

    @property
    def headers(self) -> dict[str, str]:
        headers = dict(_DEFAULT_HEADERS)
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def url_for(self, request: PageRequest) -> str:
        """Return the absolute URL *request* targets."""
        if request.is_absolute:
            return request.url
        return f"{self.base_url}/{request.url.lstrip('/')}"

    def execute(self, request: PageRequest) -> bytes | None:
        """Send *request* and return the response body (``None`` if empty).

        Raises:
            TransportError: On connection failures and 4xx/5xx responses.
                The ``httpx`` exception is chained as ``__cause__``.
        """
        url = self.url_for(request)
        try:
            with httpx.Client(
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = client.request(
                    request.method,
                    url,
                    params=list(request.params) or None,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"HTTP {exc.response.status_code} from {url}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        return response.content or None
