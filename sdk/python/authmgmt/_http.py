"""Internal HTTP transport for the Management SDK."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote

import httpx

from .exceptions import ApiError, ManagementError
from .options import ListOption, apply

log = logging.getLogger(__name__)


class HttpClient:
    """Low-level HTTP client wrapping httpx.

    ``token`` is read on every request, so assigning a fresh one takes effect
    immediately.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        *,
        default_list_options: Optional[Sequence[ListOption]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token: Optional[str] = token
        self._default_list_options: tuple[ListOption, ...] = tuple(default_list_options or ())
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @staticmethod
    def uri(*path: str) -> str:
        """Join path segments, escaping each one."""
        return "/" + "/".join(quote(p, safe="") for p in path)

    def list_params(self, options: Sequence[ListOption]) -> dict[str, Any]:
        """Apply the client defaults, then the caller's options."""
        return apply((*self._default_list_options, *options))

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            resp = self._client.request(method, self.base_url + path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise ManagementError(f"{method} {path} failed: {e}") from e

        log.debug("%s %s -> %d", method, path, resp.status_code)
        if not resp.is_success:
            error = ApiError.from_response(resp)
            log.debug("API error: %s", error)
            raise error
        # 204 from DELETE
        if not resp.content:
            return None
        return resp.json()

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, json: Optional[dict[str, Any]] = None) -> Any:
        return self._request("POST", path, json=json)

    def patch(self, path: str, json: Optional[dict[str, Any]] = None) -> Any:
        return self._request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()
