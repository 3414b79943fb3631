"""Management SDK client."""

from __future__ import annotations

from typing import Optional, Sequence

import httpx

from ._http import HttpClient
from .options import ListOption, include_totals, per_page
from .services import ConnectionsService

DEFAULT_LIST_OPTIONS: tuple[ListOption, ...] = (per_page(50), include_totals(True))


class ManagementClient:
    """Main client for the Management API.

    Usage:
        client = ManagementClient("example.eu.auth0.com", token)
        conn = client.connections.read_by_name("Username-Password-Authentication")
        conn.options.brute_force_protection = True
        client.connections.update(conn.id, Connection(options=conn.options))

    ``default_list_options`` are applied to every list call before the
    caller's own options; pass an empty sequence to send none.
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        token: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        default_list_options: Optional[Sequence[ListOption]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if base_url is None:
            if not domain:
                raise ValueError("Must provide a domain or base_url")
            base_url = f"https://{domain}/api/v2"
        if default_list_options is None:
            default_list_options = DEFAULT_LIST_OPTIONS
        self._http = HttpClient(
            base_url,
            token,
            default_list_options=default_list_options,
            timeout=timeout,
            transport=transport,
        )
        self.connections = ConnectionsService(self._http)

    @property
    def token(self) -> Optional[str]:
        """Bearer token sent with every request; assign None to send none."""
        return self._http.token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self._http.token = value

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> ManagementClient:
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ManagementClient(base_url={self.base_url!r})"
