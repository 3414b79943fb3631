"""Connections service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError, NotFoundError
from ..options import ListOption, parameter
from ..types.connections import Connection, ConnectionList

if TYPE_CHECKING:
    from .._http import HttpClient

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _decode(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DecodeError(model.__name__, e.errors(include_url=False)) from e


def _encode(connection: Connection) -> dict[str, Any]:
    return connection.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _populate(target: Connection, data: Any) -> Connection:
    """Copy the fields present in a response body onto ``target``."""
    if data is None:
        return target
    decoded = _decode(Connection, data)
    for name in decoded.model_fields_set:
        setattr(target, name, getattr(decoded, name))
    return target


class ConnectionsService:
    """Manage connections: the identity providers users can log in with."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def create(self, connection: Connection) -> Connection:
        """Create a new connection.

        The server-assigned ``id`` and any other fields in the response are
        written back onto ``connection``, which is also returned.
        """
        created = _populate(connection, self._http.post(self._http.uri("connections"), json=_encode(connection)))
        log.debug("created connection %s", created.id)
        return created

    def read(self, connection_id: str) -> Connection:
        """Get a connection by id."""
        return _decode(Connection, self._http.get(self._http.uri("connections", connection_id)))

    def list(self, *opts: ListOption) -> ConnectionList:
        """List connections.

        The client's default list options are applied first, then ``opts``.
        """
        data = self._http.get(self._http.uri("connections"), params=self._http.list_params(opts))
        if isinstance(data, list):
            # include_totals=false returns a bare array
            return ConnectionList(connections=[_decode(Connection, c) for c in data])
        return _decode(ConnectionList, data)

    def update(self, connection_id: str, connection: Connection) -> Connection:
        """Update a connection.

        If ``options`` is set, the server replaces the whole options object
        with it, so it must carry every option that should be kept. Nothing
        is merged client side.
        """
        return _populate(
            connection,
            self._http.patch(self._http.uri("connections", connection_id), json=_encode(connection)),
        )

    def delete(self, connection_id: str) -> None:
        """Delete a connection and all of its users."""
        self._http.delete(self._http.uri("connections", connection_id))

    def read_by_name(self, name: str) -> Connection:
        """Get a connection by name, for when the id is not at hand."""
        page = self.list(parameter("name", name))
        if page.connections:
            return page.connections[0]
        raise NotFoundError(404, "Not Found", "Connection not found")
