"""Management SDK exceptions.

Non-2xx responses become an :class:`ApiError` (or the subclass registered for
the status code) built from the Management API error body::

    {"statusCode": 404, "error": "Not Found",
     "message": "The connection does not exist", "errorCode": "inexistent_connection"}
"""

from __future__ import annotations

from typing import Any, Optional

import httpx


class ManagementError(Exception):
    """Base exception for all Management SDK errors."""


class ApiError(ManagementError):
    """The API answered with a non-2xx status.

    ``error`` is the HTTP reason ("Not Found"), ``message`` the human readable
    explanation and ``error_code`` the machine readable code, when the API
    sends one.
    """

    def __init__(
        self,
        status_code: int,
        error: str = "",
        message: str = "",
        error_code: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.error_code = error_code
        text = f"{status_code} {error}: {message}"
        if error_code:
            text += f" ({error_code})"
        super().__init__(text)

    @classmethod
    def from_response(cls, resp: httpx.Response) -> ApiError:
        try:
            body = resp.json()
        except ValueError:
            body = None
        error_cls = _STATUS_ERRORS.get(resp.status_code, ApiError)
        if not isinstance(body, dict):
            return error_cls(resp.status_code, resp.reason_phrase, resp.text)
        return error_cls(
            body.get("statusCode", resp.status_code),
            body.get("error", resp.reason_phrase),
            body.get("message", ""),
            body.get("errorCode"),
        )


class BadRequestError(ApiError):
    """400: the body or query failed server-side validation."""


class UnauthorizedError(ApiError):
    """401: missing, expired or malformed token."""


class ForbiddenError(ApiError):
    """403: the token lacks the required scope."""


class NotFoundError(ApiError):
    """404"""


class ConflictError(ApiError):
    """409: e.g. a connection with the same name already exists."""


class RateLimitError(ApiError):
    """429: the tenant's Management API rate limit was hit."""


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


class DecodeError(ManagementError):
    """A 2xx response body did not fit the expected model.

    ``errors`` holds the pydantic error list; each entry's ``loc`` names the
    offending field, e.g. ``("options", "email")``.
    """

    def __init__(self, model: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        self.model = model
        self.errors = errors or []
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) for e in self.errors)
        super().__init__(f"Could not decode {model}: {fields}" if fields else f"Could not decode {model}")
