"""Python SDK for the identity platform Management API."""

from .client import ManagementClient
from .exceptions import (
    ApiError,
    BadRequestError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    ManagementError,
    NotFoundError,
    RateLimitError,
    UnauthorizedError,
)
from .options import (
    ListOption,
    exclude_fields,
    include_fields,
    include_totals,
    page,
    parameter,
    per_page,
    query,
)
from .types import (
    Connection,
    ConnectionList,
    ConnectionOptions,
    ConnectionOptionsEmail,
    ConnectionOptionsTotp,
    ListPage,
    PasswordlessEmail,
)

__all__ = [
    "ManagementClient",
    "ManagementError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "DecodeError",
    "ListOption",
    "parameter",
    "page",
    "per_page",
    "include_totals",
    "include_fields",
    "exclude_fields",
    "query",
    "Connection",
    "ConnectionList",
    "ConnectionOptions",
    "ConnectionOptionsEmail",
    "ConnectionOptionsTotp",
    "ListPage",
    "PasswordlessEmail",
]
