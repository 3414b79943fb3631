from __future__ import annotations

from .connections import ConnectionsService

__all__ = ["ConnectionsService"]
