from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ListPage(BaseModel):
    """Pagination fields returned alongside list results when totals are requested."""

    start: Optional[int] = None
    limit: Optional[int] = None
    length: Optional[int] = None
    total: Optional[int] = None
