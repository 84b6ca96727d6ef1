from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Company:
    """Domain entity: Company (tenant).

    Note: Plain data object; no database access here.
    """

    id: str
    name: str
    code: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[str] = None
