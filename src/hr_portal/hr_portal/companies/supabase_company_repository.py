from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.supabase_base import fetchall, fetchone, returning_row
from .model import Company
from .repository import CompanyRepository


def _to_company(row: Dict[str, Any]) -> Company:
    return Company(
        id=str(row["id"]),
        name=row["name"],
        code=row.get("code"),
        logo_url=row.get("logo_url"),
        created_at=row.get("created_at"),
    )


class SupabaseCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Company]:
        rows = fetchall(
            self._conn_factory.table("companies").select("*").order("created_at", desc=False),
            action="list companies",
        )
        return [_to_company(r) for r in rows]

    def get_by_id(self, company_id: str) -> Optional[Company]:
        row = fetchone(
            self._conn_factory.table("companies").select("*").eq("id", company_id),
            action="fetch company",
        )
        return _to_company(row) if row else None

    def create(self, *, name: str, code: Optional[str], logo_url: Optional[str]) -> Company:
        row = returning_row(
            self._conn_factory.table("companies").insert({"name": name, "code": code, "logo_url": logo_url}),
            action="create company",
        )
        return _to_company(row)

    def set_logo_url(self, company_id: str, *, logo_url: str) -> Optional[Company]:
        rows = fetchall(
            self._conn_factory.table("companies").update({"logo_url": logo_url}).eq("id", company_id),
            action="update company logo",
        )
        return _to_company(rows[0]) if rows else None
