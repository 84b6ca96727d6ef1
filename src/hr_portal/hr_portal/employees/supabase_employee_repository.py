from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.supabase_base import fetch_counted, fetchall, fetchone, returning_row
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        id=str(row["id"]),
        company_id=str(row["company_id"]),
        name=row.get("name") or "",
        mobile=row.get("mobile"),
        email=row.get("email"),
        date_of_joining=row.get("date_of_joining"),
        job_title=row.get("job_title"),
        department=row.get("department"),
        gender=row.get("gender"),
        status=row.get("status"),
        annual_ctc=row.get("annual_ctc"),
        avatar_url=row.get("avatar_url"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class SupabaseEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        row = fetchone(
            self._conn_factory.table("employees").select("*").eq("id", employee_id),
            action="fetch employee",
        )
        return _to_employee(row) if row else None

    def list_for_company(
        self,
        company_id: str,
        *,
        offset: int,
        limit: int,
        search: str = "",
    ) -> Tuple[Sequence[Employee], int]:
        query = self._conn_factory.table("employees").select("*", count="exact").eq("company_id", company_id)
        if search:
            query = query.ilike("name", f"%{search}%")
        query = query.order("created_at", desc=True).range(offset, offset + limit - 1)

        rows, total = fetch_counted(query, action="list employees")
        return [_to_employee(r) for r in rows], total

    def create(self, columns: Mapping[str, Any]) -> Employee:
        row = returning_row(
            self._conn_factory.table("employees").insert(dict(columns)),
            action="create employee",
        )
        return _to_employee(row)

    def update(self, employee_id: str, columns: Mapping[str, Any]) -> Optional[Employee]:
        rows = fetchall(
            self._conn_factory.table("employees").update(dict(columns)).eq("id", employee_id),
            action="update employee",
        )
        return _to_employee(rows[0]) if rows else None
