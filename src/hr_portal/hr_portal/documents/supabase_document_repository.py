from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.supabase_base import fetchall, fetchone, returning_row
from .model import GeneratedDocument, TemplateSummary
from .repository import GeneratedDocumentRepository

LIST_COLUMNS = """
    id,
    employee_id,
    company_id,
    template_id,
    file_name,
    file_path,
    document_type,
    created_at,
    document_templates!employee_documents_template_id_fkey (
        id,
        name
    )
"""


def _to_document(row: Dict[str, Any]) -> GeneratedDocument:
    tpl = row.get("document_templates")
    template_id = row.get("template_id")
    return GeneratedDocument(
        id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        company_id=str(row["company_id"]),
        file_path=row["file_path"],
        document_type=row.get("document_type") or "",
        template_id=str(template_id) if template_id is not None else None,
        file_name=row.get("file_name"),
        created_at=row.get("created_at"),
        template=TemplateSummary(id=str(tpl["id"]), name=tpl["name"]) if tpl else None,
    )


class SupabaseDocumentRepository(GeneratedDocumentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: str,
        company_id: str,
        template_id: Optional[str],
        file_name: str,
        file_path: str,
        document_type: str,
    ) -> GeneratedDocument:
        row = returning_row(
            self._conn_factory.table("employee_documents").insert(
                {
                    "employee_id": employee_id,
                    "company_id": company_id,
                    "template_id": template_id,
                    "file_name": file_name,
                    "file_path": file_path,
                    "document_type": document_type,
                }
            ),
            action="record employee document",
        )
        return _to_document(row)

    def list_for_employee(self, employee_id: str) -> Sequence[GeneratedDocument]:
        rows = fetchall(
            self._conn_factory.table("employee_documents")
            .select(LIST_COLUMNS)
            .eq("employee_id", employee_id)
            .order("created_at", desc=True),
            action="list employee documents",
        )
        return [_to_document(r) for r in rows]

    def get_for_employee(self, *, employee_id: str, document_id: str) -> Optional[GeneratedDocument]:
        row = fetchone(
            self._conn_factory.table("employee_documents")
            .select("*")
            .eq("id", document_id)
            .eq("employee_id", employee_id),
            action="fetch employee document",
        )
        return _to_document(row) if row else None
