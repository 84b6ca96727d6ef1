from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.supabase_base import fetchall, fetchone, returning_row
from .model import DocumentTemplate
from .template_repository import TemplateRepository


def _to_template(row: Dict[str, Any]) -> DocumentTemplate:
    company_id = row.get("company_id")
    return DocumentTemplate(
        id=str(row["id"]),
        name=row.get("name") or "",
        document_type=row.get("document_type") or "",
        body_html=row.get("body_html") or "",
        company_id=str(company_id) if company_id is not None else None,
        slug=row.get("slug"),
    )


class SupabaseTemplateRepository(TemplateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, template_id: str) -> Optional[DocumentTemplate]:
        row = fetchone(
            self._conn_factory.table("document_templates").select("*").eq("id", template_id),
            action="fetch template",
        )
        return _to_template(row) if row else None

    def list_visible(self, *, company_id: Optional[str] = None) -> Sequence[DocumentTemplate]:
        query = self._conn_factory.table("document_templates").select("*")
        if company_id:
            query = query.or_(f"company_id.eq.{company_id},company_id.is.null")
        rows = fetchall(query.order("name", desc=False), action="list templates")
        return [_to_template(r) for r in rows]

    def create(
        self,
        *,
        name: str,
        document_type: str,
        body_html: str,
        company_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> DocumentTemplate:
        row = returning_row(
            self._conn_factory.table("document_templates").insert(
                {
                    "name": name,
                    "document_type": document_type,
                    "body_html": body_html,
                    "company_id": company_id,
                    "slug": slug,
                }
            ),
            action="create template",
        )
        return _to_template(row)
