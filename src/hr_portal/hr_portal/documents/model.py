from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..companies.model import Company
from ..employees.model import Employee


@dataclass(frozen=True)
class DocumentTemplate:
    """HTML template with placeholder tokens.

    ``company_id`` of None means the template is shared by every company.
    """

    id: str
    name: str
    document_type: str
    body_html: str
    company_id: Optional[str] = None
    slug: Optional[str] = None

    def visible_to(self, company_id: Optional[str]) -> bool:
        return self.company_id is None or self.company_id == company_id


@dataclass(frozen=True)
class TemplateSummary:
    id: str
    name: str


@dataclass(frozen=True)
class GeneratedDocument:
    """Stored PDF plus its metadata row.

    ``document_type`` is the template's type at generation time and is never
    re-derived from the template afterwards.
    """

    id: str
    employee_id: str
    company_id: str
    file_path: str
    document_type: str
    template_id: Optional[str] = None
    file_name: Optional[str] = None
    created_at: Optional[str] = None
    template: Optional[TemplateSummary] = None


@dataclass(frozen=True)
class RenderContext:
    employee: Employee
    company: Company
