from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import NotFoundError
from .model import DocumentTemplate
from .template_repository import TemplateRepository


class TemplateResolver:
    """Look up templates a company may use.

    Every call goes to the repository so the latest authored body is rendered.
    """

    def __init__(self, templates: TemplateRepository):
        self._templates = templates

    def resolve(self, template_id: str, *, company_id: Optional[str]) -> DocumentTemplate:
        template = self._templates.get_by_id(template_id)
        if not template or not template.visible_to(company_id):
            raise NotFoundError("Template not found.")
        return template

    def list_visible(self, company_id: Optional[str] = None) -> Sequence[DocumentTemplate]:
        return self._templates.list_visible(company_id=company_id or None)
