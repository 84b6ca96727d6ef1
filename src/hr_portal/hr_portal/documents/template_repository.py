from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DocumentTemplate


class TemplateRepository(Protocol):
    def get_by_id(self, template_id: str) -> Optional[DocumentTemplate]:
        raise NotImplementedError

    def list_visible(self, *, company_id: Optional[str] = None) -> Sequence[DocumentTemplate]:
        """Company-owned plus global templates ordered by name; all when company_id is None."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        document_type: str,
        body_html: str,
        company_id: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> DocumentTemplate:
        raise NotImplementedError
