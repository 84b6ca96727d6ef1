from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import GeneratedDocument


class GeneratedDocumentRepository(Protocol):
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
        """Insert one row and return it as stored."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[GeneratedDocument]:
        """Newest first, with the template summary when the template still exists."""

        raise NotImplementedError

    def get_for_employee(self, *, employee_id: str, document_id: str) -> Optional[GeneratedDocument]:
        raise NotImplementedError
