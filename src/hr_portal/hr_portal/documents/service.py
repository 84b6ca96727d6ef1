from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple, Union

from ..common.validators import require_non_empty
from ..companies.repository import CompanyRepository
from ..core.constants import SIGNED_URL_TTL_SECONDS
from ..core.enums import GenerationStage
from ..core.exceptions import DomainError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import DocumentTemplate, GeneratedDocument, RenderContext
from .pdf.base import PdfRenderer
from .placeholders import render_placeholders
from .repository import GeneratedDocumentRepository
from .resolver import TemplateResolver
from .store import DocumentStore

logger = logging.getLogger(__name__)


class DocumentService:
    """Use cases: generate, preview, list and download employee documents.

    Generation runs resolve -> render -> pdf -> upload -> record; any failure
    aborts the request and the raised error carries the last stage reached.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        companies: CompanyRepository,
        resolver: TemplateResolver,
        renderer: PdfRenderer,
        store: DocumentStore,
        documents: GeneratedDocumentRepository,
        *,
        signed_url_ttl: int = SIGNED_URL_TTL_SECONDS,
    ):
        self._employees = employees
        self._companies = companies
        self._resolver = resolver
        self._renderer = renderer
        self._store = store
        self._documents = documents
        self._signed_url_ttl = int(signed_url_ttl)

    @staticmethod
    def _advance(stage: GenerationStage, employee_id: str) -> GenerationStage:
        logger.debug("document for employee %s: %s", employee_id, stage.value)
        return stage

    def _resolve(self, employee_id: str, template_id: str) -> Tuple[RenderContext, DocumentTemplate]:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found.")

        company = self._companies.get_by_id(employee.company_id)
        if not company:
            raise NotFoundError("Company not found.")

        template = self._resolver.resolve(template_id, company_id=company.id)
        return RenderContext(employee=employee, company=company), template

    def _run(self, employee_id: str, template_id: Optional[str], *, persist: bool) -> Union[bytes, GeneratedDocument]:
        template_id = require_non_empty(template_id, "templateId")

        stage = self._advance(GenerationStage.REQUESTED, employee_id)
        try:
            ctx, template = self._resolve(employee_id, template_id)
            stage = self._advance(GenerationStage.TEMPLATE_RESOLVED, employee_id)

            html = render_placeholders(template.body_html, ctx)
            stage = self._advance(GenerationStage.RENDERED, employee_id)

            pdf = self._renderer.render(html)
            stage = self._advance(GenerationStage.PDF_PRODUCED, employee_id)
            if not persist:
                return pdf

            stored = self._store.put(pdf, employee=ctx.employee, template=template)
            stage = self._advance(GenerationStage.STORED, employee_id)

            document = self._store.record(stored, employee=ctx.employee, template=template)
            self._advance(GenerationStage.RECORDED, employee_id)
        except DomainError as e:
            if e.stage is None:
                e.stage = stage.value
            logger.error(
                "Document %s for employee %s failed after %s: %s",
                "generation" if persist else "preview",
                employee_id,
                e.stage,
                e,
            )
            raise

        logger.info("Generated %s for employee %s at %s", document.document_type, employee_id, document.file_path)
        return document

    def generate(self, employee_id: str, template_id: Optional[str]) -> GeneratedDocument:
        return self._run(employee_id, template_id, persist=True)

    def preview(self, employee_id: str, template_id: Optional[str]) -> bytes:
        """Render without uploading or recording anything."""
        return self._run(employee_id, template_id, persist=False)

    def list_for_employee(self, employee_id: str) -> Sequence[GeneratedDocument]:
        return self._documents.list_for_employee(employee_id)

    def download_url(self, employee_id: str, document_id: str) -> str:
        document = self._documents.get_for_employee(employee_id=employee_id, document_id=document_id)
        if not document:
            raise NotFoundError("Document not found.")
        return self._store.signed_url(document.file_path, expires_in=self._signed_url_ttl)

    def list_templates(self, company_id: Optional[str] = None) -> Sequence[DocumentTemplate]:
        return self._resolver.list_visible(company_id)
