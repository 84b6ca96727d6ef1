from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .companies.service import CompanyService
from .companies.supabase_company_repository import SupabaseCompanyRepository
from .core.constants import DEFAULT_BUCKETS, MAX_AVATAR_BYTES, SIGNED_URL_TTL_SECONDS
from .database.connection import DatabaseConnection, SupabaseConfig
from .documents.pdf.base import PdfRenderer
from .documents.pdf.chromium_renderer import ChromiumPdfRenderer
from .documents.resolver import TemplateResolver
from .documents.service import DocumentService
from .documents.store import DocumentStore
from .documents.supabase_document_repository import SupabaseDocumentRepository
from .documents.supabase_template_repository import SupabaseTemplateRepository
from .employees.service import EmployeeService
from .employees.supabase_employee_repository import SupabaseEmployeeRepository
from .storage.supabase_storage import SupabaseObjectStorage


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    companies_repo: SupabaseCompanyRepository
    employees_repo: SupabaseEmployeeRepository
    templates_repo: SupabaseTemplateRepository
    documents_repo: SupabaseDocumentRepository
    storage: SupabaseObjectStorage

    company_service: CompanyService
    employee_service: EmployeeService
    document_service: DocumentService

    supabase_configured: bool = False


def build_container(
    *,
    supabase_config: Mapping[str, str],
    buckets: Optional[Mapping[str, str]] = None,
    signed_url_ttl: int = SIGNED_URL_TTL_SECONDS,
    max_avatar_bytes: int = MAX_AVATAR_BYTES,
    pdf_renderer: Optional[PdfRenderer] = None,
) -> Container:
    config = SupabaseConfig(
        url=str(supabase_config.get("url") or ""),
        key=str(supabase_config.get("key") or ""),
    )
    bucket_names = {**DEFAULT_BUCKETS, **dict(buckets or {})}
    conn = DatabaseConnection.get_instance(config)

    companies_repo = SupabaseCompanyRepository(conn)
    employees_repo = SupabaseEmployeeRepository(conn)
    templates_repo = SupabaseTemplateRepository(conn)
    documents_repo = SupabaseDocumentRepository(conn)
    storage = SupabaseObjectStorage(conn)

    company_service = CompanyService(companies_repo, storage, logos_bucket=bucket_names["logos"])
    employee_service = EmployeeService(
        employees_repo,
        companies_repo,
        storage,
        avatars_bucket=bucket_names["avatars"],
        max_avatar_bytes=max_avatar_bytes,
    )
    document_service = DocumentService(
        employees_repo,
        companies_repo,
        TemplateResolver(templates_repo),
        pdf_renderer or ChromiumPdfRenderer(),
        DocumentStore(storage, documents_repo, bucket=bucket_names["documents"]),
        documents_repo,
        signed_url_ttl=signed_url_ttl,
    )

    return Container(
        conn=conn,
        companies_repo=companies_repo,
        employees_repo=employees_repo,
        templates_repo=templates_repo,
        documents_repo=documents_repo,
        storage=storage,
        company_service=company_service,
        employee_service=employee_service,
        document_service=document_service,
        supabase_configured=config.configured,
    )
