from __future__ import annotations

import itertools
from typing import Optional

import pytest

from src.hr_portal.hr_portal.companies.model import Company
from src.hr_portal.hr_portal.companies.service import CompanyService
from src.hr_portal.hr_portal.container import Container
from src.hr_portal.hr_portal.core.exceptions import DataAccessError, RenderError, StorageError
from src.hr_portal.hr_portal.documents.model import DocumentTemplate, GeneratedDocument, TemplateSummary
from src.hr_portal.hr_portal.documents.pdf.base import PdfRenderer
from src.hr_portal.hr_portal.documents.resolver import TemplateResolver
from src.hr_portal.hr_portal.documents.service import DocumentService
from src.hr_portal.hr_portal.documents.store import DocumentStore
from src.hr_portal.hr_portal.employees.model import Employee
from src.hr_portal.hr_portal.employees.service import EmployeeService

FAKE_PDF = b"%PDF-1.4\n% fake\n"


class InMemoryCompanies:
    def __init__(self, *companies: Company):
        self.by_id = {c.id: c for c in companies}
        self._ids = itertools.count(100)

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, company_id):
        return self.by_id.get(company_id)

    def create(self, *, name, code, logo_url):
        company = Company(id=f"c-{next(self._ids)}", name=name, code=code, logo_url=logo_url)
        self.by_id[company.id] = company
        return company

    def set_logo_url(self, company_id, *, logo_url):
        current = self.by_id.get(company_id)
        if not current:
            return None
        updated = Company(id=current.id, name=current.name, code=current.code, logo_url=logo_url)
        self.by_id[company_id] = updated
        return updated


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self.by_id = {e.id: e for e in employees}
        self.created = []
        self.updates = []
        self.last_list_args = None
        self._ids = itertools.count(100)

    def get_by_id(self, employee_id):
        return self.by_id.get(employee_id)

    def list_for_company(self, company_id, *, offset, limit, search=""):
        self.last_list_args = {"company_id": company_id, "offset": offset, "limit": limit, "search": search}
        rows = [e for e in self.by_id.values() if e.company_id == company_id]
        if search:
            rows = [e for e in rows if search.lower() in e.name.lower()]
        return rows[offset:offset + limit], len(rows)

    def create(self, columns):
        self.created.append(dict(columns))
        employee = Employee(
            id=f"e-{next(self._ids)}",
            company_id=columns["company_id"],
            name=columns["name"],
            mobile=columns.get("mobile"),
            email=columns.get("email"),
            date_of_joining=columns.get("date_of_joining"),
            job_title=columns.get("job_title"),
            annual_ctc=columns.get("annual_ctc"),
            status=columns.get("status"),
        )
        self.by_id[employee.id] = employee
        return employee

    def update(self, employee_id, columns):
        self.updates.append((employee_id, dict(columns)))
        current = self.by_id.get(employee_id)
        if not current:
            return None
        fields = {k: v for k, v in columns.items() if k in Employee.__dataclass_fields__}
        updated = Employee(**{**current.__dict__, **fields})
        self.by_id[employee_id] = updated
        return updated


class InMemoryTemplates:
    def __init__(self, *templates: DocumentTemplate):
        self.by_id = {t.id: t for t in templates}
        self.get_calls = 0

    def get_by_id(self, template_id):
        self.get_calls += 1
        return self.by_id.get(template_id)

    def list_visible(self, *, company_id=None):
        rows = [t for t in self.by_id.values() if company_id is None or t.visible_to(company_id)]
        return sorted(rows, key=lambda t: t.name)

    def create(self, *, name, document_type, body_html, company_id=None, slug=None):
        template = DocumentTemplate(
            id=f"t-{len(self.by_id) + 1}",
            name=name,
            document_type=document_type,
            body_html=body_html,
            company_id=company_id,
            slug=slug,
        )
        self.by_id[template.id] = template
        return template


class InMemoryDocuments:
    def __init__(self, templates: Optional[InMemoryTemplates] = None):
        self.rows: list[GeneratedDocument] = []
        self.fail_on_create = False
        self._templates = templates
        self._ids = itertools.count(1)

    def create(self, *, employee_id, company_id, template_id, file_name, file_path, document_type):
        if self.fail_on_create:
            raise DataAccessError("record employee document failed")
        doc = GeneratedDocument(
            id=f"d-{next(self._ids)}",
            employee_id=employee_id,
            company_id=company_id,
            template_id=template_id,
            file_name=file_name,
            file_path=file_path,
            document_type=document_type,
            created_at="2026-01-01T00:00:00+00:00",
        )
        self.rows.append(doc)
        return doc

    def list_for_employee(self, employee_id):
        out = []
        for d in reversed(self.rows):
            if d.employee_id != employee_id:
                continue
            tpl = self._templates.by_id.get(d.template_id) if self._templates else None
            summary = TemplateSummary(id=tpl.id, name=tpl.name) if tpl else None
            out.append(GeneratedDocument(**{**d.__dict__, "template": summary}))
        return out

    def get_for_employee(self, *, employee_id, document_id):
        for d in self.rows:
            if d.id == document_id and d.employee_id == employee_id:
                return d
        return None


class FakeStorage:
    def __init__(self):
        self.objects: dict[tuple[str, str], bytes] = {}
        self.uploads = []
        self.fail_uploads = False

    def upload(self, *, bucket, path, data, content_type, upsert, cache_control=None):
        self.uploads.append(
            {"bucket": bucket, "path": path, "content_type": content_type, "upsert": upsert, "cache_control": cache_control}
        )
        if self.fail_uploads:
            raise StorageError("Failed to upload file")
        if not upsert and (bucket, path) in self.objects:
            raise StorageError("Failed to upload file")
        self.objects[(bucket, path)] = data

    def public_url(self, *, bucket, path):
        return f"https://cdn.test/{bucket}/{path}"

    def signed_url(self, *, bucket, path, expires_in):
        return f"https://cdn.test/sign/{bucket}/{path}?ttl={expires_in}"


class FakeRenderer(PdfRenderer):
    def __init__(self):
        self.calls: list[str] = []
        self.fail = False

    def render(self, html):
        self.calls.append(html)
        if self.fail:
            raise RenderError("Failed to render PDF")
        return FAKE_PDF


@pytest.fixture
def acme():
    return Company(id="c-1", name="Acme")


@pytest.fixture
def asha(acme):
    return Employee(
        id="e-1",
        company_id=acme.id,
        name="Asha  Rao",
        mobile="9000000000",
        email="asha@acme.test",
        date_of_joining="2024-04-01",
        job_title="Engineer",
        annual_ctc=1200000,
    )


@pytest.fixture
def offer_template():
    return DocumentTemplate(
        id="t-offer",
        name="Offer Letter",
        slug="offer-letter",
        document_type="offer_letter",
        body_html="<p>Dear {{employee_name}}, welcome to {{company_name}}.</p>",
    )


@pytest.fixture
def companies_repo(acme):
    return InMemoryCompanies(acme, Company(id="c-2", name="Globex"))


@pytest.fixture
def employees_repo(asha):
    return InMemoryEmployees(asha)


@pytest.fixture
def templates_repo(offer_template):
    return InMemoryTemplates(
        offer_template,
        DocumentTemplate(
            id="t-globex",
            name="Globex Contract",
            document_type="contract",
            body_html="<p>{{employee_name}}</p>",
            company_id="c-2",
        ),
    )


@pytest.fixture
def documents_repo(templates_repo):
    return InMemoryDocuments(templates_repo)


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def clock():
    ticks = itertools.count(1700000000000)
    return lambda: next(ticks)


@pytest.fixture
def document_store(storage, documents_repo, clock):
    return DocumentStore(storage, documents_repo, bucket="employee-documents", clock=clock)


@pytest.fixture
def document_service(employees_repo, companies_repo, templates_repo, renderer, document_store, documents_repo):
    return DocumentService(
        employees_repo,
        companies_repo,
        TemplateResolver(templates_repo),
        renderer,
        document_store,
        documents_repo,
        signed_url_ttl=600,
    )


@pytest.fixture
def company_service(companies_repo, storage):
    return CompanyService(companies_repo, storage, logos_bucket="company-logos")


@pytest.fixture
def employee_service(employees_repo, companies_repo, storage):
    return EmployeeService(employees_repo, companies_repo, storage, avatars_bucket="avatars", max_avatar_bytes=1024)


@pytest.fixture
def container(
    companies_repo,
    employees_repo,
    templates_repo,
    documents_repo,
    storage,
    company_service,
    employee_service,
    document_service,
):
    return Container(
        conn=None,
        companies_repo=companies_repo,
        employees_repo=employees_repo,
        templates_repo=templates_repo,
        documents_repo=documents_repo,
        storage=storage,
        company_service=company_service,
        employee_service=employee_service,
        document_service=document_service,
        supabase_configured=True,
    )


@pytest.fixture
def client(container, monkeypatch):
    from src.hr_portal.hr_portal.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
