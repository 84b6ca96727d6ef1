import pytest

from src.hr_portal.hr_portal.core.exceptions import StorageError
from src.hr_portal.hr_portal.documents.model import DocumentTemplate
from src.hr_portal.hr_portal.documents.store import DocumentStore, sanitize_name


def test_sanitize_name_collapses_whitespace_runs():
    assert sanitize_name("Asha  Rao") == "Asha_Rao"
    assert sanitize_name("Ana\tMaria  de Souza") == "Ana_Maria_de_Souza"


def test_object_path_layout(storage, documents_repo, asha, offer_template):
    store = DocumentStore(storage, documents_repo, bucket="employee-documents", clock=lambda: 1700000000000)
    obj = store.build_object(employee=asha, template=offer_template)

    assert obj.file_path == "c-1/e-1/Asha_Rao_offer-letter_1700000000000.pdf"
    assert obj.file_name == "Asha_Rao_offer-letter.pdf"


def test_template_id_is_used_when_slug_is_missing(storage, documents_repo, asha):
    template = DocumentTemplate(id="t-9", name="NDA", document_type="nda", body_html="")
    store = DocumentStore(storage, documents_repo, bucket="employee-documents", clock=lambda: 5)
    assert store.build_object(employee=asha, template=template).file_path == "c-1/e-1/Asha_Rao_t-9_5.pdf"


def test_put_uploads_pdf_without_overwrite(document_store, storage, asha, offer_template):
    document_store.put(b"%PDF", employee=asha, template=offer_template)

    assert len(storage.uploads) == 1
    upload = storage.uploads[0]
    assert upload["bucket"] == "employee-documents"
    assert upload["upsert"] is False
    assert upload["content_type"] == "application/pdf"


def test_record_copies_document_type_from_template(document_store, documents_repo, asha, offer_template):
    obj = document_store.put(b"%PDF", employee=asha, template=offer_template)
    doc = document_store.record(obj, employee=asha, template=offer_template)

    assert doc.document_type == "offer_letter"
    assert doc.template_id == "t-offer"
    assert doc.company_id == "c-1"
    assert doc.file_path == obj.file_path
    assert documents_repo.rows == [doc]


def test_record_failure_becomes_storage_error(document_store, documents_repo, storage, asha, offer_template):
    obj = document_store.put(b"%PDF", employee=asha, template=offer_template)
    documents_repo.fail_on_create = True

    with pytest.raises(StorageError):
        document_store.record(obj, employee=asha, template=offer_template)
    assert ("employee-documents", obj.file_path) in storage.objects


def test_signed_url_uses_documents_bucket(document_store):
    url = document_store.signed_url("c-1/e-1/x.pdf", expires_in=600)
    assert url == "https://cdn.test/sign/employee-documents/c-1/e-1/x.pdf?ttl=600"
