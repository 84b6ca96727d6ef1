import io


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "supabaseConfigured": True}


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Not Found"}


def test_get_company_not_found_body(client):
    resp = client.get("/companies/missing")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Company not found", "kind": "not_found"}


def test_create_company_validation(client):
    resp = client.post("/companies", json={"code": "X"})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "validation_failure"


def test_list_employees_pagination_envelope(client):
    resp = client.get("/companies/c-1/employees?page=1&pageSize=500&search=asha")
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["pagination"] == {"page": 1, "pageSize": 100, "total": 1}
    assert body["data"][0]["id"] == "e-1"


def test_create_employee_returns_201(client):
    resp = client.post(
        "/companies/c-1/employees",
        json={"name": "Ravi", "mobile": "9", "email": "r@acme.test", "dateOfJoining": "2025-01-15"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["status"] == "active"


def test_patch_employee(client):
    resp = client.patch("/employees/e-1", json={"department": "R&D"})
    assert resp.status_code == 200
    assert resp.get_json()["department"] == "R&D"


def test_avatar_upload_requires_file(client):
    resp = client.post("/employees/e-1/avatar", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No file provided."


def test_avatar_upload(client):
    resp = client.post(
        "/employees/e-1/avatar",
        data={"file": (io.BytesIO(b"png"), "me.png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    assert resp.get_json()["avatar_url"].endswith("/avatars/c-1/e-1/avatar.png")


def test_generate_document_returns_201_row(client):
    resp = client.post("/employees/e-1/documents", json={"templateId": "t-offer"})
    body = resp.get_json()
    assert resp.status_code == 201
    assert body["document_type"] == "offer_letter"
    assert body["file_name"] == "Asha_Rao_offer-letter.pdf"


def test_generate_document_missing_template_id(client):
    resp = client.post("/employees/e-1/documents", json={})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "validation_failure"


def test_generate_document_render_failure_reports_stage(client, renderer):
    renderer.fail = True
    resp = client.post("/employees/e-1/documents", json={"templateId": "t-offer"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to render PDF", "kind": "render_failure", "stage": "rendered"}


def test_generate_document_store_failure(client, storage):
    storage.fail_uploads = True
    resp = client.post("/employees/e-1/documents", json={"templateId": "t-offer"})
    assert resp.status_code == 500
    assert resp.get_json()["kind"] == "store_failure"


def test_preview_is_inline_pdf(client, storage):
    resp = client.get("/employees/e-1/documents/preview?templateId=t-offer")
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.headers["Content-Disposition"] == 'inline; filename="preview.pdf"'
    assert resp.data.startswith(b"%PDF")
    assert storage.uploads == []


def test_preview_unknown_employee(client):
    resp = client.get("/employees/missing/documents/preview?templateId=t-offer")
    assert resp.status_code == 404


def test_list_and_download_documents(client):
    created = client.post("/employees/e-1/documents", json={"templateId": "t-offer"}).get_json()

    listed = client.get("/employees/e-1/documents").get_json()
    assert listed[0]["id"] == created["id"]
    assert listed[0]["template"] == {"id": "t-offer", "name": "Offer Letter"}

    resp = client.get(f"/employees/e-1/documents/{created['id']}/download")
    assert resp.status_code == 200
    assert resp.get_json()["url"].endswith("?ttl=600")


def test_download_unknown_document(client):
    resp = client.get("/employees/e-1/documents/d-404/download")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Document not found."


def test_document_templates_for_company(client):
    resp = client.get("/document-templates?companyId=c-2")
    assert [t["id"] for t in resp.get_json()] == ["t-globex", "t-offer"]


def test_unexpected_errors_are_generic_500(client, companies_repo):
    def boom():
        raise RuntimeError("db exploded")

    companies_repo.list_all = boom
    resp = client.get("/companies")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch companies"}
