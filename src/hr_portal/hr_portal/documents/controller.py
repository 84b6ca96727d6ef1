from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..common.http import api_view, json_body, to_json
from ..container import Container
from ..core.constants import PDF_CONTENT_TYPE


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<employee_id>/documents", methods=["POST"], endpoint="create_employee_document")
    @api_view("Unexpected error generating document.")
    def create_employee_document(employee_id: str):
        document = container.document_service.generate(employee_id, json_body().get("templateId"))
        return jsonify(to_json(document)), 201

    @app.route("/employees/<employee_id>/documents", methods=["GET"], endpoint="list_employee_documents")
    @api_view("Unexpected error fetching employee documents.")
    def list_employee_documents(employee_id: str):
        return jsonify(to_json(container.document_service.list_for_employee(employee_id)))

    @app.route("/employees/<employee_id>/documents/preview", methods=["GET"], endpoint="preview_employee_document")
    @api_view("Unexpected error generating document preview.")
    def preview_employee_document(employee_id: str):
        pdf = container.document_service.preview(employee_id, request.args.get("templateId"))
        return Response(
            pdf,
            mimetype=PDF_CONTENT_TYPE,
            headers={"Content-Disposition": 'inline; filename="preview.pdf"'},
        )

    @app.route(
        "/employees/<employee_id>/documents/<document_id>/download",
        methods=["GET"],
        endpoint="download_employee_document",
    )
    @api_view("Unexpected error generating download URL.")
    def download_employee_document(employee_id: str, document_id: str):
        return jsonify({"url": container.document_service.download_url(employee_id, document_id)})

    @app.route("/document-templates", methods=["GET"], endpoint="list_document_templates")
    @api_view("Unexpected error fetching document templates.")
    def list_document_templates():
        templates = container.document_service.list_templates(request.args.get("companyId"))
        return jsonify(to_json(templates))
