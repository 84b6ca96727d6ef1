from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/companies", methods=["GET"], endpoint="list_companies")
    @api_view("Failed to fetch companies")
    def list_companies():
        return jsonify(to_json(container.company_service.list_companies()))

    @app.route("/companies", methods=["POST"], endpoint="create_company")
    @api_view("Failed to create company")
    def create_company():
        company = container.company_service.create_company(json_body())
        return jsonify(to_json(company)), 201

    @app.route("/companies/<company_id>", methods=["GET"], endpoint="get_company")
    @api_view("Failed to fetch company")
    def get_company(company_id: str):
        return jsonify(to_json(container.company_service.get_company(company_id)))

    @app.route("/companies/<company_id>/employees", methods=["GET"], endpoint="list_company_employees")
    @api_view("Failed to fetch employees for company")
    def list_company_employees(company_id: str):
        page = container.employee_service.list_for_company(
            company_id,
            page=request.args.get("page"),
            page_size=request.args.get("pageSize"),
            search=request.args.get("search"),
        )
        return jsonify(page.to_dict())

    @app.route("/companies/<company_id>/employees", methods=["POST"], endpoint="create_company_employee")
    @api_view("Unexpected error creating employee.")
    def create_company_employee(company_id: str):
        employee = container.employee_service.create_for_company(company_id, json_body())
        return jsonify(to_json(employee)), 201

    @app.route("/companies/<company_id>/logo", methods=["POST"], endpoint="upload_company_logo")
    @api_view("Unexpected error uploading company logo.")
    def upload_company_logo(company_id: str):
        upload = request.files.get("logo")
        company = container.company_service.upload_logo(
            company_id,
            filename=upload.filename if upload else None,
            data=upload.read() if upload else None,
            content_type=upload.mimetype if upload else None,
        )
        return jsonify(to_json(company))
