from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body, to_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @api_view("Unexpected error fetching employee.")
    def get_employee(employee_id: str):
        return jsonify(container.employee_service.get_details(employee_id))

    @app.route("/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    @api_view("Unexpected error updating employee.")
    def update_employee(employee_id: str):
        employee = container.employee_service.update(employee_id, json_body())
        return jsonify(to_json(employee))

    @app.route("/employees/<employee_id>/avatar", methods=["POST"], endpoint="upload_employee_avatar")
    @api_view("Unexpected error uploading avatar.")
    def upload_employee_avatar(employee_id: str):
        upload = request.files.get("file")
        employee = container.employee_service.upload_avatar(
            employee_id,
            filename=upload.filename if upload else None,
            data=upload.read() if upload else None,
            content_type=upload.mimetype if upload else None,
        )
        return jsonify(to_json(employee))
