"""Translation between the API's camelCase bodies and snake_case columns."""

from __future__ import annotations

from typing import Any, Mapping

EMPLOYEE_FIELDS = {
    "name": "name",
    "jobTitle": "job_title",
    "department": "department",
    "mobile": "mobile",
    "email": "email",
    "dateOfJoining": "date_of_joining",
    "gender": "gender",
    "annualCtc": "annual_ctc",
    "status": "status",
}

COMPANY_FIELDS = {
    "name": "name",
    "code": "code",
    "logoUrl": "logo_url",
}


def to_columns(body: Mapping[str, Any], fields: Mapping[str, str]) -> dict[str, Any]:
    """Keep only known keys that are present in ``body``, renamed to columns."""
    return {column: body[key] for key, column in fields.items() if key in body}
