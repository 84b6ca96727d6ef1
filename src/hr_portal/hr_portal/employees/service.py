from __future__ import annotations

import logging
import secrets
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.mapping import EMPLOYEE_FIELDS, to_columns
from ..common.validators import clamp_int, optional_number, require_iso_date, require_non_empty
from ..companies.repository import CompanyRepository
from ..companies.service import file_extension
from ..core.constants import DEFAULT_PAGE_SIZE, MAX_AVATAR_BYTES, MAX_PAGE_SIZE, UPLOAD_CACHE_CONTROL
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.repository import ObjectStorage
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_ON_CREATE = ("name", "mobile", "email", "dateOfJoining")


@dataclass(frozen=True)
class EmployeePage:
    data: Sequence[Employee]
    page: int
    page_size: int
    total: int

    def to_dict(self) -> dict:
        return {
            "data": [asdict(e) for e in self.data],
            "pagination": {"page": self.page, "pageSize": self.page_size, "total": self.total},
        }


def _generate_login_otp() -> str:
    return str(100000 + secrets.randbelow(900000))


class EmployeeService:
    def __init__(
        self,
        employees: EmployeeRepository,
        companies: CompanyRepository,
        storage: ObjectStorage,
        *,
        avatars_bucket: str,
        max_avatar_bytes: int = MAX_AVATAR_BYTES,
    ):
        self._employees = employees
        self._companies = companies
        self._storage = storage
        self._avatars_bucket = avatars_bucket
        self._max_avatar_bytes = int(max_avatar_bytes)

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found.")
        return employee

    @staticmethod
    def _clean(columns: dict[str, Any]) -> dict[str, Any]:
        if "name" in columns:
            columns["name"] = require_non_empty(columns["name"], "name")
        if "date_of_joining" in columns:
            columns["date_of_joining"] = require_iso_date(columns["date_of_joining"], "dateOfJoining")
        if "annual_ctc" in columns:
            columns["annual_ctc"] = optional_number(columns["annual_ctc"], "annualCtc")
        if "status" in columns and columns["status"] is not None:
            try:
                columns["status"] = EmployeeStatus(columns["status"]).value
            except ValueError:
                raise ValidationError("status must be one of active, inactive, terminated")
        return columns

    def list_for_company(
        self,
        company_id: str,
        *,
        page: Any = None,
        page_size: Any = None,
        search: Optional[str] = None,
    ) -> EmployeePage:
        page_n = clamp_int(page, default=1, minimum=1)
        size_n = clamp_int(page_size, default=DEFAULT_PAGE_SIZE, minimum=1, maximum=MAX_PAGE_SIZE)
        offset = (page_n - 1) * size_n

        rows, total = self._employees.list_for_company(
            company_id,
            offset=offset,
            limit=size_n,
            search=(search or "").strip(),
        )
        return EmployeePage(data=list(rows), page=page_n, page_size=size_n, total=total)

    def create_for_company(self, company_id: str, body: Mapping[str, Any]) -> Employee:
        missing = [k for k in REQUIRED_ON_CREATE if not body.get(k)]
        if missing:
            raise ValidationError("name, mobile, email and dateOfJoining are required.")

        if not self._companies.get_by_id(company_id):
            raise NotFoundError("Company not found.")

        columns = self._clean(to_columns(body, EMPLOYEE_FIELDS))
        columns.pop("status", None)
        for optional in ("job_title", "department", "gender", "annual_ctc"):
            columns.setdefault(optional, None)
        columns.update(
            company_id=company_id,
            login_otp=_generate_login_otp(),
            status=EmployeeStatus.ACTIVE.value,
        )

        employee = self._employees.create(columns)
        logger.info("Created employee %s for company %s", employee.id, company_id)
        return employee

    def get_details(self, employee_id: str) -> dict:
        employee = self._require_employee(employee_id)
        company = self._companies.get_by_id(employee.company_id)
        details = asdict(employee)
        details["companies"] = (
            {"id": company.id, "name": company.name, "logo_url": company.logo_url} if company else None
        )
        return details

    def update(self, employee_id: str, body: Mapping[str, Any]) -> Employee:
        columns = self._clean(to_columns(body, EMPLOYEE_FIELDS))
        if not columns:
            raise ValidationError("No updatable fields provided.")

        self._require_employee(employee_id)
        columns["updated_at"] = utc_now_iso()

        updated = self._employees.update(employee_id, columns)
        if not updated:
            raise NotFoundError("Employee not found.")
        return updated

    def upload_avatar(
        self,
        employee_id: str,
        *,
        filename: Optional[str],
        data: Optional[bytes],
        content_type: Optional[str],
    ) -> Employee:
        if not data:
            raise ValidationError("No file provided.")
        if len(data) > self._max_avatar_bytes:
            raise ValidationError("File too large.")

        employee = self._require_employee(employee_id)

        path = f"{employee.company_id}/{employee_id}/avatar.{file_extension(filename, 'jpg')}"
        self._storage.upload(
            bucket=self._avatars_bucket,
            path=path,
            data=data,
            content_type=content_type or "application/octet-stream",
            upsert=True,
            cache_control=UPLOAD_CACHE_CONTROL,
        )
        avatar_url = self._storage.public_url(bucket=self._avatars_bucket, path=path)

        updated = self._employees.update(employee_id, {"avatar_url": avatar_url, "updated_at": utc_now_iso()})
        if not updated:
            raise NotFoundError("Employee not found.")
        return updated
