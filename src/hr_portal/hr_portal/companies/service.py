from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.mapping import COMPANY_FIELDS, to_columns
from ..common.validators import require_non_empty
from ..core.constants import UPLOAD_CACHE_CONTROL
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.repository import ObjectStorage
from .model import Company
from .repository import CompanyRepository

logger = logging.getLogger(__name__)


def file_extension(filename: Optional[str], default: str) -> str:
    name = (filename or "").strip()
    if "." not in name:
        return default
    ext = name.rsplit(".", 1)[-1].lower()
    return ext or default


class CompanyService:
    def __init__(self, companies: CompanyRepository, storage: ObjectStorage, *, logos_bucket: str):
        self._companies = companies
        self._storage = storage
        self._logos_bucket = logos_bucket

    def list_companies(self) -> Sequence[Company]:
        return self._companies.list_all()

    def get_company(self, company_id: str) -> Company:
        company = self._companies.get_by_id(company_id)
        if not company:
            raise NotFoundError("Company not found")
        return company

    def create_company(self, body: Mapping[str, Any]) -> Company:
        fields = to_columns(body, COMPANY_FIELDS)
        name = require_non_empty(fields.get("name"), "name")
        company = self._companies.create(
            name=name,
            code=fields.get("code") or None,
            logo_url=fields.get("logo_url") or None,
        )
        logger.info("Created company %s (%s)", company.id, company.name)
        return company

    def upload_logo(
        self,
        company_id: str,
        *,
        filename: Optional[str],
        data: Optional[bytes],
        content_type: Optional[str],
    ) -> Company:
        if not data:
            raise ValidationError("No file provided.")

        self.get_company(company_id)

        path = f"{company_id}/logo.{file_extension(filename, 'png')}"
        self._storage.upload(
            bucket=self._logos_bucket,
            path=path,
            data=data,
            content_type=content_type or "application/octet-stream",
            upsert=True,
            cache_control=UPLOAD_CACHE_CONTROL,
        )
        logo_url = self._storage.public_url(bucket=self._logos_bucket, path=path)

        updated = self._companies.set_logo_url(company_id, logo_url=logo_url)
        if not updated:
            raise NotFoundError("Company not found")
        return updated
