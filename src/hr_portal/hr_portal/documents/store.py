from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from ..common.datetime_utils import now_millis
from ..core.constants import PDF_CONTENT_TYPE
from ..core.exceptions import DataAccessError, StorageError
from ..employees.model import Employee
from ..storage.repository import ObjectStorage
from .model import DocumentTemplate, GeneratedDocument
from .repository import GeneratedDocumentRepository

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_name(name: str) -> str:
    return _WHITESPACE_RUN.sub("_", name or "")


@dataclass(frozen=True)
class StoredObject:
    file_name: str
    file_path: str


class DocumentStore:
    """Upload rendered PDFs, then record them.

    Upload always comes first. If recording fails the uploaded object stays
    where it is and the caller gets a StorageError.
    """

    def __init__(
        self,
        storage: ObjectStorage,
        documents: GeneratedDocumentRepository,
        *,
        bucket: str,
        clock: Callable[[], int] = now_millis,
    ):
        self._storage = storage
        self._documents = documents
        self._bucket = bucket
        self._clock = clock

    def build_object(self, *, employee: Employee, template: DocumentTemplate) -> StoredObject:
        safe_name = f"{sanitize_name(employee.name)}_{template.slug or template.id}"
        path = f"{employee.company_id}/{employee.id}/{safe_name}_{self._clock()}.pdf"
        return StoredObject(file_name=f"{safe_name}.pdf", file_path=path)

    def put(self, pdf: bytes, *, employee: Employee, template: DocumentTemplate) -> StoredObject:
        obj = self.build_object(employee=employee, template=template)
        self._storage.upload(
            bucket=self._bucket,
            path=obj.file_path,
            data=pdf,
            content_type=PDF_CONTENT_TYPE,
            upsert=False,
        )
        return obj

    def record(self, obj: StoredObject, *, employee: Employee, template: DocumentTemplate) -> GeneratedDocument:
        try:
            return self._documents.create(
                employee_id=employee.id,
                company_id=employee.company_id,
                template_id=template.id,
                file_name=obj.file_name,
                file_path=obj.file_path,
                document_type=template.document_type,
            )
        except DataAccessError as e:
            logger.error("Uploaded %s/%s but could not record it: %s", self._bucket, obj.file_path, e)
            raise StorageError("Failed to record generated document") from e

    def signed_url(self, file_path: str, *, expires_in: int) -> str:
        return self._storage.signed_url(bucket=self._bucket, path=file_path, expires_in=expires_in)
