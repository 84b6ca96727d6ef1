from __future__ import annotations

import logging
from typing import Optional

import httpx
from storage3.utils import StorageException

from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from .repository import ObjectStorage

logger = logging.getLogger(__name__)


class SupabaseObjectStorage(ObjectStorage):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _bucket(self, bucket: str):
        return self._conn_factory.client().storage.from_(bucket)

    def upload(
        self,
        *,
        bucket: str,
        path: str,
        data: bytes,
        content_type: str,
        upsert: bool,
        cache_control: Optional[str] = None,
    ) -> None:
        options = {"content-type": content_type, "upsert": "true" if upsert else "false"}
        if cache_control:
            options["cache-control"] = cache_control
        try:
            self._bucket(bucket).upload(path=path, file=data, file_options=options)
        except (StorageException, httpx.HTTPError) as e:
            logger.error("[storage] upload %s/%s failed: %s", bucket, path, e)
            raise StorageError("Failed to upload file") from e
        logger.info("[storage] uploaded %s/%s (%d bytes)", bucket, path, len(data))

    def public_url(self, *, bucket: str, path: str) -> str:
        return self._bucket(bucket).get_public_url(path)

    def signed_url(self, *, bucket: str, path: str, expires_in: int) -> str:
        try:
            res = self._bucket(bucket).create_signed_url(path, expires_in)
        except (StorageException, httpx.HTTPError) as e:
            logger.error("[storage] signing %s/%s failed: %s", bucket, path, e)
            raise StorageError("Failed to sign URL") from e
        url = (res or {}).get("signedURL") or (res or {}).get("signedUrl")
        if not url:
            raise StorageError("Failed to sign URL")
        return url
