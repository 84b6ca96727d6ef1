from __future__ import annotations

from typing import Optional, Protocol


class ObjectStorage(Protocol):
    """Bucketed object storage used for PDFs, avatars and logos."""

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
        """Store ``data`` at ``path``; with ``upsert=False`` an existing object is an error."""

        raise NotImplementedError

    def public_url(self, *, bucket: str, path: str) -> str:
        raise NotImplementedError

    def signed_url(self, *, bucket: str, path: str, expires_in: int) -> str:
        raise NotImplementedError
