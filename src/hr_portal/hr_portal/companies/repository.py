from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Company


class CompanyRepository(Protocol):
    """Repository interface for companies.

    Services depend on this interface, not on a concrete database client.
    """

    def list_all(self) -> Sequence[Company]:
        raise NotImplementedError

    def get_by_id(self, company_id: str) -> Optional[Company]:
        raise NotImplementedError

    def create(self, *, name: str, code: Optional[str], logo_url: Optional[str]) -> Company:
        raise NotImplementedError

    def set_logo_url(self, company_id: str, *, logo_url: str) -> Optional[Company]:
        raise NotImplementedError
