from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence, Tuple

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_for_company(
        self,
        company_id: str,
        *,
        offset: int,
        limit: int,
        search: str = "",
    ) -> Tuple[Sequence[Employee], int]:
        """Return one page (newest first) and the total matching count."""

        raise NotImplementedError

    def create(self, columns: Mapping[str, Any]) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: str, columns: Mapping[str, Any]) -> Optional[Employee]:
        raise NotImplementedError
