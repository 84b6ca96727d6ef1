from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee on a company roster."""

    id: str
    company_id: str
    name: str
    mobile: Optional[str] = None
    email: Optional[str] = None
    date_of_joining: Optional[str] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    gender: Optional[str] = None
    status: Optional[str] = None
    annual_ctc: Optional[Union[int, float]] = None
    avatar_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
