from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status stored on the employees table."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    TERMINATED = "terminated"


class GenerationStage(str, Enum):
    """Stages a document generation request moves through, in order."""

    REQUESTED = "requested"
    TEMPLATE_RESOLVED = "template_resolved"
    RENDERED = "rendered"
    PDF_PRODUCED = "pdf_produced"
    STORED = "stored"
    RECORDED = "recorded"
