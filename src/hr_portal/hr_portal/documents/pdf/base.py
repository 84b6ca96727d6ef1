from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class PageSetup:
    paper_format: str = "A4"
    print_background: bool = True
    margin: Dict[str, str] = field(
        default_factory=lambda: {"top": "20mm", "bottom": "20mm", "left": "15mm", "right": "15mm"}
    )


class PdfRenderer(ABC):
    """Turn a complete HTML document into PDF bytes."""

    @abstractmethod
    def render(self, html: str) -> bytes:
        raise NotImplementedError
