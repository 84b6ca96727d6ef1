"""Fixed placeholder substitution for document templates.

Only the tokens in ``PLACEHOLDERS`` are replaced; any other ``{{...}}`` text
is emitted unchanged. There are no loops, conditionals or escaping.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Callable, Dict

from .model import RenderContext

PLACEHOLDERS: Dict[str, Callable[[RenderContext], Any]] = {
    "{{employee_name}}": lambda ctx: ctx.employee.name,
    "{{company_name}}": lambda ctx: ctx.company.name,
    "{{date_of_joining}}": lambda ctx: ctx.employee.date_of_joining,
    "{{job_title}}": lambda ctx: ctx.employee.job_title,
    "{{annual_ctc}}": lambda ctx: ctx.employee.annual_ctc,
}

_TOKEN_RE = re.compile("|".join(re.escape(token) for token in PLACEHOLDERS))


def as_text(value: Any) -> str:
    """Plain string form of a field value; None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def placeholder_values(context: RenderContext) -> Dict[str, str]:
    return {token: as_text(source(context)) for token, source in PLACEHOLDERS.items()}


def render_placeholders(body_html: str, context: RenderContext) -> str:
    # Single pass: substituted values are never rescanned for tokens.
    values = placeholder_values(context)
    return _TOKEN_RE.sub(lambda m: values[m.group(0)], body_html or "")
