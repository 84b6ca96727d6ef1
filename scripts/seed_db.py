from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container

OFFER_LETTER_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><style>body { font-family: Arial, sans-serif; }</style></head>
<body>
  <h2>{{company_name}}</h2>
  <p>Dear {{employee_name}},</p>
  <p>We are pleased to offer you the position of <strong>{{job_title}}</strong>,
     starting on {{date_of_joining}}, with an annual CTC of {{annual_ctc}}.</p>
  <p>Regards,<br>{{company_name}} HR</p>
</body>
</html>
"""


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(supabase_config=settings.SUPABASE_CONFIG)

    company = container.company_service.create_company({"name": "Acme Demo", "code": "ACME"})
    template = container.templates_repo.create(
        name="Offer Letter",
        slug="offer-letter",
        document_type="offer_letter",
        body_html=OFFER_LETTER_HTML,
        company_id=None,
    )

    print(f"OK: Seeded company {company.id} ({company.name}) and global template {template.id} ({template.slug})")


if __name__ == "__main__":
    main()
