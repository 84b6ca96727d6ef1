"""Example: use the service layer directly (no Flask).

Renders a preview PDF for one employee and writes it next to this script.
Usage: python examples/example_usage.py <employee_id> <template_id>
"""

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container


def main():
    load_dotenv(override=False)
    employee_id, template_id = sys.argv[1], sys.argv[2]

    settings = importlib.import_module(get_settings_module())
    container = build_container(supabase_config=settings.SUPABASE_CONFIG)

    pdf = container.document_service.preview(employee_id, template_id)
    out = Path(__file__).resolve().parent / "preview.pdf"
    out.write_bytes(pdf)
    print(f"Wrote {len(pdf)} bytes to {out}")


if __name__ == "__main__":
    main()
