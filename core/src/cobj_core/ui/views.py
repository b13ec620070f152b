from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from fastapi.templating import Jinja2Templates

from cobj_core.hubspot import PROPERTY_NAMES, CustomObjectRecord

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

HOMEPAGE_TITLE = "Custom Objects | Integrating With HubSpot I Practicum"
FORM_TITLE = "Update Custom Object Form | Integrating With HubSpot I Practicum"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_records_page(title: str, records: Sequence[CustomObjectRecord]) -> str:
    rows = [{"id": r.id, **{name: r.prop(name) for name in PROPERTY_NAMES}} for r in records]
    return templates.get_template("homepage.html").render(title=title, rows=rows)


def render_form_page(title: str) -> str:
    return templates.get_template("updates.html").render(title=title)
