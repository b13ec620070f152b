from __future__ import annotations

from cobj_core.hubspot import CustomObjectRecord
from cobj_core.ui.views import render_form_page, render_records_page


def test_records_page_lists_every_record() -> None:
    records = [
        CustomObjectRecord(
            id="1",
            properties={"name": "Rex", "species": "Dog", "bio": "Good boy", "dog": "yes"},
        ),
        CustomObjectRecord(id="2", properties={"name": "Tom", "species": "Cat", "dog": "no"}),
    ]
    html = render_records_page("Pets", records)

    assert "<title>Pets</title>" in html
    for value in ("Rex", "Dog", "Good boy", "yes", "Tom", "Cat", "no"):
        assert f"<td>{value}</td>" in html
    assert "No records yet." not in html


def test_records_page_empty_state() -> None:
    html = render_records_page("Pets", [])
    assert "No records yet." in html


def test_records_page_escapes_remote_values() -> None:
    records = [CustomObjectRecord(id="1", properties={"name": "<script>alert(1)</script>"})]
    html = render_records_page("Pets", records)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_form_page_has_expected_inputs() -> None:
    html = render_form_page("Add")
    assert 'action="/update-cobj"' in html
    for name in ("name", "species", "bio", "dog"):
        assert f'name="{name}"' in html
