"""Tests migrations — rich text, simpleTable, contactForm + presets de formulaire."""
import copy

import pytest

from content_blocks.core.form_presets import (
    FORM_PRESETS,
    create_block_from_preset,
    get_enabled_fields,
    get_field_with_defaults,
    get_preset_config,
    has_customized_fields,
    merge_fields_with_preset,
)
from content_blocks.core.migrations import migrate_contact_form, migrate_table
from content_blocks.core.richtext import empty_doc, migrate_rich_text, paragraph_doc


# ── Rich text ────────────────────────────────────────────────────────────────

def test_rich_text_string_to_paragraph():
    assert migrate_rich_text("Hej") == paragraph_doc("Hej")
    assert paragraph_doc("Hej")["content"][0]["content"] == [{"type": "text", "text": "Hej"}]


@pytest.mark.parametrize("value", [None, "", 0, []])
def test_rich_text_empty_values(value):
    assert migrate_rich_text(value) == empty_doc()


@pytest.mark.parametrize("value", ["Hej", "", None, {"type": "doc", "content": []}])
def test_rich_text_idempotent(value):
    once = migrate_rich_text(value)
    assert migrate_rich_text(once) == once


# ── simpleTable ──────────────────────────────────────────────────────────────

def test_table_empty():
    data = migrate_table({})
    assert data["headers"] == ["Kolumn 1", "Kolumn 2"]
    assert data["rows"] == [["", ""]]


def test_table_headers_kept_rows_padded():
    data = migrate_table({"headers": ["A", "B", "C"], "rows": [["1"], ["1", "2", "3", "4"]]})
    assert data["headers"] == ["A", "B", "C"]
    assert data["rows"] == [["1", "", ""], ["1", "2", "3", "4"]]


def test_table_rows_absent_follow_header_width():
    assert migrate_table({"headers": ["A", "B", "C"]})["rows"] == [["", "", ""]]


def test_table_does_not_mutate_input():
    raw = {"rows": [["a"]]}
    before = copy.deepcopy(raw)
    migrate_table(raw)
    assert raw == before


@pytest.mark.parametrize("raw", [{}, {"rows": [["a", "b", "c"], []]}, {"headers": ["X"], "rows": [["1", "2"]]}])
def test_table_idempotent(raw):
    once = migrate_table(raw)
    assert migrate_table(once) == once


def test_table_non_list_left_untouched():
    raw = {"headers": "A,B"}
    assert migrate_table(raw) == raw


# ── contactForm ──────────────────────────────────────────────────────────────

def test_contact_form_defaults_to_contact_preset():
    data = migrate_contact_form({})
    assert data["preset"] == "contact"
    assert [f["id"] for f in data["fields"]] == [f["id"] for f in FORM_PRESETS["contact"]["fields"]]


def test_contact_form_legacy_form_type():
    data = migrate_contact_form({"formType": "quote"})
    assert data["preset"] == "quote"
    assert data["fields"] == FORM_PRESETS["quote"]["fields"]


def test_contact_form_preset_wins_over_form_type():
    assert migrate_contact_form({"preset": "newsletter", "formType": "quote"})["preset"] == "newsletter"


def test_contact_form_invalid_preset_falls_back():
    assert migrate_contact_form({"preset": "survey", "formType": "poll"})["preset"] == "contact"


def test_contact_form_partial_fields_completed():
    data = migrate_contact_form({
        "preset": "contact",
        "fields": [{"id": "orgNumber", "enabled": True, "required": True}],
    })
    by_id = {f["id"]: f for f in data["fields"]}
    assert len(by_id) == 8
    assert by_id["orgNumber"]["required"] is True
    assert by_id["name"] == {"id": "name", "enabled": True, "required": True}


def test_contact_form_idempotent():
    once = migrate_contact_form({"formType": "callback", "fields": [{"id": "email", "enabled": True}]})
    assert migrate_contact_form(once) == once


# ── Presets ──────────────────────────────────────────────────────────────────

def test_preset_config_is_copy():
    config = get_preset_config("contact")
    config["fields"].clear()
    assert len(FORM_PRESETS["contact"]["fields"]) == 8


def test_create_block_from_preset_keys():
    data = create_block_from_preset("newsletter")
    assert data["preset"] == "newsletter"
    assert data["submitButtonText"] == "Prenumerera"
    assert data["categoryMode"] == "hidden"


def test_merge_fields_empty_gives_preset():
    assert merge_fields_with_preset(None, "quote") == FORM_PRESETS["quote"]["fields"]
    assert merge_fields_with_preset([], "quote") == FORM_PRESETS["quote"]["fields"]


def test_merge_fields_ignores_invalid_ids():
    custom = [{"id": ["name"]}, {"id": {"x": 1}}, {"id": "fax"}, "phone", {"id": "phone", "enabled": False}]
    merged = merge_fields_with_preset(custom, "contact")
    by_id = {f["id"]: f for f in merged}
    assert len(merged) == 8
    assert by_id["phone"]["enabled"] is False
    assert by_id["name"] == {"id": "name", "enabled": True, "required": True}
    assert has_customized_fields(custom, "contact")


def test_has_customized_fields():
    fields = copy.deepcopy(FORM_PRESETS["contact"]["fields"])
    assert not has_customized_fields(fields, "contact")
    fields[4]["enabled"] = True
    assert has_customized_fields(fields, "contact")
    assert not has_customized_fields([], "contact")


def test_field_with_defaults_fills_texts():
    field = get_field_with_defaults({"id": "email", "enabled": True, "required": True})
    assert field["label"] == "E-postadress"
    assert field["placeholder"] == "din@email.se"


def test_enabled_fields_callback():
    enabled = get_enabled_fields(FORM_PRESETS["callback"]["fields"])
    assert [f["id"] for f in enabled] == ["name", "phone", "company", "category"]
