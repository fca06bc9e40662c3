"""Tests registry — catalogue, factory, duplication."""
import pytest

from content_blocks import BLOCK_DEFINITIONS, BLOCK_KINDS, LayoutSettings
from content_blocks.registry import (
    BLOCK_CATEGORIES,
    create_block,
    duplicate_block,
    get_block_definition,
    get_blocks_by_category,
)


# ── Catalogue ────────────────────────────────────────────────────────────────

def test_registry_covers_every_kind():
    kinds = [d.kind for d in BLOCK_DEFINITIONS]
    assert len(kinds) == len(set(kinds))
    assert set(kinds) == set(BLOCK_KINDS)
    assert len(kinds) == 31


def test_every_definition_has_known_category():
    category_ids = {c.id for c in BLOCK_CATEGORIES}
    for definition in BLOCK_DEFINITIONS:
        assert definition.category in category_ids
        assert definition.label and definition.label_sv and definition.icon


def test_get_block_definition_unknown_returns_none():
    assert get_block_definition("carousel3d") is None
    assert get_block_definition(None) is None
    assert get_block_definition(42) is None


def test_get_block_definition_known():
    definition = get_block_definition("faq")
    assert definition.label_sv == "Vanliga frågor"
    assert definition.category == "content"


def test_get_blocks_by_category_layout():
    assert [d.kind for d in get_blocks_by_category("layout")] == ["spacer", "divider"]


# ── create_block ─────────────────────────────────────────────────────────────

def test_create_block_faq_starter_items():
    block = create_block("faq")
    assert block.kind == "faq"
    assert block.payload.title == "Vanliga frågor"
    assert [i.question for i in block.payload.items] == ["Fråga 1?", "Fråga 2?"]
    assert block.settings == LayoutSettings()


def test_create_block_default_settings():
    settings = create_block("hero").settings
    assert settings.background == "white"
    assert settings.padding_top == "md"
    assert settings.padding_bottom == "md"
    assert settings.max_width == "xl"
    assert settings.anchor is None


def test_create_block_fresh_ids():
    ids = {create_block("spacer").id for _ in range(20)}
    assert len(ids) == 20
    assert all(ids)


def test_create_block_unknown_kind_raises():
    with pytest.raises(ValueError, match="inconnu"):
        create_block("carousel3d")


@pytest.mark.parametrize("kind", BLOCK_KINDS)
def test_create_block_every_kind(kind):
    block = create_block(kind)
    assert block.kind == kind
    assert isinstance(block.payload, get_block_definition(kind).payload_model)


def test_create_simple_table_defaults():
    payload = create_block("simpleTable").payload
    assert payload.headers == ["Kolumn 1", "Kolumn 2"]
    assert payload.rows == [["", ""]]
    assert payload.striped is True


def test_create_contact_form_uses_contact_preset():
    payload = create_block("contactForm").payload
    assert payload.preset == "contact"
    assert payload.form_type == "contact"
    assert payload.submit_button_text == "Skicka meddelande"
    assert len(payload.fields) == 8


# ── duplicate_block ──────────────────────────────────────────────────────────

def test_duplicate_block_new_id_same_content():
    block = create_block("faq")
    copy = duplicate_block(block)
    assert copy.id != block.id
    assert copy.kind == block.kind
    assert copy.payload == block.payload
    assert copy.settings == block.settings


def test_duplicate_block_payload_is_deep_copy():
    block = create_block("faq")
    copy = duplicate_block(block)
    copy.payload.items.append(copy.payload.items[0])
    assert len(block.payload.items) == 2
    assert len(copy.payload.items) == 3
