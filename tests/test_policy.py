"""Tests politique de types + picker (recherche, groupes)."""
import pytest

from content_blocks import BLOCK_KINDS, create_block
from content_blocks.policy import (
    SIMPLIFIED_BLOCK_KINDS,
    allowed_kinds_for,
    filter_definitions,
    group_by_category,
    is_kind_allowed,
    out_of_policy_blocks,
)


def test_simplified_subset():
    assert set(SIMPLIFIED_BLOCK_KINDS) == {
        "richText", "singleImage", "videoEmbed", "divider",
        "tabs", "simpleTable", "inlineCTA", "quote",
    }
    assert set(SIMPLIFIED_BLOCK_KINDS) <= set(BLOCK_KINDS)


@pytest.mark.parametrize("context", ["page", "campaign", "product"])
def test_full_contexts_unrestricted(context):
    assert allowed_kinds_for(context) is None


@pytest.mark.parametrize("context", ["post", "service"])
def test_simplified_contexts(context):
    assert allowed_kinds_for(context) == SIMPLIFIED_BLOCK_KINDS


def test_unknown_context_raises():
    with pytest.raises(ValueError):
        allowed_kinds_for("newsletter")


def test_no_context_unrestricted():
    assert allowed_kinds_for(None) is None


def test_is_kind_allowed():
    assert is_kind_allowed("hero")
    assert not is_kind_allowed("hero", SIMPLIFIED_BLOCK_KINDS)
    assert is_kind_allowed("quote", SIMPLIFIED_BLOCK_KINDS)
    assert not is_kind_allowed("carousel3d")


# ── Picker ───────────────────────────────────────────────────────────────────

def test_filter_without_arguments_lists_everything():
    assert len(filter_definitions()) == len(BLOCK_KINDS)


def test_filter_by_whitelist():
    kinds = [d.kind for d in filter_definitions(SIMPLIFIED_BLOCK_KINDS)]
    assert set(kinds) == set(SIMPLIFIED_BLOCK_KINDS)


def test_search_matches_swedish_label():
    assert [d.kind for d in filter_definitions(search="tabell")] == ["simpleTable"]


def test_search_case_insensitive_and_description():
    kinds = {d.kind for d in filter_definitions(search="TABLE")}
    assert {"comparison", "simpleTable"} <= kinds
    assert "hero" not in kinds


def test_search_no_match():
    assert filter_definitions(search="zzzz") == []


def test_search_combined_with_whitelist():
    assert filter_definitions(SIMPLIFIED_BLOCK_KINDS, "karta") == []
    assert [d.kind for d in filter_definitions(None, "karta")] == ["map"]


def test_group_by_category_order():
    groups = group_by_category(filter_definitions())
    assert [c.id for c, _ in groups] == ["content", "cta", "social", "media", "advanced", "layout"]
    assert sum(len(defs) for _, defs in groups) == len(BLOCK_KINDS)


def test_group_by_category_skips_empty():
    groups = group_by_category(filter_definitions(SIMPLIFIED_BLOCK_KINDS))
    assert [c.id for c, _ in groups] == ["content", "cta", "media", "layout"]


# ── Blocs hors politique ─────────────────────────────────────────────────────

def test_out_of_policy_blocks():
    hero, quote = create_block("hero"), create_block("quote")
    assert out_of_policy_blocks([hero, quote], SIMPLIFIED_BLOCK_KINDS) == [hero.id]
    assert out_of_policy_blocks([hero, quote], None) == []
