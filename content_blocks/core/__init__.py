"""Core module pour content_blocks."""
from .schemas import (
    BlockKind,
    BLOCK_KINDS,
    BlockCategory,
    LayoutSettings,
    LAYOUT_SETTING_KEYS,
    LAYOUT_SETTING_NAMES,
)
from .richtext import empty_doc, blank_paragraph_doc, paragraph_doc, migrate_rich_text
from .migrations import migrate_table, migrate_contact_form

__all__ = [
    "BlockKind",
    "BLOCK_KINDS",
    "BlockCategory",
    "LayoutSettings",
    "LAYOUT_SETTING_KEYS",
    "LAYOUT_SETTING_NAMES",
    "empty_doc",
    "blank_paragraph_doc",
    "paragraph_doc",
    "migrate_rich_text",
    "migrate_table",
    "migrate_contact_form",
]
