"""
Content Blocks v0.3 — modèle de document par blocs pour l'admin page builder.

Usage (parse / édition / persistance):
    >>> from content_blocks import parse_blocks, insert_block, create_block, blocks_to_json
    >>> document = parse_blocks(raw_json)
    >>> document = insert_block(document, create_block("faq"))
    >>> raw_json = blocks_to_json(document)

Usage (session d'édition):
    >>> from content_blocks import BlockEditor, allowed_kinds_for
    >>> editor = BlockEditor.from_json(raw_json, allowed_kinds=allowed_kinds_for("post"))
    >>> editor.add_block("quote")
"""

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core.schemas import BlockKind, BLOCK_KINDS, LayoutSettings
from .blocks import BlockPayload, ContentBlock

# ── Registry ────────────────────────────────────────────────────────────────
from .registry import (
    BlockDefinition,
    BLOCK_DEFINITIONS,
    BLOCK_CATEGORIES,
    get_block_definition,
    get_blocks_by_category,
    create_block,
    duplicate_block,
)

# ── Opérations sur le document ──────────────────────────────────────────────
from .document import (
    BlockDocument,
    insert_block,
    update_block,
    update_settings,
    remove_block,
    move_to,
    move_up,
    move_down,
    move_block,
    duplicate_in_document,
)

# ── Frontière de persistance ────────────────────────────────────────────────
from .validation import (
    ParseDiagnostic,
    ParseResult,
    BlockSerializationError,
    parse_blocks,
    parse_blocks_with_report,
    blocks_to_json,
    validate_blocks,
)

# ── Politique + éditeur ─────────────────────────────────────────────────────
from .policy import SIMPLIFIED_BLOCK_KINDS, allowed_kinds_for, filter_definitions, group_by_category
from .editor import BlockEditor

__version__ = "0.3.0"

__all__ = [
    "BlockKind", "BLOCK_KINDS", "LayoutSettings", "BlockPayload", "ContentBlock",
    "BlockDefinition", "BLOCK_DEFINITIONS", "BLOCK_CATEGORIES",
    "get_block_definition", "get_blocks_by_category", "create_block", "duplicate_block",
    "BlockDocument", "insert_block", "update_block", "update_settings", "remove_block",
    "move_to", "move_up", "move_down", "move_block", "duplicate_in_document",
    "ParseDiagnostic", "ParseResult", "BlockSerializationError",
    "parse_blocks", "parse_blocks_with_report", "blocks_to_json", "validate_blocks",
    "SIMPLIFIED_BLOCK_KINDS", "allowed_kinds_for", "filter_definitions", "group_by_category",
    "BlockEditor",
]
