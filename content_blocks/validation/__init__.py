"""Validation — frontière JSON persisté ↔ document de blocs."""
from .diagnostics import ParseDiagnostic, ParseResult, BlockSerializationError
from .parser import parse_blocks, parse_blocks_with_report, blocks_to_json, block_to_json, validate_blocks

__all__ = [
    "ParseDiagnostic",
    "ParseResult",
    "BlockSerializationError",
    "parse_blocks",
    "parse_blocks_with_report",
    "blocks_to_json",
    "block_to_json",
    "validate_blocks",
]
