"""Diagnostics de parse + erreur de sérialisation."""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..blocks.base import ContentBlock

DiagnosticCode = Literal[
    "not_an_object",
    "unrecognized_kind",
    "missing_id",
    "malformed_payload",
    "duplicate_id",
]


class ParseDiagnostic(BaseModel):
    """Anomalie rencontrée sur un élément du JSON persisté."""
    code: DiagnosticCode
    index: int
    block_id: Optional[str] = None
    kind: Optional[str] = None
    message: str = ""

    @property
    def dropped(self) -> bool:
        return self.code != "duplicate_id"


class ParseResult(BaseModel):
    blocks: List[ContentBlock] = Field(default_factory=list)
    diagnostics: List[ParseDiagnostic] = Field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.dropped)


class BlockSerializationError(ValueError):
    """Payload impossible à encoder en JSON — seule erreur remontée à l'appelant."""

    def __init__(self, block_id: str, kind: str, reason: str):
        self.block_id = block_id
        self.kind = kind
        super().__init__(f"Bloc {block_id!r} ({kind}) non sérialisable : {reason}")
