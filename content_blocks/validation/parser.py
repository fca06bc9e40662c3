"""
Parser — JSON persisté (éventuellement hérité) → document de blocs, et retour.

parse_blocks(raw)
  1. Toute valeur non-liste → document vide
  2. Chaque élément : type connu du registry, id non vide, sinon écarté
  3. Payload normalisé par son modèle (défauts + migrations), LayoutSettings
     défaultés indépendamment du type
  4. Un élément irrécupérable est écarté avec un diagnostic ; le parse ne lève jamais

blocks_to_json(document)
  Inverse structurel, sans migration. Les champs inconnus sont conservés.
  Lève BlockSerializationError si un payload n'est pas encodable en JSON.
"""
import json
import logging
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

from ..blocks.base import ContentBlock
from ..config import BLOCKS_DIAGNOSTIC_LEVEL
from ..core.schemas import LAYOUT_SETTING_KEYS, LayoutSettings
from ..registry import get_block_definition, new_block_id
from .diagnostics import BlockSerializationError, ParseDiagnostic, ParseResult

log = logging.getLogger(__name__)

_RESERVED_KEYS = frozenset({"id", "type"}) | frozenset(LAYOUT_SETTING_KEYS)


def _record(diagnostics: List[ParseDiagnostic], diagnostic: ParseDiagnostic) -> None:
    diagnostics.append(diagnostic)
    log.log(
        BLOCKS_DIAGNOSTIC_LEVEL,
        "Bloc #%d (%s, id=%s) : %s — %s",
        diagnostic.index, diagnostic.kind, diagnostic.block_id, diagnostic.code, diagnostic.message,
    )


def _short_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or '<payload>'}: {e['msg']}" for e in error.errors()
    )


def _parse_element(index: int, element: Any, diagnostics: List[ParseDiagnostic]):
    if not isinstance(element, dict):
        _record(diagnostics, ParseDiagnostic(
            code="not_an_object", index=index,
            message=f"élément de type {type(element).__name__}",
        ))
        return None

    kind = element.get("type")
    raw_id = element.get("id")
    block_id = raw_id if isinstance(raw_id, str) else None
    kind_label = kind if isinstance(kind, str) else None

    definition = get_block_definition(kind)
    if definition is None:
        _record(diagnostics, ParseDiagnostic(
            code="unrecognized_kind", index=index, block_id=block_id, kind=kind_label,
            message=f"type {kind!r} absent du registry",
        ))
        return None

    if not block_id:
        _record(diagnostics, ParseDiagnostic(
            code="missing_id", index=index, kind=kind_label,
            message="id absent ou non textuel",
        ))
        return None

    payload_data = {k: v for k, v in element.items() if k not in _RESERVED_KEYS}
    settings_data = {k: element[k] for k in LAYOUT_SETTING_KEYS if k in element}
    try:
        payload = definition.payload_model.model_validate(payload_data)
        settings = LayoutSettings.model_validate(settings_data)
    except (ValidationError, TypeError, ValueError) as e:
        message = _short_errors(e) if isinstance(e, ValidationError) else f"{type(e).__name__}: {e}"
        _record(diagnostics, ParseDiagnostic(
            code="malformed_payload", index=index, block_id=block_id, kind=kind_label,
            message=message,
        ))
        return None

    return ContentBlock(id=block_id, kind=definition.kind, payload=payload, settings=settings)


def parse_blocks_with_report(raw: Any) -> ParseResult:
    """Parse + liste des diagnostics (blocs écartés ou ré-identifiés)."""
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            log.log(BLOCKS_DIAGNOSTIC_LEVEL, "Blocs : %s reçu au lieu d'une liste", type(raw).__name__)
        return ParseResult()

    blocks: List[ContentBlock] = []
    diagnostics: List[ParseDiagnostic] = []
    seen_ids = set()

    for index, element in enumerate(raw):
        block = _parse_element(index, element, diagnostics)
        if block is None:
            continue
        if block.id in seen_ids:
            fresh_id = new_block_id()
            _record(diagnostics, ParseDiagnostic(
                code="duplicate_id", index=index, block_id=block.id, kind=block.kind,
                message=f"id déjà utilisé, remplacé par {fresh_id}",
            ))
            block = block.model_copy(update={"id": fresh_id})
        seen_ids.add(block.id)
        blocks.append(block)

    return ParseResult(blocks=blocks, diagnostics=diagnostics)


def parse_blocks(raw: Any) -> List[ContentBlock]:
    """JSON persisté → document. Ne lève jamais."""
    return parse_blocks_with_report(raw).blocks


def block_to_json(block: ContentBlock) -> Dict[str, Any]:
    """Un bloc → dict persisté à plat ({id, type, …payload, …settings})."""
    try:
        data = {
            "id": block.id,
            "type": block.kind,
            **block.payload.to_json_dict(),
            **block.settings.model_dump(by_alias=True, exclude_none=True),
        }
        # Vérifie l'encodabilité (cycles, types non JSON, NaN)
        json.dumps(data, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise BlockSerializationError(block.id, block.kind, str(e)) from e
    return data


def blocks_to_json(document: Sequence[ContentBlock]) -> List[Dict[str, Any]]:
    """Document → liste JSON persistable (inverse de parse_blocks)."""
    return [block_to_json(block) for block in document]


def validate_blocks(document: Sequence[ContentBlock]) -> bool:
    """True si ids non vides et uniques, et tous les types connus du registry."""
    seen = set()
    for block in document:
        if not isinstance(block.id, str) or not block.id or block.id in seen:
            return False
        if get_block_definition(block.kind) is None:
            return False
        seen.add(block.id)
    return True
