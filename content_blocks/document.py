"""
Opérations sur un document de blocs (séquence ordonnée de ContentBlock).

Toutes les opérations sont pures : elles retournent une nouvelle liste et ne
modifient jamais l'entrée. Un id introuvable ou un index hors bornes ne lève
pas d'erreur : l'opération devient un no-op et retourne le document tel quel.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic.alias_generators import to_camel

from .blocks.base import ContentBlock
from .core.schemas import LAYOUT_SETTING_KEYS, LAYOUT_SETTING_NAMES
from .registry import duplicate_block, new_block_id

log = logging.getLogger(__name__)

BlockDocument = List[ContentBlock]

# Clés d'identité jamais fusionnées dans un payload
_IDENTITY_KEYS = frozenset({"id", "type", "kind"})
_SETTING_KEYS = frozenset(LAYOUT_SETTING_KEYS) | frozenset(LAYOUT_SETTING_NAMES)


def find_index(document: Sequence[ContentBlock], block_id: str) -> Optional[int]:
    for index, block in enumerate(document):
        if block.id == block_id:
            return index
    return None


def insert_block(document: Sequence[ContentBlock], block: ContentBlock, index: Optional[int] = None) -> BlockDocument:
    """
    Insère `block` à `index` s'il est dans [0, len], sinon en fin de document.

    Un bloc dont l'id existe déjà dans le document reçoit un nouvel id.
    """
    if find_index(document, block.id) is not None:
        log.debug("Insertion : id %s déjà présent, nouvel id attribué", block.id)
        block = block.model_copy(update={"id": new_block_id()})

    blocks = list(document)
    if index is not None and 0 <= index <= len(blocks):
        blocks.insert(index, block)
    else:
        blocks.append(block)
    return blocks


def _split_partial(partial: Mapping[str, Any]):
    payload_part: Dict[str, Any] = {}
    settings_part: Dict[str, Any] = {}
    for key, value in partial.items():
        if key in _IDENTITY_KEYS:
            continue
        if key in _SETTING_KEYS:
            settings_part[key] = value
        else:
            payload_part[key] = value
    return payload_part, settings_part


def _merge(model, partial: Mapping[str, Any]):
    # Fusion superficielle : les structures imbriquées sont remplacées, pas fusionnées
    merged = model.model_dump(by_alias=True)
    fields = type(model).model_fields
    for key, value in partial.items():
        merged[to_camel(key) if key in fields else key] = value
    return type(model).model_validate(merged)


def update_block(document: Sequence[ContentBlock], block_id: str, partial: Mapping[str, Any]) -> BlockDocument:
    """
    Fusionne `partial` dans le payload du bloc `block_id` (id et type conservés).

    Les clés de LayoutSettings éventuellement présentes sont appliquées aux
    réglages ; "id" / "type" sont ignorés.
    """
    index = find_index(document, block_id)
    if index is None:
        return list(document)

    block = document[index]
    payload_part, settings_part = _split_partial(partial)
    updated = block.model_copy(update={
        "payload": _merge(block.payload, payload_part) if payload_part else block.payload,
        "settings": _merge(block.settings, settings_part) if settings_part else block.settings,
    })

    blocks = list(document)
    blocks[index] = updated
    return blocks


def update_settings(document: Sequence[ContentBlock], block_id: str, partial: Mapping[str, Any]) -> BlockDocument:
    """Fusionne `partial` dans les LayoutSettings du bloc `block_id`."""
    index = find_index(document, block_id)
    if index is None:
        return list(document)

    block = document[index]
    settings_part = {k: v for k, v in partial.items() if k in _SETTING_KEYS}
    blocks = list(document)
    blocks[index] = block.model_copy(update={"settings": _merge(block.settings, settings_part)})
    return blocks


def remove_block(document: Sequence[ContentBlock], block_id: str) -> BlockDocument:
    return [b for b in document if b.id != block_id]


def move_to(document: Sequence[ContentBlock], from_index: int, to_index: int) -> BlockDocument:
    """
    Déplace l'élément `from_index` vers `to_index` (sémantique arrayMove).

    `from_index` hors bornes → no-op ; `to_index` est ramené dans [0, len - 1].
    """
    blocks = list(document)
    if not 0 <= from_index < len(blocks):
        return blocks
    to_index = min(max(to_index, 0), len(blocks) - 1)
    if to_index == from_index:
        return blocks
    blocks.insert(to_index, blocks.pop(from_index))
    return blocks


def move_up(document: Sequence[ContentBlock], block_id: str) -> BlockDocument:
    index = find_index(document, block_id)
    if index is None or index == 0:
        return list(document)
    return move_to(document, index, index - 1)


def move_down(document: Sequence[ContentBlock], block_id: str) -> BlockDocument:
    index = find_index(document, block_id)
    if index is None or index == len(document) - 1:
        return list(document)
    return move_to(document, index, index + 1)


def move_block(document: Sequence[ContentBlock], active_id: str, over_id: Optional[str]) -> BlockDocument:
    """
    Fin d'un glisser-déposer : le bloc `active_id` prend la place de `over_id`.

    Cible absente, identique ou inconnue → dépôt annulé, document inchangé.
    """
    if over_id is None or active_id == over_id:
        return list(document)
    old_index = find_index(document, active_id)
    new_index = find_index(document, over_id)
    if old_index is None or new_index is None:
        return list(document)
    return move_to(document, old_index, new_index)


def duplicate_in_document(document: Sequence[ContentBlock], block_id: str) -> BlockDocument:
    """Insère une copie du bloc juste après l'original."""
    index = find_index(document, block_id)
    if index is None:
        return list(document)
    blocks = list(document)
    blocks.insert(index + 1, duplicate_block(document[index]))
    return blocks
