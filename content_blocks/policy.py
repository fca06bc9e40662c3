"""
Politique de restriction des types — liste blanche par contexte d'édition.

La restriction ne concerne que les nouvelles insertions (picker) : un bloc
existant hors politique reste accepté par le parser et reste éditable ; il
peut seulement être signalé via out_of_policy_blocks().
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .blocks.base import ContentBlock
from .config import BLOCKS_SIMPLIFIED_KINDS
from .core.schemas import BLOCK_KINDS
from .registry import BLOCK_CATEGORIES, BLOCK_DEFINITIONS, BlockCategoryInfo, BlockDefinition

log = logging.getLogger(__name__)

DEFAULT_SIMPLIFIED_KINDS: Tuple[str, ...] = (
    "richText",
    "singleImage",
    "videoEmbed",
    "divider",
    "tabs",
    "simpleTable",
    "inlineCTA",
    "quote",
)


def _configured_simplified_kinds() -> Tuple[str, ...]:
    if not BLOCKS_SIMPLIFIED_KINDS:
        return DEFAULT_SIMPLIFIED_KINDS
    unknown = [k for k in BLOCKS_SIMPLIFIED_KINDS if k not in BLOCK_KINDS]
    if unknown:
        log.warning("BLOCKS_SIMPLIFIED_KINDS : types inconnus ignorés %s", unknown)
    return tuple(k for k in BLOCKS_SIMPLIFIED_KINDS if k in BLOCK_KINDS)


SIMPLIFIED_BLOCK_KINDS: Tuple[str, ...] = _configured_simplified_kinds()

# None = tous les types
AUTHORING_CONTEXTS: Dict[str, Optional[Tuple[str, ...]]] = {
    "page": None,
    "campaign": None,
    "product": None,
    "post": SIMPLIFIED_BLOCK_KINDS,
    "service": SIMPLIFIED_BLOCK_KINDS,
}


def allowed_kinds_for(context: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Liste blanche d'un contexte (None = pas de restriction)."""
    if context is None:
        return None
    if context not in AUTHORING_CONTEXTS:
        raise ValueError(f"Contexte inconnu : {context!r}. Contextes : {list(AUTHORING_CONTEXTS)}")
    return AUTHORING_CONTEXTS[context]


def is_kind_allowed(kind: str, allowed_kinds: Optional[Iterable[str]] = None) -> bool:
    if kind not in BLOCK_KINDS:
        return False
    return allowed_kinds is None or kind in allowed_kinds


def filter_definitions(
    allowed_kinds: Optional[Iterable[str]] = None,
    search: Optional[str] = None,
) -> List[BlockDefinition]:
    """Définitions proposées par le picker : liste blanche + recherche texte."""
    allowed = None if allowed_kinds is None else set(allowed_kinds)
    needle = (search or "").strip().lower()

    result = []
    for definition in BLOCK_DEFINITIONS:
        if allowed is not None and definition.kind not in allowed:
            continue
        if needle and not any(
            needle in text.lower()
            for text in (definition.label, definition.label_sv, definition.description)
        ):
            continue
        result.append(definition)
    return result


def group_by_category(
    definitions: Sequence[BlockDefinition],
) -> List[Tuple[BlockCategoryInfo, List[BlockDefinition]]]:
    """Regroupe par catégorie (ordre de BLOCK_CATEGORIES), catégories vides omises."""
    groups = []
    for category in BLOCK_CATEGORIES:
        members = [d for d in definitions if d.category == category.id]
        if members:
            groups.append((category, members))
    return groups


def out_of_policy_blocks(
    document: Sequence[ContentBlock],
    allowed_kinds: Optional[Iterable[str]],
) -> List[str]:
    """Ids des blocs existants dont le type est hors liste blanche."""
    if allowed_kinds is None:
        return []
    allowed = set(allowed_kinds)
    return [b.id for b in document if b.kind not in allowed]
