"""
Session d'édition d'un document de blocs.

Usage:
    >>> editor = BlockEditor.from_json(raw, allowed_kinds=SIMPLIFIED_BLOCK_KINDS)
    >>> block = editor.add_block("richText")
    >>> editor.move_up(block.id)
    >>> raw = editor.to_json()
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from . import document as ops
from .blocks.base import ContentBlock
from .policy import filter_definitions, group_by_category, is_kind_allowed, out_of_policy_blocks
from .registry import BlockDefinition, create_block
from .validation import ParseDiagnostic, blocks_to_json, parse_blocks_with_report

log = logging.getLogger(__name__)


class BlockEditor:
    """
    Document courant + liste blanche optionnelle + callback de changement.

    Chaque action utilisateur passe par une opération pure de
    content_blocks.document ; `on_change` n'est appelé que si le document a
    réellement changé.
    """

    def __init__(
        self,
        blocks: Optional[Iterable[ContentBlock]] = None,
        allowed_kinds: Optional[Iterable[str]] = None,
        on_change: Optional[Callable[[List[ContentBlock]], None]] = None,
    ):
        """
        Args:
            blocks: Document initial (déjà parsé)
            allowed_kinds: Types proposés à l'insertion (None = tous)
            on_change: Appelé avec le nouveau document après chaque modification
        """
        self._blocks: List[ContentBlock] = list(blocks or [])
        self.allowed_kinds = None if allowed_kinds is None else tuple(allowed_kinds)
        self.on_change = on_change
        self.diagnostics: List[ParseDiagnostic] = []
        self._dragging: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Any, **kwargs) -> "BlockEditor":
        """Ouvre une session depuis le JSON persisté (diagnostics conservés)."""
        result = parse_blocks_with_report(raw)
        editor = cls(result.blocks, **kwargs)
        editor.diagnostics = result.diagnostics
        return editor

    @property
    def blocks(self) -> List[ContentBlock]:
        return list(self._blocks)

    def to_json(self) -> List[Dict[str, Any]]:
        return blocks_to_json(self._blocks)

    def _commit(self, blocks: List[ContentBlock]) -> bool:
        if blocks == self._blocks:
            return False
        self._blocks = blocks
        if self.on_change is not None:
            self.on_change(self.blocks)
        return True

    # ── Picker ───────────────────────────────────────────────────────────────

    def available_definitions(self, search: Optional[str] = None) -> List[BlockDefinition]:
        return filter_definitions(self.allowed_kinds, search)

    def picker_groups(self, search: Optional[str] = None):
        return group_by_category(self.available_definitions(search))

    def flagged_blocks(self) -> List[str]:
        """Blocs existants hors liste blanche (restent éditables)."""
        return out_of_policy_blocks(self._blocks, self.allowed_kinds)

    # ── Actions ──────────────────────────────────────────────────────────────

    def add_block(self, kind: str, index: Optional[int] = None) -> ContentBlock:
        """
        Crée et insère un bloc.

        Args:
            kind: Type de bloc (doit être autorisé dans ce contexte)
            index: Position d'insertion (None ou hors bornes = en fin)

        Returns:
            Le bloc inséré
        """
        if not is_kind_allowed(kind, self.allowed_kinds):
            raise ValueError(f"Type {kind!r} non autorisé dans ce contexte")
        block = create_block(kind)
        self._commit(ops.insert_block(self._blocks, block, index))
        return block

    def update_block(self, block_id: str, data: Mapping[str, Any]) -> bool:
        return self._commit(ops.update_block(self._blocks, block_id, data))

    def update_settings(self, block_id: str, data: Mapping[str, Any]) -> bool:
        return self._commit(ops.update_settings(self._blocks, block_id, data))

    def duplicate_block(self, block_id: str) -> bool:
        return self._commit(ops.duplicate_in_document(self._blocks, block_id))

    def delete_block(self, block_id: str) -> bool:
        return self._commit(ops.remove_block(self._blocks, block_id))

    def move_up(self, block_id: str) -> bool:
        return self._commit(ops.move_up(self._blocks, block_id))

    def move_down(self, block_id: str) -> bool:
        return self._commit(ops.move_down(self._blocks, block_id))

    # ── Glisser-déposer ──────────────────────────────────────────────────────

    def begin_drag(self, block_id: str) -> bool:
        if ops.find_index(self._blocks, block_id) is None:
            return False
        self._dragging = block_id
        return True

    def drop(self, over_id: Optional[str]) -> bool:
        """Termine le geste ; cible invalide → annulation, document inchangé."""
        active_id, self._dragging = self._dragging, None
        if active_id is None:
            return False
        changed = self._commit(ops.move_block(self._blocks, active_id, over_id))
        if not changed:
            log.debug("Dépôt annulé (%s → %s)", active_id, over_id)
        return changed

    def cancel_drag(self) -> None:
        self._dragging = None

    @property
    def dragging(self) -> Optional[str]:
        return self._dragging
