"""
Rich text — document structuré opaque (format TipTap/ProseMirror).

Le contenu du document n'est jamais interprété ici : seules la forme minimale
{"type": "doc", "content": [...]} et la migration des anciens champs texte
(chaîne brute → document à un paragraphe) relèvent du coeur.
"""
from typing import Any, Dict


def empty_doc() -> Dict[str, Any]:
    """Document vide (aucun paragraphe)."""
    return {"type": "doc", "content": []}


def blank_paragraph_doc() -> Dict[str, Any]:
    """Document avec un paragraphe vide — état initial de l'éditeur."""
    return {"type": "doc", "content": [{"type": "paragraph"}]}


def paragraph_doc(text: str) -> Dict[str, Any]:
    """Document à un seul paragraphe contenant `text` comme unique run."""
    return {
        "type": "doc",
        "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": text}]},
        ],
    }


def migrate_rich_text(value: Any) -> Dict[str, Any]:
    """
    Migre un champ rich text hérité.

    - chaîne non vide → document à un paragraphe
    - objet (dict)    → inchangé
    - absent/None/"" → document vide

    Idempotente : migrate_rich_text(migrate_rich_text(x)) == migrate_rich_text(x).
    """
    if isinstance(value, dict):
        return value
    if isinstance(value, str) and value:
        return paragraph_doc(value)
    return empty_doc()
