"""
Migrations par type de bloc — appliquées au parse, sur le dict brut.

Toutes les fonctions sont idempotentes et ne modifient pas leur argument.
Une valeur de forme inattendue est laissée telle quelle : la validation
pydantic qui suit décidera si le bloc est récupérable.
"""
from typing import Any, Dict

from .form_presets import FORM_PRESET_NAMES, merge_fields_with_preset

DEFAULT_TABLE_WIDTH = 2


def default_headers(width: int) -> list:
    return [f"Kolumn {i}" for i in range(1, width + 1)]


def migrate_table(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalise headers/rows d'un simpleTable.

    headers absents → "Kolumn 1..n" (n = max(2, ligne la plus large))
    rows absentes   → une ligne vide de la largeur des headers
    lignes courtes  → complétées par "" (jamais tronquées)
    """
    headers = data.get("headers")
    rows = data.get("rows")
    if headers is not None and not isinstance(headers, list):
        return data
    if rows is not None and not isinstance(rows, list):
        return data

    if headers is None:
        widest = max((len(r) for r in rows or [] if isinstance(r, list)), default=0)
        headers = default_headers(max(DEFAULT_TABLE_WIDTH, widest))
    width = len(headers)

    if rows is None:
        rows = [[""] * width] if width else []
    else:
        rows = [
            r + [""] * (width - len(r)) if isinstance(r, list) and len(r) < width else r
            for r in rows
        ]

    return {**data, "headers": headers, "rows": rows}


def migrate_contact_form(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Migre un contactForm hérité.

    preset absent → ancien `formType` s'il est valide, sinon "contact"
    fields absents ou partiels → complétés depuis le preset
    """
    preset = data.get("preset")
    if preset not in FORM_PRESET_NAMES:
        legacy = data.get("formType", data.get("form_type"))
        preset = legacy if legacy in FORM_PRESET_NAMES else "contact"

    fields = data.get("fields")
    if fields is not None and not isinstance(fields, list):
        return {**data, "preset": preset}
    return {**data, "preset": preset, "fields": merge_fields_with_preset(fields, preset)}
