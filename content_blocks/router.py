"""
Router FastAPI — endpoints du modèle de blocs.

GET  /blocks/catalog            → définitions (filtrées par contexte/recherche) + JSON schemas
GET  /blocks/definitions/{kind} → une définition
POST /blocks/new                → {kind, context?} → bloc neuf sérialisé
POST /blocks/parse              → JSON brut → {blocks, diagnostics}
POST /blocks/validate           → JSON brut → {valid, diagnostics}
GET  /blocks/form-presets       → presets du formulaire de contact (libellé + payload)
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import BLOCKS_ROUTER_PREFIX
from .core.form_presets import FORM_PRESET_LABELS, FORM_PRESET_NAMES, create_block_from_preset
from .policy import allowed_kinds_for, filter_definitions, group_by_category, is_kind_allowed
from .registry import BlockDefinition, create_block, get_block_definition
from .validation import block_to_json, blocks_to_json, parse_blocks_with_report

router = APIRouter(prefix=BLOCKS_ROUTER_PREFIX, tags=["content_blocks"])


class NewBlockRequest(BaseModel):
    kind: str
    context: Optional[str] = None


def _definition_json(definition: BlockDefinition, with_schema: bool = True) -> dict:
    data = {
        "type":        definition.kind,
        "label":       definition.label,
        "labelSv":     definition.label_sv,
        "description": definition.description,
        "icon":        definition.icon,
        "category":    definition.category,
    }
    if with_schema:
        data["schema"] = definition.payload_model.model_json_schema(by_alias=True)
    return data


def _allowed_or_400(context: Optional[str]):
    try:
        return allowed_kinds_for(context)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/catalog", summary="Liste les blocs disponibles, groupés par catégorie")
def catalog(context: Optional[str] = None, q: Optional[str] = None) -> dict:
    allowed = _allowed_or_400(context)
    groups = group_by_category(filter_definitions(allowed, q))
    return {
        "categories": [
            {
                "id":     category.id,
                "label":  category.label,
                "icon":   category.icon,
                "blocks": [_definition_json(d) for d in definitions],
            }
            for category, definitions in groups
        ],
    }


@router.get("/definitions/{kind}", summary="Définition d'un type de bloc")
def definition(kind: str):
    found = get_block_definition(kind)
    if found is None:
        return JSONResponse({"error": f"Type de bloc '{kind}' inconnu"}, status_code=404)
    return _definition_json(found)


@router.post("/new", summary="Crée un bloc avec le payload par défaut du type")
def new_block(request: NewBlockRequest) -> dict:
    if get_block_definition(request.kind) is None:
        raise HTTPException(status_code=404, detail=f"Type de bloc '{request.kind}' inconnu")
    allowed = _allowed_or_400(request.context)
    if not is_kind_allowed(request.kind, allowed):
        raise HTTPException(status_code=403, detail=f"Type '{request.kind}' non autorisé ({request.context})")
    return block_to_json(create_block(request.kind))


@router.post("/parse", summary="Normalise un tableau de blocs persisté")
def parse(raw: Any = Body(default=None)) -> dict:
    result = parse_blocks_with_report(raw)
    return {
        "blocks":      blocks_to_json(result.blocks),
        "diagnostics": [d.model_dump() for d in result.diagnostics],
    }


@router.post("/validate", summary="Valide un tableau de blocs sans le modifier")
def validate(raw: Any = Body(default=None)) -> dict:
    result = parse_blocks_with_report(raw)
    return {
        "valid":       isinstance(raw, list) and not result.diagnostics,
        "diagnostics": [d.model_dump() for d in result.diagnostics],
    }


@router.get("/form-presets", summary="Presets du formulaire de contact")
def form_presets() -> dict:
    return {
        "presets": [
            {"label": FORM_PRESET_LABELS[name], **create_block_from_preset(name)}
            for name in FORM_PRESET_NAMES
        ],
    }
