"""
Presets du bloc contactForm — champs activés/requis, textes par défaut.

Les dicts manipulés ici sont au format persisté (clés camelCase) : ils
servent aussi bien à la création d'un bloc qu'à la migration au parse.
"""
import copy
from typing import Any, Dict, List, Optional

FORM_PRESET_NAMES = ("contact", "quote", "callback", "newsletter")
CATEGORY_MODES = ("system", "custom", "hidden")

FORM_FIELD_ORDER = (
    "name",
    "email",
    "phone",
    "company",
    "orgNumber",
    "category",
    "message",
    "marketingConsent",
)

FORM_FIELD_DEFAULTS: Dict[str, Dict[str, str]] = {
    "name":             {"label": "Namn",                       "placeholder": "Ditt namn"},
    "email":            {"label": "E-postadress",               "placeholder": "din@email.se"},
    "phone":            {"label": "Telefon",                    "placeholder": "070-123 45 67"},
    "company":          {"label": "Företag",                    "placeholder": "Företagsnamn"},
    "orgNumber":        {"label": "Organisationsnummer",        "placeholder": "XXXXXX-XXXX"},
    "category":         {"label": "Vad gäller din förfrågan?",  "placeholder": "Välj område"},
    "message":          {"label": "Meddelande",                 "placeholder": "Ditt meddelande..."},
    "marketingConsent": {
        "label": "Jag godkänner att ta emot information och erbjudanden via e-post",
        "placeholder": "",
    },
}


def _f(field_id: str, enabled: bool, required: bool, **extra) -> Dict[str, Any]:
    return {"id": field_id, "enabled": enabled, "required": required, **extra}


FORM_PRESETS: Dict[str, Dict[str, Any]] = {
    "contact": {
        "title": "Kontakta oss",
        "subtitle": "Vi återkommer så snart vi kan",
        "fields": [
            _f("name", True, True),
            _f("email", True, True),
            _f("phone", True, False),
            _f("company", True, False),
            _f("orgNumber", False, False),
            _f("category", True, False),
            _f("message", True, False),
            _f("marketingConsent", True, False),
        ],
        "categoryMode": "system",
        "submitButtonText": "Skicka meddelande",
        "successMessage": "Tack för ditt meddelande! Vi återkommer så snart vi kan.",
    },
    "quote": {
        "title": "Begär offert",
        "subtitle": "Beskriv ditt behov så återkommer vi med pris",
        "fields": [
            _f("name", True, True),
            _f("email", True, True),
            _f("phone", True, True),
            _f("company", True, True),
            _f("orgNumber", True, False),
            _f("category", True, True),
            _f(
                "message", True, True,
                label="Beskriv ditt behov",
                placeholder="Berätta om ert behov, antal deltagare, önskat datum etc.",
            ),
            _f("marketingConsent", True, False),
        ],
        "categoryMode": "system",
        "submitButtonText": "Skicka offertförfrågan",
        "successMessage": "Tack! Vi skickar en offert till dig inom kort.",
    },
    "callback": {
        "title": "Boka återringning",
        "subtitle": "Lämna ditt nummer så ringer vi upp dig",
        "fields": [
            _f("name", True, True),
            _f("email", False, False),
            _f("phone", True, True),
            _f("company", True, False),
            _f("orgNumber", False, False),
            _f("category", True, False),
            _f("message", False, False),
            _f("marketingConsent", False, False),
        ],
        "categoryMode": "hidden",
        "submitButtonText": "Ring mig",
        "successMessage": "Tack! Vi ringer dig så snart vi kan.",
    },
    "newsletter": {
        "title": "Prenumerera på nyhetsbrev",
        "subtitle": "Få nyheter, tips och erbjudanden direkt i din inkorg",
        "fields": [
            _f("name", False, False),
            _f("email", True, True),
            _f("phone", False, False),
            _f("company", False, False),
            _f("orgNumber", False, False),
            _f("category", False, False),
            _f("message", False, False),
            _f(
                "marketingConsent", True, True,
                label="Jag godkänner att ta emot nyhetsbrev och marknadskommunikation",
            ),
        ],
        "categoryMode": "hidden",
        "submitButtonText": "Prenumerera",
        "successMessage": "Tack för din prenumeration! Kolla din inkorg för bekräftelse.",
    },
}

FORM_PRESET_LABELS = {
    "contact": "Kontaktformulär",
    "quote": "Offertförfrågan",
    "callback": "Återringning",
    "newsletter": "Nyhetsbrev",
}


def get_preset_config(preset: str) -> Dict[str, Any]:
    """Configuration complète d'un preset (copie profonde)."""
    return copy.deepcopy(FORM_PRESETS[preset])


def create_block_from_preset(preset: str) -> Dict[str, Any]:
    """Payload contactForm complet (clés persistées) pour un preset."""
    config = FORM_PRESETS[preset]
    return {
        "preset": preset,
        "title": config["title"],
        "subtitle": config["subtitle"],
        "fields": [dict(f) for f in config["fields"]],
        "categoryMode": config["categoryMode"],
        "submitButtonText": config["submitButtonText"],
        "successMessage": config["successMessage"],
    }


def _is_field_id(value: Any) -> bool:
    return isinstance(value, str) and value in FORM_FIELD_ORDER


def merge_fields_with_preset(custom_fields: Optional[List[Dict[str, Any]]], preset: str) -> List[Dict[str, Any]]:
    """
    Complète une configuration de champs avec celle du preset.

    Les champs personnalisés sont conservés, les champs manquants repris du
    preset, l'ordre suit celui du preset. Les entrées sans id connu sont
    ignorées.
    """
    preset_fields = FORM_PRESETS[preset]["fields"]
    if not custom_fields:
        return [dict(f) for f in preset_fields]

    custom_by_id = {
        f["id"]: f for f in custom_fields if isinstance(f, dict) and _is_field_id(f.get("id"))
    }
    return [dict(custom_by_id.get(pf["id"], pf)) for pf in preset_fields]


def get_field_with_defaults(field: Dict[str, Any]) -> Dict[str, Any]:
    """Champ avec label/placeholder par défaut si non renseignés."""
    defaults = FORM_FIELD_DEFAULTS[field["id"]]
    return {
        **field,
        "label": field.get("label") or defaults["label"],
        "placeholder": field.get("placeholder") or defaults["placeholder"],
    }


def has_customized_fields(fields: Optional[List[Dict[str, Any]]], preset: str) -> bool:
    """True si la configuration diffère du preset (activation, obligation, textes)."""
    if not fields:
        return False

    preset_by_id = {f["id"]: f for f in FORM_PRESETS[preset]["fields"]}
    for field in fields:
        if not isinstance(field, dict) or not _is_field_id(field.get("id")):
            continue
        preset_field = preset_by_id.get(field["id"])
        if preset_field is None:
            continue
        defaults = FORM_FIELD_DEFAULTS[field["id"]]
        if (
            field.get("enabled") != preset_field["enabled"]
            or field.get("required") != preset_field["required"]
            or (field.get("label") and field["label"] != defaults["label"])
            or (field.get("placeholder") and field["placeholder"] != defaults["placeholder"])
        ):
            return True
    return False


def get_enabled_fields(fields: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Champs activés, complétés avec leurs textes par défaut."""
    return [get_field_with_defaults(f) for f in fields if f.get("enabled")]
