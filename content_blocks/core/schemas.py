"""
Schémas partagés du modèle de blocs.

BlockKind    : discriminant (clé "type" dans le JSON persisté)
LayoutSettings : réglages de mise en page communs à tous les blocs
                 (background, paddingTop, paddingBottom, maxWidth, anchor)
"""
from typing import Annotated, Any, Literal, Optional, get_args

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .fields import choice


BlockKind = Literal[
    "hero",
    "heroWithForm",
    "richText",
    "textImage",
    "featureList",
    "featureCards",
    "faq",
    "cta",
    "ctaWithImage",
    "teamGrid",
    "logoGrid",
    "stats",
    "testimonials",
    "testimonialSingle",
    "serviceCards",
    "productCards",
    "contactForm",
    "videoEmbed",
    "imageGallery",
    "accordion",
    "tabs",
    "comparison",
    "timeline",
    "map",
    "htmlEmbed",
    "spacer",
    "divider",
    # Blocs simplifiés (services & blog)
    "singleImage",
    "simpleTable",
    "quote",
    "inlineCTA",
]

BLOCK_KINDS: tuple = get_args(BlockKind)

BlockCategory = Literal["content", "cta", "social", "media", "advanced", "layout"]


# ── LayoutSettings ───────────────────────────────────────────────────────────

def _anchor_or_none(value: Any) -> Optional[str]:
    # Ancre libre, non validée comme fragment d'URL
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


Spacing = choice("none", "sm", "md", "lg", default="md")


class LayoutSettings(BaseModel):
    """Réglages de mise en page (indépendants du type de bloc)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    background: choice("white", "gray", "primary", "dark", default="white") = "white"
    padding_top: Spacing = "md"
    padding_bottom: Spacing = "md"
    max_width: choice("xl", "full", default="xl") = "xl"
    anchor: Annotated[Optional[str], BeforeValidator(_anchor_or_none)] = Field(default=None)


# Clés persistées (à plat sur le bloc) qui relèvent des LayoutSettings
LAYOUT_SETTING_KEYS: tuple = tuple(
    to_camel(name) for name in LayoutSettings.model_fields
)
LAYOUT_SETTING_NAMES: tuple = tuple(LayoutSettings.model_fields)
