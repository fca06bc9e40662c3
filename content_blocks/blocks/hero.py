"""Blocs Hero — en-tête plein écran (image, titre, CTA) et variante avec formulaire."""
from pydantic import Field

from ..core.fields import OptionalText, Opacity, RichText, Text, choice
from ..core.richtext import empty_doc
from .base import BlockPayload


class HeroPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    description: RichText = Field(default_factory=empty_doc)
    image: OptionalText = None
    image_alt: OptionalText = None
    cta_text: OptionalText = None
    cta_link: OptionalText = None
    cta_secondary_text: OptionalText = None
    cta_secondary_link: OptionalText = None
    text_color: choice("light", "dark", default="light") = "light"
    layout: choice(
        "full-bg", "full-bg-left", "side-left", "side-right", "text-top-image-bottom",
        default="full-bg",
    ) = "full-bg"
    overlay: bool = True
    overlay_color: choice("dark", "white", default="dark") = "dark"
    overlay_opacity: Opacity = 0.5


class HeroWithFormPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    image: OptionalText = None
    image_alt: OptionalText = None
    form_id: OptionalText = None
    form_title: OptionalText = None
