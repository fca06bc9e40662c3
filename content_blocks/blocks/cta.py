"""Blocs CTA — bannière, CTA avec image, bouton inline."""
from ..core.fields import OptionalText, Text, choice
from .base import BlockPayload

ButtonStyle = choice("primary", "secondary", "outline", default="primary")


class CTAPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    cta_text: Text = ""
    cta_link: Text = ""
    style: ButtonStyle = "primary"


class CTAWithImagePayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    image: Text = ""
    image_alt: OptionalText = None
    image_position: choice("left", "right", default="right") = "right"
    cta_text: Text = ""
    cta_link: Text = ""


class InlineCTAPayload(BlockPayload):
    text: Text = ""
    link: Text = ""
    style: ButtonStyle = "primary"
    align: choice("left", "center", "right", default="left") = "left"
