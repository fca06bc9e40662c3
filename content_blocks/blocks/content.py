"""Blocs de contenu — texte riche, texte + image, listes de fonctionnalités, onglets."""
from pydantic import Field

from ..core.fields import Columns, ModelList, OptionalText, RichText, Text, choice
from ..core.richtext import empty_doc
from .base import BlockModel, BlockPayload


class RichTextPayload(BlockPayload):
    content: RichText = Field(default_factory=empty_doc)


class TextImagePayload(BlockPayload):
    title: Text = ""
    text: Text = ""
    image: Text = ""
    image_alt: OptionalText = None
    image_position: choice("left", "right", default="right") = "right"
    cta_text: OptionalText = None
    cta_link: OptionalText = None


class FeatureItem(BlockModel):
    icon: Text = ""
    title: Text = ""
    description: RichText = Field(default_factory=empty_doc)


class FeatureListPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    columns: Columns = 3
    features: ModelList[FeatureItem] = Field(default_factory=list)


class FeatureCard(BlockModel):
    icon: Text = ""
    title: Text = ""
    description: RichText = Field(default_factory=empty_doc)
    link: OptionalText = None


class FeatureCardsPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    cards: ModelList[FeatureCard] = Field(default_factory=list)


class AccordionItem(BlockModel):
    title: Text = ""
    content: Text = ""


class AccordionPayload(BlockPayload):
    title: Text = ""
    items: ModelList[AccordionItem] = Field(default_factory=list)


class TabItem(BlockModel):
    label: Text = ""
    content: Text = ""


class TabsPayload(BlockPayload):
    title: Text = ""
    tabs: ModelList[TabItem] = Field(default_factory=list)
