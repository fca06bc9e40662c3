"""Blocs avancés — comparaison, chronologie, HTML libre."""
from pydantic import Field

from ..core.fields import ItemList, ModelList, OptionalText, RichText, Text
from ..core.richtext import empty_doc
from .base import BlockModel, BlockPayload


class ComparisonItem(BlockModel):
    name: Text = ""
    features: ItemList[Text] = Field(default_factory=list)
    price: OptionalText = None
    cta_text: OptionalText = None
    cta_link: OptionalText = None
    highlighted: bool = False


class ComparisonPayload(BlockPayload):
    title: Text = ""
    items: ModelList[ComparisonItem] = Field(default_factory=list)


class TimelineItem(BlockModel):
    date: Text = ""
    title: Text = ""
    description: RichText = Field(default_factory=empty_doc)


class TimelinePayload(BlockPayload):
    title: Text = ""
    items: ModelList[TimelineItem] = Field(default_factory=list)


class HTMLEmbedPayload(BlockPayload):
    code: Text = ""
    sandboxed: bool = True
