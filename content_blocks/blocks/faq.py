"""Bloc FAQ — questions/réponses (génère le schema FAQPage côté site)."""
from pydantic import Field

from ..core.fields import ModelList, Text
from .base import BlockModel, BlockPayload


class FAQItem(BlockModel):
    question: Text = ""
    answer: Text = ""


class FAQPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    items: ModelList[FAQItem] = Field(default_factory=list)
