"""Blocs preuve sociale — témoignages (liste / unique) et citation."""
from pydantic import Field

from ..core.fields import ItemList, OptionalText, Text, choice
from .base import BlockPayload


class TestimonialsPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    testimonial_ids: ItemList[Text] = Field(default_factory=list)
    layout: choice("carousel", "grid", default="carousel") = "carousel"


class TestimonialSinglePayload(BlockPayload):
    testimonial_id: Text = ""
    style: choice("card", "quote", "featured", default="card") = "card"


class QuotePayload(BlockPayload):
    text: Text = ""
    author: OptionalText = None
    role: OptionalText = None
    image: OptionalText = None
