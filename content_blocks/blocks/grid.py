"""Blocs grille — équipe, logos, cartes services/produits."""
from pydantic import Field

from ..core.fields import Columns, ItemList, ModelList, OptionalText, Text
from .base import BlockModel, BlockPayload


class TeamMember(BlockModel):
    name: Text = ""
    role: Text = ""
    image: OptionalText = None
    image_alt: OptionalText = None
    email: OptionalText = None
    linkedin: OptionalText = None


class TeamGridPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    members: ModelList[TeamMember] = Field(default_factory=list)


class LogoItem(BlockModel):
    image: Text = ""
    alt: Text = ""
    link: OptionalText = None


class LogoGridPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    logos: ModelList[LogoItem] = Field(default_factory=list)
    grayscale: bool = False


class ServiceCardsPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    service_ids: ItemList[Text] = Field(default_factory=list)
    category_id: OptionalText = None
    columns: Columns = 3


class ProductCardsPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    product_ids: ItemList[Text] = Field(default_factory=list)
    category_id: OptionalText = None
    columns: Columns = 3
    show_price: bool = False
