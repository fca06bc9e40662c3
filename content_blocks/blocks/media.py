"""Blocs média — vidéo, galerie, image seule, carte."""
from pydantic import Field

from ..core.fields import Columns, ModelList, OptionalText, Text, choice
from .base import BlockModel, BlockPayload


class VideoEmbedPayload(BlockPayload):
    title: Text = ""
    subtitle: Text = ""
    video_url: Text = ""
    thumbnail: OptionalText = None
    thumbnail_alt: OptionalText = None


class GalleryImage(BlockModel):
    url: Text = ""
    alt: Text = ""
    caption: OptionalText = None


class ImageGalleryPayload(BlockPayload):
    title: Text = ""
    images: ModelList[GalleryImage] = Field(default_factory=list)
    columns: Columns = 3
    lightbox: bool = False


class SingleImagePayload(BlockPayload):
    url: Text = ""
    alt: OptionalText = None
    caption: OptionalText = None
    size: choice("small", "medium", "large", "full", default="large") = "large"


class MapPayload(BlockPayload):
    title: Text = ""
    address: Text = ""
    # Stockholm
    lat: float = 59.3293
    lng: float = 18.0686
    zoom: int = 14
