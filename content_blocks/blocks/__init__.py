"""
Blocs — payloads pydantic par famille + ContentBlock.
La correspondance type → payload vit dans le registry (content_blocks.registry).
"""
from .base import BlockModel, BlockPayload, ContentBlock
from .hero import HeroPayload, HeroWithFormPayload
from .content import (
    RichTextPayload, TextImagePayload,
    FeatureListPayload, FeatureItem,
    FeatureCardsPayload, FeatureCard,
    AccordionPayload, AccordionItem,
    TabsPayload, TabItem,
)
from .faq import FAQPayload, FAQItem
from .cta import CTAPayload, CTAWithImagePayload, InlineCTAPayload
from .contact_form import ContactFormPayload, FormFieldConfig, CategoryOption
from .testimonial import TestimonialsPayload, TestimonialSinglePayload, QuotePayload
from .stat import StatsPayload, StatItem
from .grid import (
    TeamGridPayload, TeamMember,
    LogoGridPayload, LogoItem,
    ServiceCardsPayload, ProductCardsPayload,
)
from .media import (
    VideoEmbedPayload, ImageGalleryPayload, GalleryImage,
    SingleImagePayload, MapPayload,
)
from .advanced import ComparisonPayload, ComparisonItem, TimelinePayload, TimelineItem, HTMLEmbedPayload
from .table import SimpleTablePayload
from .layout import SpacerPayload, DividerPayload

__all__ = [
    # Base
    "BlockModel", "BlockPayload", "ContentBlock",
    # Hero
    "HeroPayload", "HeroWithFormPayload",
    # Contenu
    "RichTextPayload", "TextImagePayload",
    "FeatureListPayload", "FeatureItem",
    "FeatureCardsPayload", "FeatureCard",
    "AccordionPayload", "AccordionItem",
    "TabsPayload", "TabItem",
    "FAQPayload", "FAQItem",
    # CTA
    "CTAPayload", "CTAWithImagePayload", "InlineCTAPayload",
    "ContactFormPayload", "FormFieldConfig", "CategoryOption",
    # Preuve sociale
    "TestimonialsPayload", "TestimonialSinglePayload", "QuotePayload",
    "StatsPayload", "StatItem",
    "TeamGridPayload", "TeamMember",
    "LogoGridPayload", "LogoItem",
    "ServiceCardsPayload", "ProductCardsPayload",
    # Média
    "VideoEmbedPayload", "ImageGalleryPayload", "GalleryImage",
    "SingleImagePayload", "MapPayload",
    # Avancé
    "ComparisonPayload", "ComparisonItem", "TimelinePayload", "TimelineItem",
    "HTMLEmbedPayload", "SimpleTablePayload",
    # Layout
    "SpacerPayload", "DividerPayload",
]
