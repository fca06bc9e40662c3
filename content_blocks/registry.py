"""
Registry des blocs — catalogue statique type → définition + factory.

Construit une fois à l'import, jamais modifié ensuite (MappingProxyType).

    >>> block = create_block("faq")
    >>> copy = duplicate_block(block)
    >>> get_block_definition("inconnu") is None
    True
"""
import uuid
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict

from .blocks import (
    BlockPayload, ContentBlock,
    HeroPayload, HeroWithFormPayload,
    RichTextPayload, TextImagePayload, FeatureListPayload, FeatureCardsPayload,
    AccordionPayload, TabsPayload, FAQPayload,
    CTAPayload, CTAWithImagePayload, InlineCTAPayload, ContactFormPayload,
    TestimonialsPayload, TestimonialSinglePayload, QuotePayload, StatsPayload,
    TeamGridPayload, LogoGridPayload, ServiceCardsPayload, ProductCardsPayload,
    VideoEmbedPayload, ImageGalleryPayload, SingleImagePayload, MapPayload,
    ComparisonPayload, TimelinePayload, HTMLEmbedPayload, SimpleTablePayload,
    SpacerPayload, DividerPayload,
)
from .core.form_presets import create_block_from_preset
from .core.richtext import blank_paragraph_doc, paragraph_doc
from .core.schemas import BlockCategory, BlockKind


class BlockDefinition(BaseModel):
    """Entrée du registry (non persistée)."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    label: str
    label_sv: str
    description: str
    icon: str                      # nom d'icône Lucide
    category: BlockCategory
    payload_model: Type[BlockPayload]
    default_payload: Callable[[], Dict[str, Any]]


class BlockCategoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: BlockCategory
    label: str
    icon: str


BLOCK_CATEGORIES: tuple = (
    BlockCategoryInfo(id="content",  label="Innehåll",       icon="FileText"),
    BlockCategoryInfo(id="cta",      label="Call to Action", icon="MousePointerClick"),
    BlockCategoryInfo(id="social",   label="Social Proof",   icon="Users"),
    BlockCategoryInfo(id="media",    label="Media",          icon="Image"),
    BlockCategoryInfo(id="advanced", label="Avancerat",      icon="Settings"),
    BlockCategoryInfo(id="layout",   label="Layout",         icon="Layout"),
)


def _feature(icon: str, title: str) -> Dict[str, Any]:
    return {"icon": icon, "title": title, "description": paragraph_doc("Beskrivning")}


def _define(kind, label, label_sv, description, icon, category, payload_model, default_payload):
    return BlockDefinition(
        kind=kind, label=label, label_sv=label_sv, description=description,
        icon=icon, category=category, payload_model=payload_model,
        default_payload=default_payload,
    )


BLOCK_DEFINITIONS: tuple = (
    # ── Contenu ──────────────────────────────────────────────────────────────
    _define("hero", "Hero", "Hero", "Large header with image, title and CTA",
            "Layout", "content", HeroPayload,
            lambda: {"title": "Rubrik", "subtitle": "", "overlay": True, "overlayOpacity": 0.5}),
    _define("heroWithForm", "Hero with Form", "Hero med formulär", "Hero section with embedded lead form",
            "LayoutTemplate", "content", HeroWithFormPayload,
            lambda: {"title": "Rubrik", "subtitle": "", "formTitle": "Kontakta oss"}),
    _define("richText", "Rich Text", "Textblock", "Free-form text content with formatting",
            "FileText", "content", RichTextPayload,
            lambda: {"content": blank_paragraph_doc()}),
    _define("textImage", "Text + Image", "Text och bild", "Two-column layout with text and image",
            "Columns", "content", TextImagePayload,
            lambda: {"title": "", "text": "", "image": "", "imagePosition": "right"}),
    _define("featureList", "Feature List", "Funktionslista", "Grid of features with icons",
            "Grid3X3", "content", FeatureListPayload,
            lambda: {
                "title": "", "subtitle": "", "columns": 3,
                "features": [_feature("Check", f"Funktion {i}") for i in (1, 2, 3)],
            }),
    _define("featureCards", "Feature Cards", "Funktionskort", "Clickable cards with icons and links",
            "LayoutGrid", "content", FeatureCardsPayload,
            lambda: {"title": "", "subtitle": "", "cards": [{**_feature("ArrowRight", "Kort 1"), "link": ""}]}),
    _define("faq", "FAQ", "Vanliga frågor", "Accordion FAQ section (generates schema)",
            "HelpCircle", "content", FAQPayload,
            lambda: {
                "title": "Vanliga frågor", "subtitle": "",
                "items": [
                    {"question": "Fråga 1?", "answer": "Svar 1"},
                    {"question": "Fråga 2?", "answer": "Svar 2"},
                ],
            }),
    _define("accordion", "Accordion", "Dragspel", "Expandable content sections",
            "ChevronDown", "content", AccordionPayload,
            lambda: {"title": "", "items": [{"title": "Sektion 1", "content": "Innehåll"}]}),
    _define("tabs", "Tabs", "Flikar", "Tabbed content sections",
            "PanelTop", "content", TabsPayload,
            lambda: {
                "title": "",
                "tabs": [{"label": "Flik 1", "content": "Innehåll"}, {"label": "Flik 2", "content": "Innehåll"}],
            }),

    # ── CTA ──────────────────────────────────────────────────────────────────
    _define("cta", "CTA Banner", "CTA-banner", "Call to action banner",
            "MousePointerClick", "cta", CTAPayload,
            lambda: {
                "title": "Redo att komma igång?", "subtitle": "",
                "ctaText": "Kontakta oss", "ctaLink": "/kontakt", "style": "primary",
            }),
    _define("ctaWithImage", "CTA with Image", "CTA med bild", "Call to action with side image",
            "PanelLeftInactive", "cta", CTAWithImagePayload,
            lambda: {
                "title": "Rubrik", "subtitle": "", "image": "", "imagePosition": "right",
                "ctaText": "Läs mer", "ctaLink": "",
            }),
    _define("contactForm", "Contact Form", "Kontaktformulär", "Embedded contact/quote form",
            "Send", "cta", ContactFormPayload,
            lambda: {**create_block_from_preset("contact"), "formType": "contact"}),

    # ── Preuve sociale ───────────────────────────────────────────────────────
    _define("testimonials", "Testimonials", "Kundomdömen", "Customer testimonial carousel or grid",
            "Quote", "social", TestimonialsPayload,
            lambda: {"title": "Vad våra kunder säger", "subtitle": "", "testimonialIds": [], "layout": "carousel"}),
    _define("testimonialSingle", "Single Testimonial", "Enskilt omdöme", "Highlight a single testimonial",
            "MessageSquareQuote", "social", TestimonialSinglePayload,
            lambda: {"testimonialId": "", "style": "card"}),
    _define("stats", "Stats", "Statistik", "Number statistics showcase",
            "TrendingUp", "social", StatsPayload,
            lambda: {
                "title": "",
                "stats": [
                    {"number": "500", "suffix": "+", "label": "Nöjda kunder"},
                    {"number": "10", "suffix": "+", "label": "Års erfarenhet"},
                    {"number": "98", "suffix": "%", "label": "Kundnöjdhet"},
                ],
            }),
    _define("logoGrid", "Logo Grid", "Logotyper", "Client or partner logos",
            "Building", "social", LogoGridPayload,
            lambda: {"title": "Våra kunder", "subtitle": "", "logos": [], "grayscale": True}),
    _define("teamGrid", "Team Grid", "Teammedlemmar", "Team member grid",
            "Users", "social", TeamGridPayload,
            lambda: {"title": "Vårt team", "subtitle": "", "members": []}),

    # ── Contenu dynamique ────────────────────────────────────────────────────
    _define("serviceCards", "Service Cards", "Tjänstekort", "Display services as cards",
            "Briefcase", "content", ServiceCardsPayload,
            lambda: {"title": "Våra tjänster", "subtitle": "", "columns": 3}),
    _define("productCards", "Product Cards", "Produktkort", "Display products as cards",
            "Package", "content", ProductCardsPayload,
            lambda: {"title": "Våra produkter", "subtitle": "", "columns": 4, "showPrice": True}),

    # ── Média ────────────────────────────────────────────────────────────────
    _define("videoEmbed", "Video", "Video", "YouTube or Vimeo embed",
            "Play", "media", VideoEmbedPayload,
            lambda: {"title": "", "subtitle": "", "videoUrl": ""}),
    _define("imageGallery", "Image Gallery", "Bildgalleri", "Image grid with lightbox",
            "Images", "media", ImageGalleryPayload,
            lambda: {"title": "", "images": [], "columns": 3, "lightbox": True}),
    _define("map", "Map", "Karta", "Google Maps embed",
            "MapPin", "media", MapPayload,
            lambda: {"title": "", "address": "", "lat": 59.3293, "lng": 18.0686, "zoom": 14}),

    # ── Avancé ───────────────────────────────────────────────────────────────
    _define("comparison", "Comparison", "Jämförelse", "Pricing or feature comparison table",
            "Table", "advanced", ComparisonPayload,
            lambda: {"title": "", "items": []}),
    _define("timeline", "Timeline", "Tidslinje", "Chronological timeline",
            "Clock", "advanced", TimelinePayload,
            lambda: {"title": "", "items": []}),
    _define("htmlEmbed", "HTML Embed", "HTML-kod", "Custom HTML (admin only)",
            "Code", "advanced", HTMLEmbedPayload,
            lambda: {"code": "", "sandboxed": True}),

    # ── Layout ───────────────────────────────────────────────────────────────
    _define("spacer", "Spacer", "Mellanrum", "Vertical spacing",
            "SeparatorHorizontal", "layout", SpacerPayload,
            lambda: {"height": "md"}),
    _define("divider", "Divider", "Avdelare", "Section divider line",
            "Minus", "layout", DividerPayload,
            lambda: {"style": "line"}),

    # ── Blocs simplifiés (services & blog) ───────────────────────────────────
    _define("singleImage", "Single Image", "Enstaka bild", "Single image with optional caption",
            "Image", "media", SingleImagePayload,
            lambda: {"url": "", "alt": "", "caption": "", "size": "large"}),
    _define("simpleTable", "Simple Table", "Enkel tabell", "Basic data table",
            "Table2", "content", SimpleTablePayload,
            lambda: {"title": "", "striped": True}),
    _define("quote", "Quote", "Citat", "Blockquote with attribution",
            "Quote", "content", QuotePayload,
            lambda: {"text": "", "author": "", "role": ""}),
    _define("inlineCTA", "Inline CTA", "Inline CTA-knapp", "Simple call-to-action button",
            "MousePointerClick", "cta", InlineCTAPayload,
            lambda: {"text": "Läs mer", "link": "", "style": "primary", "align": "left"}),
)

_REGISTRY: Mapping[str, BlockDefinition] = MappingProxyType({d.kind: d for d in BLOCK_DEFINITIONS})


def get_block_definition(kind: Any) -> Optional[BlockDefinition]:
    """Définition du type, ou None s'il est inconnu (ne lève jamais)."""
    if not isinstance(kind, str):
        return None
    return _REGISTRY.get(kind)


def get_blocks_by_category(category: str) -> List[BlockDefinition]:
    return [d for d in BLOCK_DEFINITIONS if d.category == category]


def new_block_id() -> str:
    return str(uuid.uuid4())


def create_block(kind: str) -> ContentBlock:
    """Nouveau bloc : id frais, type donné, payload par défaut du type."""
    definition = get_block_definition(kind)
    if definition is None:
        raise ValueError(f"Type de bloc inconnu : {kind!r}. Registry : {list(_REGISTRY)}")

    payload = definition.payload_model.model_validate(definition.default_payload())
    return ContentBlock(id=new_block_id(), kind=definition.kind, payload=payload)


def duplicate_block(block: ContentBlock) -> ContentBlock:
    """Copie structurelle avec un nouvel id ; le payload est copié en profondeur."""
    return ContentBlock(
        id=new_block_id(),
        kind=block.kind,
        payload=block.payload.model_copy(deep=True),
        settings=block.settings,
    )
