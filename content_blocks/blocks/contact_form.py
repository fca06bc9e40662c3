"""Bloc contactForm — formulaire configurable à partir d'un preset."""
from typing import Any, Literal

from pydantic import Field, model_validator

from ..core.fields import ModelList, OptionalText, Text, choice
from ..core.form_presets import CATEGORY_MODES, FORM_FIELD_ORDER, FORM_PRESET_NAMES
from ..core.migrations import migrate_contact_form
from .base import BlockModel, BlockPayload


class FormFieldConfig(BlockModel):
    id: Literal[FORM_FIELD_ORDER]
    enabled: bool = True
    required: bool = False
    label: OptionalText = None
    placeholder: OptionalText = None


class CategoryOption(BlockModel):
    value: Text = ""
    label: Text = ""


class ContactFormPayload(BlockPayload):
    template_id: OptionalText = None
    title: Text = ""
    subtitle: Text = ""
    preset: choice(*FORM_PRESET_NAMES, default="contact") = "contact"
    # Ancien champ, conservé pour compatibilité
    form_type: OptionalText = None
    fields: ModelList[FormFieldConfig] = Field(default_factory=list)
    category_mode: choice(*CATEGORY_MODES, default="system") = "system"
    category_label: OptionalText = None
    custom_categories: ModelList[CategoryOption] = Field(default_factory=list)
    category_id: OptionalText = None
    submit_button_text: OptionalText = None
    success_message: OptionalText = None
    privacy_link_text: OptionalText = None

    @model_validator(mode="before")
    @classmethod
    def _migrate_legacy_form(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return migrate_contact_form(data)
        return data
