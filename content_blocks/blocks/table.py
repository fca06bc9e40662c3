"""Bloc simpleTable — en-têtes + matrice de cellules texte."""
from typing import Any, List

from pydantic import Field, model_validator

from ..core.fields import ItemList, Text
from ..core.migrations import default_headers, migrate_table
from .base import BlockPayload


class SimpleTablePayload(BlockPayload):
    title: Text = ""
    headers: ItemList[Text] = Field(default_factory=lambda: default_headers(2))
    rows: ItemList[List[Text]] = Field(default_factory=lambda: [["", ""]])
    striped: bool = True

    @model_validator(mode="before")
    @classmethod
    def _normalize_grid(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return migrate_table(data)
        return data
