"""Bloc Stats — chiffres clés."""
from pydantic import Field

from ..core.fields import ModelList, OptionalText, Text
from .base import BlockModel, BlockPayload


class StatItem(BlockModel):
    number: Text = ""
    suffix: OptionalText = None
    label: Text = ""


class StatsPayload(BlockPayload):
    title: Text = ""
    stats: ModelList[StatItem] = Field(default_factory=list)
