"""Blocs de mise en page — espacement et séparateur."""
from ..core.fields import choice
from .base import BlockPayload


class SpacerPayload(BlockPayload):
    height: choice("sm", "md", "lg", "xl", default="md") = "md"


class DividerPayload(BlockPayload):
    style: choice("line", "dots", "none", default="line") = "line"
