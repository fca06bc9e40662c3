"""
Blocs de base.
Payload (contenu propre au type) et LayoutSettings (communs) séparés.
"""
from typing import Any, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, model_validator
from pydantic.alias_generators import to_camel

from ..core.schemas import BlockKind, LayoutSettings


class BlockModel(BaseModel):
    """
    Base des payloads et sous-éléments.

    Clés persistées en camelCase, attributs Python en snake_case. Les champs
    inconnus sont conservés (extra="allow") pour ne rien perdre d'un schéma
    plus récent lors d'un aller-retour.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    @classmethod
    def declared_keys(cls) -> FrozenSet[str]:
        """Noms Python + clés persistées des champs déclarés."""
        names = set(cls.model_fields)
        return frozenset(names | {to_camel(n) for n in names})

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # null explicite sur un champ déclaré → valeur par défaut du champ
        if isinstance(data, dict):
            declared = cls.declared_keys()
            return {k: v for k, v in data.items() if v is not None or k not in declared}
        return data

    def to_json_dict(self) -> Dict[str, Any]:
        """Dict persisté : clés camelCase, champs déclarés à None omis."""
        data = self.model_dump(by_alias=True)
        declared = self.declared_keys()
        return {k: v for k, v in data.items() if v is not None or k not in declared}


class BlockPayload(BlockModel):
    """Contenu d'un bloc (textes, URLs, sous-éléments)."""
    pass


class ContentBlock(BaseModel):
    """Entrée d'un document : identité + type immuables, payload, réglages."""
    model_config = ConfigDict(frozen=True)

    id: str
    kind: BlockKind
    payload: SerializeAsAny[BlockPayload]
    settings: LayoutSettings = Field(default_factory=LayoutSettings)
