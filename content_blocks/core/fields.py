"""
Primitives de champs — règles de défaut réutilisées par tous les payloads.

Chaque règle est un BeforeValidator pydantic ; les payloads les composent
via les types annotés ci-dessous au lieu de réimplémenter la coalescence
(absent → défaut) type par type.

    Text          : None → "", nombres → str
    OptionalText  : None conservé, nombres → str
    RichText      : chaîne → document à un paragraphe (migration)
    ItemList[T]   : None → []
    ModelList[T]  : None → [], entrées non-objet écartées
    choice(...)   : valeur hors énumération → défaut
    Opacity       : float borné à [0, 1]
"""
import logging
from typing import Annotated, Any, Callable, List, Literal, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator

from ..config import BLOCKS_DIAGNOSTIC_LEVEL
from .richtext import migrate_rich_text

log = logging.getLogger(__name__)

T = TypeVar("T")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def str_or_empty(value: Any) -> Any:
    if value is None:
        return ""
    if _is_number(value):
        return str(value)
    return value


def optional_str(value: Any) -> Any:
    if _is_number(value):
        return str(value)
    return value


def list_or_empty(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, tuple):
        return list(value)
    return value


def model_items_or_empty(value: Any) -> Any:
    """Comme list_or_empty, en écartant les entrées qui ne sont pas des objets."""
    value = list_or_empty(value)
    if not isinstance(value, list):
        return value
    kept = [item for item in value if isinstance(item, (dict, BaseModel))]
    if len(kept) != len(value):
        log.log(BLOCKS_DIAGNOSTIC_LEVEL, "Liste d'éléments : %d entrée(s) non-objet ignorée(s)", len(value) - len(kept))
    return kept


def one_of(options: tuple, default: Any) -> Callable[[Any], Any]:
    """Règle enum-or-default : toute valeur hors `options` devient `default`."""
    def _coerce(value: Any) -> Any:
        if value in options and not isinstance(value, bool):
            return options[options.index(value)]
        # "3" → 3 pour les énumérations numériques (ex : columns)
        if isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
            number = int(value.strip())
            if number in options:
                return number
        return default
    return _coerce


def clamp_unit(value: Any) -> Any:
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if _is_number(value):
        return min(1.0, max(0.0, float(value)))
    return value


def choice(*options: Any, default: Any) -> Any:
    """Type annoté Literal[options] avec repli sur `default`."""
    if default not in options:
        raise ValueError(f"Défaut {default!r} absent de {options!r}")
    return Annotated[Literal[options], BeforeValidator(one_of(options, default))]


Text = Annotated[str, BeforeValidator(str_or_empty)]
OptionalText = Annotated[Optional[str], BeforeValidator(optional_str)]
RichText = Annotated[dict, BeforeValidator(migrate_rich_text)]
ItemList = Annotated[List[T], BeforeValidator(list_or_empty)]
ModelList = Annotated[List[T], BeforeValidator(model_items_or_empty)]
Opacity = Annotated[float, BeforeValidator(clamp_unit)]
Columns = choice(2, 3, 4, default=3)
