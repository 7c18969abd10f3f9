"""
Normalisation des saisies (montants, cases à cocher).
"""
import math
import re
from decimal import Decimal
from typing import Optional

from incentives.core.errors import InvalidInputError

_CURRENCY_RE = re.compile(r"₹|(?i:inr)|(?i:rs\.?)")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_TRUE_VALUES = {"true", "1", "yes", "on", "oui"}
_FALSE_VALUES = {"false", "0", "no", "off", "non", ""}


def parse_amount(value, field: Optional[str] = None) -> float:
    """
    Convertit un montant saisi en float.
    - None ou chaîne vide -> 0.0 (champ non renseigné)
    - supprime ₹ / Rs / INR, espaces et séparateurs de milliers
    - lève InvalidInputError si la valeur n'est pas numérique
    """
    label = field or "montant"

    if value is None:
        return 0.0

    # bool est un int : une case à cocher n'est pas un montant
    if isinstance(value, bool):
        raise InvalidInputError(f"{label} : valeur numérique attendue", field=field)

    if isinstance(value, (int, float, Decimal)):
        amount = float(value)
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return 0.0
        s = _CURRENCY_RE.sub("", s)
        s = s.replace(" ", "").replace("\xa0", "").replace(",", "")
        if not _NUMBER_RE.match(s):
            raise InvalidInputError(f"{label} : '{value}' n'est pas un nombre", field=field)
        amount = float(s)
    else:
        raise InvalidInputError(f"{label} : type {type(value).__name__} non supporté", field=field)

    if not math.isfinite(amount):
        raise InvalidInputError(f"{label} : valeur non finie", field=field)
    return amount


def parse_flag(value, field: Optional[str] = None) -> bool:
    """
    Convertit une case à cocher (bool, "on", "true", ...) en bool.
    Absente (None) = non cochée.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value

    s = str(value).strip().lower()
    if s in _TRUE_VALUES:
        return True
    if s in _FALSE_VALUES:
        return False
    raise InvalidInputError(f"{field or 'condition'} : '{value}' n'est pas un booléen", field=field)
