"""
Formatage d'affichage : montants en roupies (groupement indien) et pourcentages.
Rendu identique à l'écran de résultats (Intl en-IN / toFixed).
"""
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Dict

CURRENCY_SYMBOL = "₹"

_CENT = Decimal("0.01")
_MIN_PREC = 60


def _round_2(value: float) -> str:
    """
    Arrondi à 2 décimales de la valeur absolue, à partir de la valeur binaire exacte
    (1.005 -> "1.00", comme le navigateur). Retourne une chaîne "1234.50".
    """
    exact = Decimal(abs(value))
    # tous les chiffres de la partie entière + 2 décimales
    context = Context(prec=max(_MIN_PREC, exact.adjusted() + 4))
    amount = exact.quantize(_CENT, rounding=ROUND_HALF_UP, context=context)
    return format(amount, "f")


def group_indian(digits: str) -> str:
    """Groupement lakh/crore : 12345678 -> 1,23,45,678."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(value: float) -> str:
    """
    Formate un montant en roupies : ₹1,23,456.78 / -₹1,000.00.
    Le zéro négatif garde son signe (-₹0.00).
    """
    negative = value < 0 or (value == 0 and str(value).startswith("-"))
    int_part, frac = _round_2(value).split(".")
    sign = "-" if negative else ""
    return f"{sign}{CURRENCY_SYMBOL}{group_indian(int_part)}.{frac}"


def format_percent(value: float) -> str:
    """Pourcentage à 2 décimales : 100 -> "100.00%". Le zéro négatif s'affiche 0.00%."""
    sign = "-" if value < 0 else ""
    return f"{sign}{_round_2(value)}%"


def format_tier(tier: int) -> str:
    return f"{tier}%"


def build_display(result: Dict) -> Dict[str, str]:
    """Chaînes affichées dans le panneau de résultats."""
    total = result["total_incentive"]
    return {
        "nrv_percent": format_percent(result["nrv_percent"]),
        "er_percent": format_percent(result["er_percent"]),
        "final_tier": format_tier(result["final_tier"]),
        "nrv_incentive": format_currency(result["nrv_incentive"]),
        "er_incentive": format_currency(result["er_incentive"]),
        "booster_incentive": format_currency(result["booster_incentive"]),
        "total_incentive": format_currency(total),
        "payout_1": format_currency(total / 2),
        "payout_2": format_currency(total / 2),
    }
