"""
Calculateur d'incentive (NRV + ER + booster nouveaux clients).
"""
from typing import Dict

from incentives.core.errors import InvalidInputError
from incentives.core.incentive_tiers import (
    NRV_TARGET,
    ER_TARGET,
    NRV_FIXED_INCENTIVES,
    ER_FIXED_INCENTIVES,
    NEW_CUSTOMER_BOOSTER_THRESHOLD,
    NEW_CUSTOMER_BOOSTER_RATE,
)
from incentives.core.normalize import parse_amount, parse_flag
from incentives.services.tier_engine import resolve_tier, get_tier_progress

STATUS_CALCULATED = "CALCULATED"
STATUS_SIH_NOT_MET = "SIH_NOT_MET"


def _empty_result(status: str) -> Dict:
    return {
        "status": status,
        "nrv_percent": 0.0,
        "er_percent": 0.0,
        "nrv_tier": 0,
        "er_tier": 0,
        "final_tier": 0,
        "nrv_incentive": 0.0,
        "er_incentive": 0.0,
        "booster_incentive": 0.0,
        "booster_applied": False,
        "new_customer_ratio": 0.0,
        "total_incentive": 0.0,
        "payout_1": 0.0,
        "payout_2": 0.0,
        "nrv_progress": None,
        "er_progress": None,
    }


def compute_booster(er_actual: float, er_new_customers: float) -> Dict:
    """
    Booster nouveaux clients : 3 % de l'ER si ER nouveaux clients / ER > 60 %
    (strictement supérieur, 60 % pile ne déclenche pas).
    """
    if er_actual <= 0:
        return {"ratio": 0.0, "applied": False, "value": 0.0}

    ratio = er_new_customers / er_actual
    if ratio > NEW_CUSTOMER_BOOSTER_THRESHOLD:
        return {"ratio": ratio, "applied": True, "value": er_actual * NEW_CUSTOMER_BOOSTER_RATE}
    return {"ratio": ratio, "applied": False, "value": 0.0}


def calculate_incentive(
    nrv_actual: float,
    er_actual: float,
    er_new_customers: float,
    sih_condition_met: bool,
) -> Dict:
    """
    Calcule l'incentive d'un commercial.

    Args:
        nrv_actual: NRV réalisé
        er_actual: ER réalisé
        er_new_customers: ER réalisé sur les nouveaux clients (<= er_actual)
        sih_condition_met: Condition S.I.H. remplie

    Returns:
        {
            "status": "CALCULATED" | "SIH_NOT_MET",
            "nrv_percent": ..., "er_percent": ...,
            "nrv_tier": ..., "er_tier": ..., "final_tier": ...,
            "nrv_incentive": ..., "er_incentive": ...,
            "booster_incentive": ..., "booster_applied": bool, "new_customer_ratio": ...,
            "total_incentive": ..., "payout_1": ..., "payout_2": ...,
            "nrv_progress": {...}|None, "er_progress": {...}|None
        }

    Raises:
        InvalidInputError: si l'ER nouveaux clients dépasse l'ER réalisé.
    """
    if er_new_customers > er_actual:
        raise InvalidInputError(
            "ER from New Customers cannot exceed ER Actual.",
            field="er_new_customers",
        )

    # Condition S.I.H. non remplie : aucun incentive
    if not sih_condition_met:
        return _empty_result(STATUS_SIH_NOT_MET)

    nrv_percent = 100 * nrv_actual / NRV_TARGET
    er_percent = 100 * er_actual / ER_TARGET

    nrv_tier = resolve_tier(nrv_percent)
    er_tier = resolve_tier(er_percent)

    # Palier final affiché = le plus bas des deux.
    # Chaque montant reste calculé sur le palier propre à son indicateur.
    final_tier = min(nrv_tier, er_tier)

    nrv_incentive = float(NRV_FIXED_INCENTIVES.get(nrv_tier, 0))
    er_incentive = float(ER_FIXED_INCENTIVES.get(er_tier, 0))

    booster = compute_booster(er_actual, er_new_customers)

    total_incentive = nrv_incentive + er_incentive + booster["value"]

    result = _empty_result(STATUS_CALCULATED)
    result.update({
        "nrv_percent": nrv_percent,
        "er_percent": er_percent,
        "nrv_tier": nrv_tier,
        "er_tier": er_tier,
        "final_tier": final_tier,
        "nrv_incentive": nrv_incentive,
        "er_incentive": er_incentive,
        "booster_incentive": booster["value"],
        "booster_applied": booster["applied"],
        "new_customer_ratio": booster["ratio"],
        "total_incentive": total_incentive,
        # Versement en deux fois
        "payout_1": total_incentive / 2,
        "payout_2": total_incentive / 2,
        "nrv_progress": get_tier_progress(nrv_percent),
        "er_progress": get_tier_progress(er_percent),
    })
    return result


def calculate_incentive_from_raw(raw: Dict) -> Dict:
    """
    Calcule l'incentive à partir de valeurs brutes (formulaire ou JSON).
    Les montants non numériques lèvent InvalidInputError.
    """
    return calculate_incentive(
        nrv_actual=parse_amount(raw.get("nrv_actual"), field="nrv_actual"),
        er_actual=parse_amount(raw.get("er_actual"), field="er_actual"),
        er_new_customers=parse_amount(raw.get("er_new_customers"), field="er_new_customers"),
        sih_condition_met=parse_flag(raw.get("sih_condition_met"), field="sih_condition_met"),
    )
