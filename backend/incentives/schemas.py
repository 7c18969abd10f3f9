"""
Modèles Pydantic pour l'API.
"""
from typing import Any, List, Optional, Dict, Union
from pydantic import BaseModel, Field

# Montant brut : la conversion (et le rejet des booléens) se fait dans parse_amount
AmountInput = Any


class IncentiveRequest(BaseModel):
    """Saisie du calcul d'incentive (nombres ou chaînes du formulaire)."""
    nrv_actual: AmountInput = None
    er_actual: AmountInput = None
    er_new_customers: AmountInput = None
    sih_condition_met: Union[bool, str] = False


class TierProgress(BaseModel):
    """Position d'un pourcentage sur les paliers."""
    percent: float
    tier: int
    next_tier: Optional[int] = None  # None si palier max atteint
    gap_percent: float


class IncentiveDisplay(BaseModel):
    """Valeurs formatées du panneau de résultats."""
    nrv_percent: str
    er_percent: str
    final_tier: str
    nrv_incentive: str
    er_incentive: str
    booster_incentive: str
    total_incentive: str
    payout_1: str
    payout_2: str


class IncentiveResponse(BaseModel):
    """Résultat complet du calcul d'incentive."""
    status: str  # "CALCULATED" ou "SIH_NOT_MET"
    nrv_percent: float
    er_percent: float
    nrv_tier: int
    er_tier: int
    final_tier: int  # min des deux paliers (affiché seulement)
    nrv_incentive: float
    er_incentive: float
    booster_incentive: float
    booster_applied: bool
    new_customer_ratio: float
    total_incentive: float
    payout_1: float
    payout_2: float
    nrv_progress: Optional[TierProgress] = None
    er_progress: Optional[TierProgress] = None
    display: IncentiveDisplay


class TierLookupResponse(BaseModel):
    """Palier applicable pour un pourcentage donné."""
    percent: float
    tier: int
    next_tier: Optional[int] = None
    gap_percent: float
    nrv_incentive: float
    er_incentive: float


class IncentiveConfig(BaseModel):
    """Barèmes et objectifs en vigueur."""
    nrv_target: float
    er_target: float
    achievement_tiers: List[int]
    nrv_fixed_incentives: Dict[int, float]
    er_fixed_incentives: Dict[int, float]
    booster_threshold: float
    booster_rate: float = Field(description="Part de l'ER versée si le booster est déclenché")
