"""
Moteur de calcul de paliers (tiers).
"""
from typing import Dict, Optional, Sequence

from incentives.core.incentive_tiers import ACHIEVEMENT_TIERS


def resolve_tier(percent: float, tiers: Sequence[int] = ACHIEVEMENT_TIERS) -> int:
    """
    Retourne le palier applicable pour un pourcentage d'atteinte.

    Args:
        percent: Pourcentage d'atteinte (100.0 = objectif atteint)
        tiers: Seuils croissants (en %)

    Returns:
        Le plus grand seuil <= percent, ou 0 si aucun palier n'est atteint.
    """
    applicable_tier = 0
    for tier in tiers:
        if percent >= tier:
            applicable_tier = tier
        else:
            break
    return applicable_tier


def get_tier_progress(percent: float, tiers: Sequence[int] = ACHIEVEMENT_TIERS) -> Dict:
    """
    Progression sur les paliers.

    Returns:
        {
            "percent": percent,
            "tier": int,                  # Palier atteint (0 si aucun)
            "next_tier": int|None,        # Prochain palier (None si palier max)
            "gap_percent": float          # Points manquants pour le prochain palier
        }
    """
    tier = resolve_tier(percent, tiers)
    next_tier: Optional[int] = next((t for t in tiers if t > percent), None)
    gap = (next_tier - percent) if next_tier is not None else 0.0

    return {
        "percent": percent,
        "tier": tier,
        "next_tier": next_tier,
        "gap_percent": gap,
    }
