"""
Barèmes d'incentive NRV / ER et règle du booster nouveaux clients.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Objectifs de la période
NRV_TARGET: float = 3000000
ER_TARGET: float = 450000

# Paliers d'atteinte (en %), strictement croissants
ACHIEVEMENT_TIERS: Tuple[int, ...] = (50, 75, 100, 110, 120, 150)

# Montants fixes NRV par palier atteint
NRV_FIXED_INCENTIVES: Mapping[int, float] = MappingProxyType({
    50: 7500,
    75: 16875,
    100: 30000,
    110: 33000,
    120: 36000,
    150: 45000,
})

# Montants fixes ER par palier atteint
ER_FIXED_INCENTIVES: Mapping[int, float] = MappingProxyType({
    50: 4500,
    75: 16875,
    100: 45000,
    110: 59400,
    120: 64800,
    150: 81000,
})

# Booster nouveaux clients : 3 % de l'ER si la part nouveaux clients dépasse 60 %
NEW_CUSTOMER_BOOSTER_THRESHOLD: float = 0.60
NEW_CUSTOMER_BOOSTER_RATE: float = 0.03


def get_incentive_config() -> Dict:
    """Photo de la configuration (pour l'API)."""
    return {
        "nrv_target": NRV_TARGET,
        "er_target": ER_TARGET,
        "achievement_tiers": list(ACHIEVEMENT_TIERS),
        "nrv_fixed_incentives": dict(NRV_FIXED_INCENTIVES),
        "er_fixed_incentives": dict(ER_FIXED_INCENTIVES),
        "booster_threshold": NEW_CUSTOMER_BOOSTER_THRESHOLD,
        "booster_rate": NEW_CUSTOMER_BOOSTER_RATE,
    }
