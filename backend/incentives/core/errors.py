"""
Erreurs métier du calcul d'incentive.
"""
from typing import Optional


class InvalidInputError(ValueError):
    """Saisie invalide (montant non numérique, ER nouveaux clients > ER)."""
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
