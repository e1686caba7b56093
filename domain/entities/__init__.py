"""
Entités du domaine
"""

from domain.entities.user import User
from domain.entities.commande import Commande, CommandeData, Produit, Statut
from domain.entities.user_session import UserSession

__all__ = [
    "User",
    "Commande",
    "CommandeData",
    "Produit",
    "Statut",
    "UserSession"
]
