"""
Entité Commande - Modèle métier pour les commandes de livraison de carburant
"""

from datetime import date, datetime
from typing import Optional
from dataclasses import dataclass, asdict
from enum import Enum


class Produit(str, Enum):
    """Produit livré"""
    GAZOIL = "Gazoil"
    ESSENCE = "Essence"
    JET_A1 = "Jet A1"


class Statut(str, Enum):
    """Statut de livraison d'une commande"""
    EN_COURS = "En cours"
    LIVRE = "Livré"
    NON_LIVRE = "Non livré"


@dataclass
class CommandeData:
    """Champs métier d'une commande, sans identifiant ni horodatage"""
    client: str
    numero_bon_commande: str
    date_livraison: date
    depot: str
    camion: str
    quantite: float
    produit: Produit
    fournisseur: str
    date_chargement: date
    statut: Statut
    transporteur: str
    destination: str
    taux_transport: float

    def fields(self) -> dict:
        """Champs métier sous forme de dictionnaire (remplacement complet)"""
        return {name: getattr(self, name) for name in CommandeData.__dataclass_fields__}


@dataclass
class Commande(CommandeData):
    """Entité Commande du domaine"""
    id: str = ""
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Commande id cannot be empty")

    def to_dict(self) -> dict:
        return asdict(self)
