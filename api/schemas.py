"""
suivi-chargements-api/api/schemas.py
Schémas Pydantic pour la sérialisation des réponses
"""

from datetime import date, datetime
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from domain.entities import Produit, Statut

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

class LoginRequest(BaseModel):
    """Identifiants de connexion (présence vérifiée par read_credentials)"""
    username: Optional[str] = None
    password: Optional[str] = None

class UserResponse(BaseModel):
    """Identité renvoyée au client (jamais le hachage)"""
    id: str
    username: str

    model_config = ConfigDict(from_attributes=True)

class SuccessResponse(BaseModel):
    success: bool = True

class MessageResponse(BaseModel):
    message: str

# ============================================================================
# COMMANDES
# ============================================================================

class CommandeResponse(BaseModel):
    """Commande telle que renvoyée par l'API (clés en camelCase)"""
    id: str
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
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True
    )

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        if dt is None:
            return None
        return dt.isoformat()

# ============================================================================
# STATISTIQUES
# ============================================================================

class StatsResponse(BaseModel):
    """Synthèse mensuelle"""
    totalCommandes: int
    totalQuantite: int
    quantiteParProduit: Dict[str, float]
    meilleurClient: str
    meilleurClientCommandes: int
    moinsClient: str
    moinsClientCommandes: int
    meilleurTransporteur: str
    meilleurTransporteurLivraisons: int
    depotPlusActif: str
    depotPlusActifQuantite: int
