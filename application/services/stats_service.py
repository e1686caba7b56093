"""
StatsService - Statistiques mensuelles des commandes

Toutes les statistiques portent sur les commandes dont la date de chargement
tombe dans le mois calendaire de l'instant de référence, bornes incluses.
Chaque regroupement est accumulé en une passe dans un dictionnaire (ordre
d'insertion conservé), puis trié une fois par valeur décroissante ; le tri
étant stable, la première clé rencontrée l'emporte en cas d'égalité.
"""

import calendar
import logging
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.entities import Commande, Statut
from domain.repositories import CommandeRepository

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def month_bounds(now: datetime) -> Tuple[date, date]:
    """Premier et dernier jour du mois de `now`"""
    last_day = calendar.monthrange(now.year, now.month)[1]
    return date(now.year, now.month, 1), date(now.year, now.month, last_day)


def round_half_up(value: float) -> int:
    """Arrondi à l'entier le plus proche, .5 vers le haut"""
    return int(math.floor(value + 0.5))


def as_quantity(value: Any) -> float:
    """Quantité numérique ; toute valeur non numérique compte pour zéro"""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def _loading_date(commande: Commande) -> Optional[date]:
    value = commande.date_chargement
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def _ranked(totals: Dict[str, float]) -> List[Tuple[str, float]]:
    return sorted(totals.items(), key=lambda entry: entry[1], reverse=True)


def _label(value: Any) -> str:
    return value.value if isinstance(value, Enum) else value


def commandes_of_month(commandes: Iterable[Commande], now: datetime) -> List[Commande]:
    start, end = month_bounds(now)
    selected = []
    for commande in commandes:
        loading = _loading_date(commande)
        if loading is not None and start <= loading <= end:
            selected.append(commande)
    return selected


def compute_monthly_stats(commandes: Iterable[Commande], now: datetime) -> Dict[str, Any]:
    """Agrège les commandes du mois courant en indicateurs de synthèse"""
    current = commandes_of_month(commandes, now)

    total_quantite = 0.0
    par_produit: Dict[str, float] = {}
    par_client: Dict[str, int] = {}
    par_transporteur: Dict[str, int] = {}
    par_depot: Dict[str, float] = {}

    for commande in current:
        quantite = as_quantity(commande.quantite)
        produit = _label(commande.produit)

        total_quantite += quantite
        par_produit[produit] = par_produit.get(produit, 0) + quantite
        par_client[commande.client] = par_client.get(commande.client, 0) + 1
        par_depot[commande.depot] = par_depot.get(commande.depot, 0) + quantite

        if _label(commande.statut) == Statut.LIVRE.value:
            par_transporteur[commande.transporteur] = (
                par_transporteur.get(commande.transporteur, 0) + 1
            )

    clients = _ranked(par_client)
    transporteurs = _ranked(par_transporteur)
    depots = _ranked(par_depot)

    # Le "moins bon" client est la dernière entrée du classement, pas un minimum recherché
    meilleur_client, meilleur_client_commandes = clients[0] if clients else (NOT_AVAILABLE, 0)
    moins_client, moins_client_commandes = clients[-1] if clients else (NOT_AVAILABLE, 0)
    meilleur_transporteur, livraisons = transporteurs[0] if transporteurs else (NOT_AVAILABLE, 0)
    depot_plus_actif, depot_quantite = depots[0] if depots else (NOT_AVAILABLE, 0)

    return {
        "totalCommandes": len(current),
        "totalQuantite": round_half_up(total_quantite),
        "quantiteParProduit": par_produit,
        "meilleurClient": meilleur_client,
        "meilleurClientCommandes": meilleur_client_commandes,
        "moinsClient": moins_client,
        "moinsClientCommandes": moins_client_commandes,
        "meilleurTransporteur": meilleur_transporteur,
        "meilleurTransporteurLivraisons": livraisons,
        "depotPlusActif": depot_plus_actif,
        "depotPlusActifQuantite": round_half_up(depot_quantite),
    }


class StatsService:
    """Service pour les statistiques du tableau de bord"""

    def __init__(self, commande_repository: CommandeRepository):
        self.commande_repository = commande_repository

    def monthly_stats(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Statistiques du mois en cours (calendrier local du serveur)"""
        now = now or datetime.now()
        commandes = self.commande_repository.find_all()
        stats = compute_monthly_stats(commandes, now)
        logger.debug(f"Monthly stats computed over {stats['totalCommandes']} commandes")
        return stats
