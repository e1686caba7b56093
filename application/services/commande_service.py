"""
CommandeService - Service applicatif pour la gestion des commandes
"""

import logging
from typing import List

from domain.entities import Commande, CommandeData
from domain.errors import NotFoundError
from domain.repositories import CommandeRepository

logger = logging.getLogger(__name__)

COMMANDE_NOT_FOUND = "Commande not found"


class CommandeService:
    """Service pour la gestion des commandes"""

    def __init__(self, commande_repository: CommandeRepository):
        self.commande_repository = commande_repository

    def list_commandes(self) -> List[Commande]:
        """Toutes les commandes, la plus récente d'abord"""
        return self.commande_repository.find_all()

    def get_commande(self, commande_id: str) -> Commande:
        commande = self.commande_repository.find_by_id(commande_id)
        if commande is None:
            raise NotFoundError(COMMANDE_NOT_FOUND)
        return commande

    def create_commande(self, data: CommandeData) -> Commande:
        commande = self.commande_repository.create(data)
        logger.info(f"[{commande.id}] Commande created for client '{commande.client}'")
        return commande

    def update_commande(self, commande_id: str, data: CommandeData) -> Commande:
        """Remplacement complet ; une commande absente n'est jamais créée"""
        commande = self.commande_repository.update(commande_id, data)
        if commande is None:
            raise NotFoundError(COMMANDE_NOT_FOUND)
        logger.info(f"[{commande_id}] Commande updated")
        return commande

    def delete_commande(self, commande_id: str) -> None:
        if not self.commande_repository.delete(commande_id):
            raise NotFoundError(COMMANDE_NOT_FOUND)
        logger.info(f"[{commande_id}] Commande deleted")
