"""
Interface CommandeRepository - Définit les opérations d'accès aux données pour Commande
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from domain.entities.commande import Commande, CommandeData


class CommandeRepository(ABC):
    """Interface pour le repository des commandes"""

    @abstractmethod
    def find_all(self) -> List[Commande]:
        """Retourne toutes les commandes, la plus récente d'abord"""
        pass

    @abstractmethod
    def find_by_id(self, commande_id: str) -> Optional[Commande]:
        """Trouve une commande par son ID"""
        pass

    @abstractmethod
    def create(self, data: CommandeData) -> Commande:
        """Insère une commande (ID et date de création attribués ici)"""
        pass

    @abstractmethod
    def update(self, commande_id: str, data: CommandeData) -> Optional[Commande]:
        """Remplace tous les champs d'une commande existante, None si absente"""
        pass

    @abstractmethod
    def delete(self, commande_id: str) -> bool:
        """Supprime une commande, True si elle existait"""
        pass
