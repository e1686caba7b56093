"""
Implémentations des repositories SQLAlchemy
"""

import uuid
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.clock import utcnow
from domain.entities import User, Commande, CommandeData
from domain.repositories import UserRepository, CommandeRepository
from infrastructure.database.models import UserModel, CommandeModel
from infrastructure.database.mappers import UserMapper, CommandeMapper

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""
    
    def __init__(self, session: Session):
        self.session = session
    
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Trouve un utilisateur par son ID"""
        model = self.session.query(UserModel).filter(UserModel.id == user_id).first()
        return UserMapper.to_domain(model) if model else None
    
    def find_by_username(self, username: str) -> Optional[User]:
        """Trouve un utilisateur par son nom d'utilisateur"""
        model = self.session.query(UserModel).filter(UserModel.username == username).first()
        return UserMapper.to_domain(model) if model else None
    
    def save(self, user: User) -> User:
        """Sauvegarde un utilisateur"""
        model = self.session.query(UserModel).filter(UserModel.id == user.id).first()
        
        if model:
            model = UserMapper.to_model(user, model)
        else:
            model = UserMapper.to_model(user)
            self.session.add(model)
        
        try:
            self.session.commit()
            self.session.refresh(model)
            return UserMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error saving user: {e}")
            raise


class SQLAlchemyCommandeRepository(CommandeRepository):
    """Implémentation SQLAlchemy du CommandeRepository"""

    def __init__(self, session: Session):
        self.session = session

    def _get_model(self, commande_id: str) -> Optional[CommandeModel]:
        return self.session.query(CommandeModel).filter(CommandeModel.id == commande_id).first()

    def find_all(self) -> List[Commande]:
        """Retourne toutes les commandes, la plus récente d'abord"""
        models = self.session.query(CommandeModel).order_by(CommandeModel.created_at.desc()).all()
        return [CommandeMapper.to_domain(model) for model in models]

    def find_by_id(self, commande_id: str) -> Optional[Commande]:
        """Trouve une commande par son ID"""
        model = self._get_model(commande_id)
        return CommandeMapper.to_domain(model) if model else None

    def create(self, data: CommandeData) -> Commande:
        """Insère une nouvelle commande"""
        model = CommandeMapper.apply(data)
        model.id = str(uuid.uuid4())
        model.created_at = utcnow()
        self.session.add(model)
        return self._commit(model, "creating")

    def update(self, commande_id: str, data: CommandeData) -> Optional[Commande]:
        """Remplace tous les champs d'une commande existante"""
        model = self._get_model(commande_id)
        if model is None:
            return None

        CommandeMapper.apply(data, model)
        return self._commit(model, "updating")

    def delete(self, commande_id: str) -> bool:
        """Supprime une commande"""
        try:
            deleted = (
                self.session.query(CommandeModel)
                .filter(CommandeModel.id == commande_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error deleting commande: {e}")
            raise
        return deleted > 0

    def _commit(self, model: CommandeModel, action: str) -> Commande:
        try:
            self.session.commit()
            self.session.refresh(model)
            return CommandeMapper.to_domain(model)
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error {action} commande: {e}")
            raise
