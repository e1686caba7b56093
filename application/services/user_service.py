"""
UserService - Service applicatif pour la gestion des utilisateurs
"""

import uuid
import logging
from typing import Optional
from domain.clock import utcnow
from domain.entities.user import User
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Service pour la gestion des utilisateurs"""
    
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
    
    def authenticate(self, username: str, password: str) -> Optional[User]:
        """
        Authentifie un utilisateur avec son nom d'utilisateur et mot de passe.

        Utilisateur inconnu et mauvais mot de passe renvoient tous deux None :
        l'appelant ne peut pas distinguer les deux cas.
        """
        user = self.user_repository.find_by_username(username)
        if not user:
            logger.warning(f"Authentication failed: User '{username}' not found")
            return None
        
        if not self.password_hasher.verify(password, user.hashed_password):
            logger.warning(f"Authentication failed: Invalid password for user '{username}'")
            return None
        
        logger.info(f"Authentication success: User '{username}' authenticated")
        return user
    
    def create_user(self, username: str, password: str) -> User:
        """Crée un nouvel utilisateur"""
        existing_user = self.user_repository.find_by_username(username)
        if existing_user:
            raise ValueError(f"Username '{username}' already exists")
        
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            hashed_password=self.password_hasher.hash(password),
            created_at=utcnow()
        )
        
        return self.user_repository.save(user)
    
    def get_user(self, user_id: str) -> Optional[User]:
        """Récupère un utilisateur par son ID"""
        return self.user_repository.find_by_id(user_id)
    
    def ensure_seed_user(self, username: str, password: str) -> User:
        """Crée le compte administrateur initial s'il n'existe pas encore"""
        user = self.user_repository.find_by_username(username)
        if user:
            logger.info(f"Seed user '{username}' already exists")
            return user

        logger.info(f"Seed user '{username}' not found. Creating...")
        return self.create_user(username, password)
