"""
Entité User - Modèle métier pour les utilisateurs
"""

from datetime import datetime
from typing import Optional
from dataclasses import dataclass


@dataclass
class User:
    """Entité User du domaine"""
    id: str
    username: str
    hashed_password: str
    created_at: Optional[datetime] = None
    
    def __post_init__(self):
        """Validation de l'entité"""
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.hashed_password:
            raise ValueError("Hashed password cannot be empty")
