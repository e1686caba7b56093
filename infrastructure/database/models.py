"""
Modèles SQLAlchemy - Tables users, commandes et user_sessions
"""

import uuid
import logging
from sqlalchemy import Column, String, Text, Date, DateTime, Numeric
from sqlalchemy.orm import declarative_base

from domain.clock import utcnow

logger = logging.getLogger(__name__)

Base = declarative_base()


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs"""
    __tablename__ = "users"
    
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow)


class CommandeModel(Base):
    """Modèle SQLAlchemy pour les commandes"""
    __tablename__ = "commandes"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    client = Column(Text, nullable=False)
    numero_bon_commande = Column(Text, nullable=False)
    date_livraison = Column(Date, nullable=False)
    depot = Column(Text, nullable=False)
    camion = Column(Text, nullable=False)
    quantite = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    produit = Column(Text, nullable=False)
    fournisseur = Column(Text, nullable=False)
    date_chargement = Column(Date, nullable=False)
    statut = Column(Text, nullable=False)
    transporteur = Column(Text, nullable=False)
    destination = Column(Text, nullable=False)
    taux_transport = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)


class SessionModel(Base):
    """Modèle SQLAlchemy pour les sessions persistées"""
    __tablename__ = "user_sessions"

    sid = Column(String, primary_key=True)
    sess = Column(Text, nullable=False)  # JSON stringifié
    expire = Column(DateTime, nullable=False, index=True)
