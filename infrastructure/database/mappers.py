"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

import json
from typing import Optional
from infrastructure.database.models import UserModel, CommandeModel, SessionModel
from domain.entities import User, Commande, CommandeData, Produit, Statut, UserSession


class UserMapper:
    """Mapper entre UserModel et User"""
    
    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convertit un UserModel en entité User"""
        return User(
            id=model.id,
            username=model.username,
            hashed_password=model.password,
            created_at=model.created_at
        )
    
    @staticmethod
    def to_model(user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convertit une entité User en UserModel"""
        if model is None:
            model = UserModel()
        
        model.id = user.id
        model.username = user.username
        model.password = user.hashed_password
        model.created_at = user.created_at
        
        return model


class CommandeMapper:
    """Mapper entre CommandeModel et Commande"""

    @staticmethod
    def to_domain(model: CommandeModel) -> Commande:
        """Convertit un CommandeModel en entité Commande (copie détachée)"""
        return Commande(
            id=model.id,
            client=model.client,
            numero_bon_commande=model.numero_bon_commande,
            date_livraison=model.date_livraison,
            depot=model.depot,
            camion=model.camion,
            quantite=model.quantite,
            produit=Produit(model.produit),
            fournisseur=model.fournisseur,
            date_chargement=model.date_chargement,
            statut=Statut(model.statut),
            transporteur=model.transporteur,
            destination=model.destination,
            taux_transport=model.taux_transport,
            created_at=model.created_at
        )

    @staticmethod
    def apply(data: CommandeData, model: Optional[CommandeModel] = None) -> CommandeModel:
        """Écrit tous les champs métier sur le modèle (jamais de fusion partielle)"""
        if model is None:
            model = CommandeModel()

        for name, value in data.fields().items():
            if isinstance(value, (Produit, Statut)):
                value = value.value
            setattr(model, name, value)

        return model


class SessionMapper:
    """Mapper entre SessionModel et UserSession"""

    @staticmethod
    def to_domain(model: SessionModel) -> UserSession:
        return UserSession(
            sid=model.sid,
            expires_at=model.expire,
            data=json.loads(model.sess)
        )

    @staticmethod
    def to_model(session: UserSession, model: Optional[SessionModel] = None) -> SessionModel:
        if model is None:
            model = SessionModel()

        model.sid = session.sid
        model.sess = json.dumps(session.data)
        model.expire = session.expires_at

        return model
