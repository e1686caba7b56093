"""
SQLAlchemySessionStore - Sessions persistées dans la table user_sessions
"""

import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import sessionmaker

from domain.entities import UserSession
from domain.repositories import SessionStore
from infrastructure.database.models import SessionModel
from infrastructure.database.mappers import SessionMapper

logger = logging.getLogger(__name__)


class SQLAlchemySessionStore(SessionStore):
    """Store adossé à la base ; chaque opération ouvre sa propre session SQL"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, sid: str) -> Optional[UserSession]:
        db = self.session_factory()
        try:
            model = db.query(SessionModel).filter(SessionModel.sid == sid).first()
            return SessionMapper.to_domain(model) if model else None
        finally:
            db.close()

    def save(self, session: UserSession) -> None:
        db = self.session_factory()
        try:
            model = db.query(SessionModel).filter(SessionModel.sid == session.sid).first()
            if model:
                SessionMapper.to_model(session, model)
            else:
                db.add(SessionMapper.to_model(session))
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Session store error: {e}")
            raise
        finally:
            db.close()

    def destroy(self, sid: str) -> None:
        db = self.session_factory()
        try:
            db.query(SessionModel).filter(SessionModel.sid == sid).delete(synchronize_session=False)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Session store error: {e}")
            raise
        finally:
            db.close()

    def prune_expired(self, now: datetime) -> int:
        db = self.session_factory()
        try:
            pruned = (
                db.query(SessionModel)
                .filter(SessionModel.expire <= now)
                .delete(synchronize_session=False)
            )
            db.commit()
            return pruned
        except Exception as e:
            db.rollback()
            logger.error(f"Session store error: {e}")
            raise
        finally:
            db.close()
