"""
SessionSigner - Signature du cookie de session
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt

logger = logging.getLogger(__name__)


class SessionSigner:
    """Signe l'identifiant de session transporté dans le cookie (JWT HS256)"""
    
    def __init__(self, secret_key: str, algorithm: str = "HS256", max_age_seconds: int = 604800):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.max_age_seconds = max_age_seconds
    
    def sign(self, sid: str) -> str:
        """Produit la valeur du cookie pour un identifiant de session"""
        expire = datetime.now(timezone.utc) + timedelta(seconds=self.max_age_seconds)
        return jwt.encode({"sid": sid, "exp": expire}, self.secret_key, algorithm=self.algorithm)
    
    def unsign(self, token: str) -> Optional[str]:
        """Retrouve l'identifiant de session, None si la signature est invalide"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"Session cookie rejected: {e}")
            return None
        return payload.get("sid")
