"""
Services de sécurité
"""

from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.session_signer import SessionSigner

__all__ = [
    "PasswordHasher",
    "SessionSigner"
]
