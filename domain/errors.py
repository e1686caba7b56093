"""
Erreurs du domaine

Taxonomie fermée : chaque erreur applicative est l'une de ces quatre variantes.
La traduction en réponse HTTP se fait en un seul endroit (api/errors.py).
"""


class AppError(Exception):
    """Base des erreurs applicatives"""

    default_message = "Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Données d'entrée invalides (message agrégé de toutes les erreurs de champ)"""
    default_message = "Validation error"


class AuthError(AppError):
    """Identifiants invalides ou session absente"""
    default_message = "Not authenticated"


class NotFoundError(AppError):
    """Entité introuvable"""
    default_message = "Not found"


class InternalError(AppError):
    """Toute autre défaillance ; le détail reste dans les logs serveur"""
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        # Le message client reste toujours générique
        super().__init__(self.default_message)
