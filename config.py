"""
suivi-chargements-api/config.py
Configuration de l'application (variables d'environnement)
"""

import os


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration lue depuis l'environnement au moment de l'instanciation"""

    def __init__(self):
        # Environnement
        self.app_env = os.environ.get("APP_ENV", "development")

        # Base de données
        self.database_url = os.environ.get(
            "DATABASE_URL", "sqlite:///./suivi_chargements.db"
        )
        # DATABASE_SSL=off désactive TLS vers PostgreSQL (requis sinon, sans vérification du certificat)
        self.database_ssl = os.environ.get("DATABASE_SSL", "on").strip().lower() != "off"

        # Sessions
        self.session_secret = os.environ.get(
            "SESSION_SECRET", "suivi-chargements-secret-key-2025"
        )
        self.session_store = os.environ.get("SESSION_STORE", "database")
        self.session_cookie_name = os.environ.get("SESSION_COOKIE_NAME", "suivi.sid")
        self.session_max_age_days = int(os.environ.get("SESSION_MAX_AGE_DAYS", "7"))

        # CORS
        self.cors_origins = [
            origin.strip()
            for origin in os.environ.get("CORS_ORIGIN", "http://localhost:5173").split(",")
            if origin.strip()
        ]

        # Sécurité : bcrypt ne descend jamais sous un coût de 10
        self.bcrypt_rounds = max(10, int(os.environ.get("BCRYPT_ROUNDS", "10")))

        # Compte administrateur initial
        self.seed_username = os.environ.get("SEED_USERNAME", "Superadmin")
        self.seed_password = os.environ.get("SEED_PASSWORD", "Administrator")

        # Journalisation
        self.log_level = os.environ.get("LOG_LEVEL", "INFO")
        self.log_colored = _as_bool(os.environ.get("LOG_COLORED", "false"))
        self.log_file_path = os.environ.get("LOG_FILE", "")
        self.log_file_enabled = bool(self.log_file_path)

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def cookie_secure(self) -> bool:
        return self.is_production

    @property
    def cookie_samesite(self) -> str:
        return "none" if self.is_production else "lax"

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60

    @property
    def allow_all_origins(self) -> bool:
        return "*" in self.cors_origins
