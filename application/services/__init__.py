"""
Services applicatifs
"""

from application.services.user_service import UserService
from application.services.commande_service import CommandeService
from application.services.session_service import SessionService
from application.services.stats_service import StatsService, compute_monthly_stats

__all__ = [
    "UserService",
    "CommandeService",
    "SessionService",
    "StatsService",
    "compute_monthly_stats"
]
