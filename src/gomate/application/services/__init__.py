"""Application services (use cases)."""

from gomate.application.services.auth_service import AuthService
from gomate.application.services.background_writer import BackgroundWriter
from gomate.application.services.destination_builder import DestinationBuilder
from gomate.application.services.destination_service import DestinationService
from gomate.application.services.favorites_service import FavoritesService
from gomate.application.services.journey_planner_service import JourneyPlannerService
from gomate.application.services.theme_service import ThemeService

__all__ = [
    "AuthService",
    "BackgroundWriter",
    "DestinationBuilder",
    "DestinationService",
    "FavoritesService",
    "JourneyPlannerService",
    "ThemeService",
]
