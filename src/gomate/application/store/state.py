"""Application state dataclasses."""

from dataclasses import dataclass, field

from gomate.domain.models.connection import Connection
from gomate.domain.models.destination import Destination
from gomate.domain.models.error_details import ErrorDetails
from gomate.domain.models.user import User


@dataclass
class AuthState:
    """Session slice."""

    user: User | None = None
    token: str | None = None
    is_authenticated: bool = False
    is_loading: bool = False
    error: str | None = None


@dataclass
class DestinationsState:
    """Destination browser slice."""

    destinations: list[Destination] = field(default_factory=list)
    selected_destination: Destination | None = None
    is_loading: bool = False
    error: str | None = None
    error_details: ErrorDetails | None = None
    # Incremented per fetch_destinations call; results of older calls are dropped
    request_id: int = 0


@dataclass
class FavoritesState:
    """Favorites slice."""

    favorites: list[Destination] = field(default_factory=list)


@dataclass
class ThemeState:
    """Theme slice."""

    is_dark_mode: bool = False


@dataclass
class JourneyState:
    """Journey planner slice."""

    from_station: str = ""
    to_station: str = ""
    connections: list[Connection] = field(default_factory=list)
    is_loading: bool = False
    error: str | None = None


@dataclass
class AppState:
    """Root state holding every slice."""

    auth: AuthState = field(default_factory=AuthState)
    destinations: DestinationsState = field(default_factory=DestinationsState)
    favorites: FavoritesState = field(default_factory=FavoritesState)
    theme: ThemeState = field(default_factory=ThemeState)
    journey: JourneyState = field(default_factory=JourneyState)
