"""Typed read accessors over AppState."""

from gomate.application.store.state import AppState
from gomate.domain.formatters import describe_train_type
from gomate.domain.models.connection import Connection
from gomate.domain.models.destination import Destination
from gomate.domain.models.user import User

ALPINE_GREEN = "#2F8F4E"
CAUTION_YELLOW = "#FFB300"
SWISS_RED = "#D52B1E"
STEEL_GRAY = "#B0B5BD"

_STATUS_COLORS = {
    "operating": ALPINE_GREEN,
    "active": ALPINE_GREEN,
    "limited": CAUTION_YELLOW,
    "limited service": CAUTION_YELLOW,
    "unavailable": SWISS_RED,
    "closed": SWISS_RED,
}


def select_user(state: AppState) -> User | None:
    return state.auth.user


def select_is_authenticated(state: AppState) -> bool:
    return state.auth.is_authenticated


def select_auth_error(state: AppState) -> str | None:
    return state.auth.error


def select_destinations(state: AppState) -> list[Destination]:
    return state.destinations.destinations


def select_destination_by_id(state: AppState, destination_id: int) -> Destination | None:
    """Find a loaded destination by id."""
    return next(
        (d for d in state.destinations.destinations if d.id == destination_id),
        None,
    )


def select_selected_destination(state: AppState) -> Destination | None:
    return state.destinations.selected_destination


def select_destinations_error(state: AppState) -> str | None:
    return state.destinations.error


def select_favorites(state: AppState) -> list[Destination]:
    return state.favorites.favorites


def select_favorites_count(state: AppState) -> int:
    return len(state.favorites.favorites)


def is_favorite(state: AppState, destination_id: int) -> bool:
    """Check whether a destination id is in the favorites."""
    return any(favorite.id == destination_id for favorite in state.favorites.favorites)


def select_is_dark_mode(state: AppState) -> bool:
    return state.theme.is_dark_mode


def select_connections(state: AppState) -> list[Connection]:
    return state.journey.connections


def select_journey_error(state: AppState) -> str | None:
    return state.journey.error


def status_badge_color(status: str) -> str:
    """Map a destination status to its badge colour. Unknown statuses are gray."""
    return _STATUS_COLORS.get(status.strip().lower(), STEEL_GRAY)


def display_name(user: User) -> str:
    """Full name as shown on the profile screen."""
    return f"{user.first_name} {user.last_name}".strip() or user.username


def user_handle(user: User) -> str:
    return f"@{user.username}"


def full_train_names(connection: Connection) -> str:
    """Long names of every leg, e.g. "InterCity → S-Bahn"."""
    return describe_train_type(connection.train_type)
