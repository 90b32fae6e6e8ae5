"""Application store: owns AppState and exposes its actions."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING

from gomate.application.errors import (
    AuthenticationFailedError,
    DestinationNotFoundError,
    NoConnectionsError,
    StationSearchError,
    ValidationFailedError,
    extract_error_details,
)
from gomate.application.services import favorites_service
from gomate.application.services.auth_service import LOGIN_FAILED_MESSAGE
from gomate.application.services.background_writer import BackgroundWriter
from gomate.application.store import selectors
from gomate.application.store.state import AppState, AuthState
from gomate.domain.exceptions import UpstreamApiError

if TYPE_CHECKING:
    from gomate.application.services import (
        AuthService,
        DestinationService,
        FavoritesService,
        JourneyPlannerService,
        ThemeService,
    )
    from gomate.domain.models.connection import Connection
    from gomate.domain.models.destination import Destination
    from gomate.domain.models.user import User

logger = logging.getLogger(__name__)

FETCH_DESTINATIONS_FAILED = "Failed to fetch destinations"
FETCH_DESTINATION_FAILED = "Failed to fetch destination"
REGISTRATION_FAILED = "Registration failed"
CONNECTIONS_FAILED = "Failed to find connections. Please check station names."


class AppStore:
    """Holds the application state and runs every state-changing action.

    Actions never raise for expected failures: they record a user-facing
    message in the matching state slice instead. Persistence writes run in
    the background and are awaited by ``stop()``.
    """

    def __init__(
        self,
        auth_service: AuthService,
        destination_service: DestinationService,
        journey_service: JourneyPlannerService,
        favorites: FavoritesService,
        theme: ThemeService,
        writer: BackgroundWriter | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            auth_service: Login, registration and session persistence.
            destination_service: Destination batch fetch and refresh.
            journey_service: Connection search.
            favorites: Favorites persistence.
            theme: Theme persistence.
            writer: Runs fire-and-forget writes.
        """
        self.state = AppState()
        self._auth_service = auth_service
        self._destination_service = destination_service
        self._journey_service = journey_service
        self._favorites = favorites
        self._theme = theme
        self._writer = writer or BackgroundWriter()

    async def start(self) -> None:
        """Restore the persisted session, favorites and theme."""
        await self.restore_session()
        await self.load_favorites()
        await self.load_theme()
        logger.info("App store started")

    async def stop(self) -> None:
        """Wait for pending persistence writes."""
        await self._writer.flush()
        logger.info("App store stopped")

    async def __aenter__(self) -> AppStore:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    # Session

    async def login(self, username: str, password: str) -> User | None:
        """Log in and persist the session. Failures set ``auth.error``."""
        auth = self.state.auth
        auth.is_loading = True
        auth.error = None
        try:
            user = await self._auth_service.login(username, password)
        except (ValidationFailedError, AuthenticationFailedError) as e:
            self._set_auth_failure(str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected login failure: {e}", exc_info=True)
            self._set_auth_failure(LOGIN_FAILED_MESSAGE)
            return None

        self._set_authenticated(user)
        self._writer.schedule(self._auth_service.save_session(user), "session")
        return user

    async def register(
        self,
        first_name: str,
        last_name: str,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> User | None:
        """Create a mock account and persist it like a login."""
        auth = self.state.auth
        auth.is_loading = True
        auth.error = None
        try:
            user = self._auth_service.register(
                first_name, last_name, username, email, password, confirm_password
            )
        except ValidationFailedError as e:
            self._set_auth_failure(str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected registration failure: {e}", exc_info=True)
            self._set_auth_failure(REGISTRATION_FAILED)
            return None

        self._set_authenticated(user)
        self._writer.schedule(self._auth_service.save_session(user), "session")
        return user

    async def restore_session(self) -> bool:
        """Load the persisted session. Returns whether the user is authenticated."""
        user = await self._auth_service.restore_session()
        if user is None:
            self.state.auth = AuthState()
            return False
        self._set_authenticated(user)
        return True

    async def logout(self) -> None:
        """Clear the session in memory and in storage."""
        username = self.state.auth.user.username if self.state.auth.user else None
        self.state.auth = AuthState()
        self._writer.schedule(self._auth_service.clear_session(), "logout")
        logger.info(f"Logged out {username or 'anonymous user'}")

    def clear_auth_error(self) -> None:
        self.state.auth.error = None

    def _set_authenticated(self, user: User) -> None:
        self.state.auth = AuthState(user=user, token=user.token, is_authenticated=True)

    def _set_auth_failure(self, message: str) -> None:
        auth = self.state.auth
        auth.is_loading = False
        auth.is_authenticated = False
        auth.user = None
        auth.token = None
        auth.error = message

    # Destinations

    async def fetch_destinations(self, query: str = "") -> list[Destination]:
        """Replace the destination list with the result of a search.

        Only the latest call may update the state. A failure empties the list
        and sets ``destinations.error``.
        """
        slice_ = self.state.destinations
        slice_.request_id += 1
        request_id = slice_.request_id
        slice_.is_loading = True
        slice_.error = None
        slice_.error_details = None

        try:
            destinations = await self._destination_service.fetch_destinations(query)
        except Exception as e:
            if request_id != slice_.request_id:
                logger.debug(f"Dropping failed stale destination search {query!r}: {e}")
                return slice_.destinations
            logger.warning(f"Destination search {query!r} failed: {e}")
            slice_.is_loading = False
            slice_.destinations = []
            slice_.error = self._destinations_error_message(e)
            slice_.error_details = extract_error_details(e)
            return []

        if request_id != slice_.request_id:
            logger.debug(f"Dropping stale destination search result for {query!r}")
            return slice_.destinations

        slice_.is_loading = False
        slice_.destinations = destinations
        return destinations

    @staticmethod
    def _destinations_error_message(error: Exception) -> str:
        if isinstance(error, StationSearchError):
            return str(error)
        if isinstance(error, UpstreamApiError) and error.upstream_message:
            return error.upstream_message
        return FETCH_DESTINATIONS_FAILED

    async def fetch_destination_by_id(self, destination_id: int) -> Destination:
        """Refresh one loaded destination and select it.

        Raises:
            DestinationNotFoundError: If no loaded destination has this id.
        """
        slice_ = self.state.destinations
        existing = selectors.select_destination_by_id(self.state, destination_id)
        if existing is None:
            error = DestinationNotFoundError(f"Destination not found: {destination_id}")
            slice_.error = FETCH_DESTINATION_FAILED
            slice_.error_details = extract_error_details(error)
            raise error

        slice_.is_loading = True
        slice_.error = None
        slice_.error_details = None
        try:
            refreshed = await self._destination_service.refresh_destination(existing)
        finally:
            slice_.is_loading = False
        slice_.selected_destination = refreshed
        return refreshed

    def set_selected_destination(self, destination: Destination) -> None:
        self.state.destinations.selected_destination = destination

    def clear_selected_destination(self) -> None:
        self.state.destinations.selected_destination = None

    # Favorites

    async def load_favorites(self) -> list[Destination]:
        self.state.favorites.favorites = await self._favorites.load()
        return self.state.favorites.favorites

    def add_favorite(self, destination: Destination) -> None:
        self._update_favorites(
            favorites_service.add_favorite(self.state.favorites.favorites, destination)
        )

    def remove_favorite(self, destination_id: int) -> None:
        self._update_favorites(
            favorites_service.remove_favorite(self.state.favorites.favorites, destination_id)
        )

    def toggle_favorite(self, destination: Destination) -> bool:
        """Add or remove a favorite. Returns whether it is now a favorite."""
        self._update_favorites(
            favorites_service.toggle_favorite(self.state.favorites.favorites, destination)
        )
        return selectors.is_favorite(self.state, destination.id)

    def _update_favorites(self, favorites: list[Destination]) -> None:
        self.state.favorites.favorites = favorites
        self._writer.schedule(self._favorites.save(list(favorites)), "favorites")

    # Theme

    async def load_theme(self) -> bool:
        self.state.theme.is_dark_mode = await self._theme.load()
        return self.state.theme.is_dark_mode

    def toggle_theme(self) -> bool:
        """Flip dark mode and persist it. Returns the new value."""
        self.set_theme(not self.state.theme.is_dark_mode)
        return self.state.theme.is_dark_mode

    def set_theme(self, is_dark_mode: bool) -> None:
        self.state.theme.is_dark_mode = is_dark_mode
        self._writer.schedule(self._theme.save(is_dark_mode), "theme")

    # Journey

    def set_journey_stations(
        self, from_station: str | None = None, to_station: str | None = None
    ) -> None:
        journey = self.state.journey
        if from_station is not None:
            journey.from_station = from_station
        if to_station is not None:
            journey.to_station = to_station

    def swap_stations(self) -> None:
        journey = self.state.journey
        journey.from_station, journey.to_station = journey.to_station, journey.from_station

    async def search_connections(
        self, from_station: str | None = None, to_station: str | None = None
    ) -> list[Connection]:
        """Search connections for the journey form. Errors clear the results."""
        self.set_journey_stations(from_station, to_station)
        journey = self.state.journey
        journey.is_loading = True
        journey.error = None
        try:
            connections = await self._journey_service.search_connections(
                journey.from_station, journey.to_station
            )
        except (ValidationFailedError, NoConnectionsError) as e:
            self._set_journey_failure(str(e))
            return []
        except Exception as e:
            logger.warning(
                f"Connection search {journey.from_station} -> {journey.to_station} failed: {e}"
            )
            self._set_journey_failure(CONNECTIONS_FAILED)
            return []

        journey.is_loading = False
        journey.connections = connections
        return connections

    def _set_journey_failure(self, message: str) -> None:
        journey = self.state.journey
        journey.is_loading = False
        journey.connections = []
        journey.error = message
