"""Composition root wiring adapters into the application store."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from gomate.adapters.auth_api import DummyJsonAuthRepository
from gomate.adapters.transport_api import OpenDataTransportRepository
from gomate.application.services import (
    AuthService,
    BackgroundWriter,
    DestinationBuilder,
    DestinationService,
    FavoritesService,
    JourneyPlannerService,
    ThemeService,
)
from gomate.application.store import AppStore

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from gomate.adapters.config import AppConfig
    from gomate.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)


def create_app_store(
    config: AppConfig,
    session: ClientSession,
    storage: KeyValueStore,
    rng: random.Random | None = None,
) -> AppStore:
    """Build an AppStore backed by the live APIs.

    Args:
        config: Application configuration.
        session: Shared aiohttp session for every upstream request.
        storage: Key-value store for session, favorites and theme.
        rng: Random generator for cosmetic ratings and mock user ids.
    """
    rng = rng or random.Random()
    tz = config.tzinfo
    default_stations = config.get_default_stations()

    transport_repo = OpenDataTransportRepository(
        session=session,
        base_url=config.transport_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
        tz=tz,
    )
    auth_repo = DummyJsonAuthRepository(
        session=session,
        base_url=config.auth_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
    )

    destination_service = DestinationService(
        transport_repo,
        DestinationBuilder(tz=tz, rng=rng),
        default_stations,
        search_result_limit=config.search_result_limit,
        stationboard_limit=config.stationboard_limit,
        refresh_stationboard_limit=config.refresh_stationboard_limit,
        refresh_fallback_limit=config.refresh_fallback_limit,
        tz=tz,
    )
    logger.debug(f"Wired app store with {len(default_stations)} default station(s)")

    return AppStore(
        auth_service=AuthService(auth_repo, storage, rng=rng),
        destination_service=destination_service,
        journey_service=JourneyPlannerService(transport_repo, limit=config.connections_limit),
        favorites=FavoritesService(storage),
        theme=ThemeService(storage),
        writer=BackgroundWriter(),
    )
