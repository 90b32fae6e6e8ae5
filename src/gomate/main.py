"""Main entry point: opens a session, loads the home screen destinations and exits."""

import asyncio
import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from gomate.adapters.config import AppConfig
from gomate.adapters.storage import JsonFileKeyValueStore
from gomate.application.store import AppStore
from gomate.bootstrap import create_app_store

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@asynccontextmanager
async def app_session(config: AppConfig) -> AsyncIterator[AppStore]:
    """Yield a started AppStore and flush pending writes on exit."""
    storage = JsonFileKeyValueStore(config.storage_path)
    async with aiohttp.ClientSession() as session:
        store = create_app_store(config, session, storage)
        async with store:
            yield store


async def main() -> None:
    """Load the default destinations and log a short summary."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        config.get_default_stations()
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    async with app_session(config) as store:
        destinations = await store.fetch_destinations("")
        if store.state.destinations.error:
            logger.error(f"Could not load destinations: {store.state.destinations.error}")
            sys.exit(1)
        for destination in destinations:
            logger.info(
                f"{destination.id:>2} {destination.name} ({destination.transport_type}): "
                f"next {destination.departures[0].time if destination.departures else '--:--'}"
            )


if __name__ == "__main__":
    asyncio.run(main())
