"""Command-line interface for GoMate."""

import argparse
import asyncio
import json
import sys

from gomate.adapters.config import AppConfig
from gomate.application.errors import DestinationNotFoundError
from gomate.application.store import AppStore, selectors
from gomate.domain.models.destination import Destination
from gomate.main import app_session, configure_logging


def print_destinations(destinations: list[Destination], store: AppStore) -> None:
    """Print one block per destination."""
    for destination in destinations:
        star = "*" if selectors.is_favorite(store.state, destination.id) else " "
        print(f"{star}[{destination.id}] {destination.name} - {destination.location}")
        print(f"    {destination.transport_type} | {destination.status} | {destination.rating:.1f}")
        print(f"    Schedule: {destination.schedule}")


def print_departures(destination: Destination) -> None:
    print(f"\n{destination.name} ({destination.location})")
    print("=" * 70)
    if not destination.departures:
        print("No departures.")
        return
    for departure in destination.departures:
        line = f"{departure.category} {departure.number}".strip()
        print(
            f"  {departure.time}  {line:<10} → {departure.destination:<30} "
            f"Platform {departure.platform}"
        )


async def run_search(store: AppStore, query: str, as_json: bool) -> int:
    destinations = await store.fetch_destinations(query)
    if store.state.destinations.error:
        print(f"Error: {store.state.destinations.error}", file=sys.stderr)
        return 1
    if as_json:
        payload = [d.model_dump(mode="json", by_alias=True) for d in destinations]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(f"\nFound {len(destinations)} destination(s):\n")
        print_destinations(destinations, store)
    return 0


async def run_departures(store: AppStore, destination_id: int, query: str) -> int:
    await store.fetch_destinations(query)
    if store.state.destinations.error:
        print(f"Error: {store.state.destinations.error}", file=sys.stderr)
        return 1
    try:
        destination = await store.fetch_destination_by_id(destination_id)
    except DestinationNotFoundError:
        print(f"Destination {destination_id} not found.", file=sys.stderr)
        return 1
    print_departures(destination)
    return 0


async def run_journey(store: AppStore, from_station: str, to_station: str) -> int:
    connections = await store.search_connections(from_station, to_station)
    if store.state.journey.error:
        print(f"Error: {store.state.journey.error}", file=sys.stderr)
        return 1
    print(f"\n{from_station} → {to_station}: {len(connections)} connection(s)\n")
    for connection in connections:
        print(
            f"  {connection.departure} → {connection.arrival}  ({connection.duration}, "
            f"{connection.transfers} transfer(s), platform {connection.platform})"
        )
        print(f"    {connection.train_type}")
        print(f"    {selectors.full_train_names(connection)}")
    return 0


async def run_login(store: AppStore, username: str, password: str) -> int:
    user = await store.login(username, password)
    if user is None:
        print(f"Error: {store.state.auth.error}", file=sys.stderr)
        return 1
    print(f"Logged in as {selectors.display_name(user)} ({selectors.user_handle(user)})")
    return 0


async def run_logout(store: AppStore) -> int:
    if not selectors.select_is_authenticated(store.state):
        print("Not logged in.")
        return 0
    await store.logout()
    print("Logged out.")
    return 0


async def run_favorites(
    store: AppStore, action: str, destination_id: int | None, query: str
) -> int:
    if action == "list":
        favorites = selectors.select_favorites(store.state)
        if not favorites:
            print("No favorites yet.")
            return 0
        print_destinations(favorites, store)
        return 0

    if destination_id is None:
        print("Error: toggle requires a destination id", file=sys.stderr)
        return 1
    await store.fetch_destinations(query)
    destination = selectors.select_destination_by_id(store.state, destination_id)
    if destination is None:
        print(f"Destination {destination_id} not found.", file=sys.stderr)
        return 1
    if store.toggle_favorite(destination):
        print(f"Added {destination.name} to favorites.")
    else:
        print(f"Removed {destination.name} from favorites.")
    return 0


async def run_theme(store: AppStore, action: str | None) -> int:
    if action == "toggle":
        store.toggle_theme()
    elif action in ("dark", "light"):
        store.set_theme(action == "dark")
    print(f"Theme: {'dark' if selectors.select_is_dark_mode(store.state) else 'light'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomate",
        description="GoMate - Swiss public transport companion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Browse the default destinations
  gomate search

  # Search destinations by station name
  gomate search "Zurich"

  # Departures for the first search result
  gomate departures 1 "Zurich"

  # Plan a journey
  gomate journey "Zürich HB" "Bern"
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="List destinations")
    search_parser.add_argument("query", nargs="?", default="", help="Station name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser(
        "departures", help="Show the remaining departures of today for a destination"
    )
    departures_parser.add_argument("id", type=int, help="Destination id from the search")
    departures_parser.add_argument("query", nargs="?", default="", help="Search used for ids")

    journey_parser = subparsers.add_parser("journey", help="Plan a journey")
    journey_parser.add_argument("from_station", help="Departure station")
    journey_parser.add_argument("to_station", help="Destination station")

    login_parser = subparsers.add_parser("login", help="Log in")
    login_parser.add_argument("username")
    login_parser.add_argument("password")

    subparsers.add_parser("logout", help="Log out")

    favorites_parser = subparsers.add_parser("favorites", help="List or toggle favorites")
    favorites_parser.add_argument("action", choices=["list", "toggle"])
    favorites_parser.add_argument("id", type=int, nargs="?", help="Destination id to toggle")
    favorites_parser.add_argument("query", nargs="?", default="", help="Search used for ids")

    theme_parser = subparsers.add_parser("theme", help="Show or change the theme")
    theme_parser.add_argument("action", nargs="?", choices=["toggle", "dark", "light"])

    return parser


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Run one subcommand against a started store."""
    async with app_session(config) as store:
        if args.command == "search":
            return await run_search(store, args.query, args.json)
        if args.command == "departures":
            return await run_departures(store, args.id, args.query)
        if args.command == "journey":
            return await run_journey(store, args.from_station, args.to_station)
        if args.command == "login":
            return await run_login(store, args.username, args.password)
        if args.command == "logout":
            return await run_logout(store)
        if args.command == "favorites":
            return await run_favorites(store, args.action, args.id, args.query)
        if args.command == "theme":
            return await run_theme(store, args.action)
    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        return await run(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
