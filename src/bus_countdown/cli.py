"""Interactive shell for resolving a stop countdown request."""

import argparse
import json
import logging
from collections.abc import Callable, Sequence

from bus_countdown.adapters.catalog.in_memory_catalog import InMemoryCatalog
from bus_countdown.adapters.config.app_config import AppConfig
from bus_countdown.application.services.request import Request
from bus_countdown.application.services.result_enumerator import results
from bus_countdown.domain.models.errors import InvalidRequest
from bus_countdown.domain.models.result import Result

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]
Out = Callable[[str], None]

NO_RESULTS_MESSAGE = "No matching departures."


def ask_optional(question: str, ask: Ask) -> str | None:
    """Ask a question whose empty answer means "skip"."""
    answer = ask(f"{question} ").strip()
    return answer or None


def ask_stop_countdown(
    ask: Ask,
    stop_query: str | None = None,
    route: str | None = None,
    direction: str | None = None,
) -> tuple[str, str | None, str | None]:
    """Prompt for the stop query, and for route and direction if not given."""
    while not stop_query:
        stop_query = ask("Stop location (Required): ").strip()
    if route is None:
        route = ask_optional("Bus Route (Enter to skip):", ask)
    if direction is None:
        direction = ask_optional("Bus Direction (Enter to skip):", ask)
    return stop_query, route, direction


def ask_list(question: str, entries: Sequence[str], ask: Ask, out: Out) -> int:
    """Show a numbered list and return the zero-based index of the chosen entry.

    Re-asks until the answer is a number within the list.
    """
    out(question)
    for i, entry in enumerate(entries, 1):
        out(f"\t{i}.\t{entry}")
    while True:
        answer = ask("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(entries):
            return int(answer) - 1
        out(f"Please enter a number between 1 and {len(entries)}.")


def _ask_selection(request: Request, ask: Ask, out: Out) -> Request:
    """Ask the user to pin down the first dimension that is still ambiguous."""
    if len(request.route_ids) > 1:
        n = ask_list("Which bus route are you looking for?", request.route_names, ask, out)
        return request.select_route(request.route_ids[n])
    if len(request.directions) > 1:
        n = ask_list("Which route direction are you looking for?", request.directions, ask, out)
        return request.select_direction(request.directions[n])
    n = ask_list("Which stop are you looking for?", request.stop_descriptions, ask, out)
    return request.select_stop(request.stop_ids[n])


def narrow_interactively(
    request: Request,
    ask: Ask,
    out: Out,
    refinement_mode: str = "fixed_point",
    max_result_choices: int = 5,
) -> list[Result]:
    """Refine the request, asking the user to disambiguate until few results remain.

    Returns the results of the final request; an empty list means no
    departures match. A selection that makes the request invalid is rejected
    and the previous request is kept.
    """
    request = request.refine(refinement_mode)
    while True:
        found = results(request)
        if request.is_resolved or len(found) <= max_result_choices:
            return found

        previous = request
        try:
            request = _ask_selection(request, ask, out).refine(refinement_mode)
        except InvalidRequest as e:
            logger.warning(f"Rejected selection: {e}")
            out(f"That choice does not fit the rest of your request ({e}). Please pick again.")
            request = previous


def choose_result(found: list[Result], ask: Ask, out: Out) -> Result | None:
    """Pick one result, asking only when there is more than one."""
    if not found:
        return None
    if len(found) == 1:
        return found[0]
    n = ask_list("Which request would you like?", [str(result) for result in found], ask, out)
    return found[n]


def run_countdown(
    args: argparse.Namespace,
    catalog: InMemoryCatalog,
    config: AppConfig,
    ask: Ask,
    out: Out,
) -> int:
    """Resolve a countdown request interactively and print the chosen result."""
    stop_query, route, direction = ask_stop_countdown(
        ask, args.stop_query, args.route, args.direction
    )
    try:
        request = Request.seed(
            catalog,
            stop_query,
            route=route,
            direction=direction,
            threshold=config.match_threshold,
        )
        found = narrow_interactively(
            request,
            ask,
            out,
            refinement_mode=config.refinement_mode,
            max_result_choices=config.max_result_choices,
        )
    except InvalidRequest as e:
        logger.warning(f"Invalid request for {stop_query!r}: {e}")
        out(f"Cannot resolve request: {e}")
        return 1

    chosen = choose_result(found, ask, out)
    if chosen is None:
        out(NO_RESULTS_MESSAGE)
        return 0
    out(str(chosen))
    return 0


def run_search(
    args: argparse.Namespace, catalog: InMemoryCatalog, config: AppConfig, out: Out
) -> int:
    """List stops matching a free-text query with their similarity scores."""
    threshold = args.threshold if args.threshold is not None else config.match_threshold
    matches = catalog.scored_stop_matches(args.query, threshold=threshold)

    if args.json:
        payload = [
            {"stop_id": stop.id, "stop_desc": stop.description, "score": round(score, 4)}
            for stop, score in matches
        ]
        out(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    if not matches:
        out(f"No stops found for '{args.query}'")
        return 1
    out(f"Found {len(matches)} stop(s):")
    for stop, score in matches:
        out(f"  {stop.description} (ID: {stop.id}, score {score:.2f})")
    return 0


def run_info(args: argparse.Namespace, catalog: InMemoryCatalog, out: Out) -> int:
    """Show the routes and directions serving a stop."""
    try:
        stop = catalog.stop(args.stop_id)
    except KeyError:
        out(f"Stop {args.stop_id} not found.")
        return 1

    route_names = sorted(catalog.route(route_id).short_name for route_id in stop.route_ids)
    directions = [d for d in catalog.direction_vocabulary() if d in stop.directions]
    if args.json:
        details = {
            "stop_id": stop.id,
            "stop_desc": stop.description,
            "routes": route_names,
            "directions": directions,
        }
        out(json.dumps(details, indent=2, ensure_ascii=False))
        return 0

    out("Stop Information:")
    out(f"  ID: {stop.id}")
    out(f"  Description: {stop.description}")
    out(f"  Routes: {', '.join(route_names) or 'none'}")
    out(f"  Directions: {', '.join(directions) or 'none'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="When is my bus coming? Resolve a stop query into a countdown request.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve a request interactively
  bus-countdown countdown "Kennedy Plaza" --route 1

  # Search for stops
  bus-countdown search "Kennedy"

  # Show stop details
  bus-countdown info 10010
        """,
    )
    parser.add_argument("--config", dest="config_file", help="Path to TOML configuration file")
    parser.set_defaults(command="countdown", stop_query=None, route=None, direction=None)

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    countdown_parser = subparsers.add_parser("countdown", help="Resolve a countdown request")
    countdown_parser.add_argument("stop_query", nargs="?", help="Stop location to search for")
    countdown_parser.add_argument("--route", help="Bus route identifier")
    countdown_parser.add_argument("--direction", help="Bus direction (e.g., Inbound, North)")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Stop location to search for")
    search_parser.add_argument("--threshold", type=float, help="Minimum similarity (0-1)")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    info_parser = subparsers.add_parser("info", help="Show stop information")
    info_parser.add_argument("stop_id", help="Stop ID")
    info_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def run_command(
    args: argparse.Namespace,
    catalog: InMemoryCatalog,
    config: AppConfig,
    ask: Ask = input,
    out: Out = print,
) -> int:
    """Dispatch a parsed command; returns the process exit status."""
    if args.command == "search":
        return run_search(args, catalog, config, out)
    if args.command == "info":
        return run_info(args, catalog, out)
    return run_countdown(args, catalog, config, ask, out)
