from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from core.logging.logger import StructuredLogger, get_logger
from domain.enums import EndpointScope
from domain.requests import (
    DEFAULT_PAGE_SIZE,
    CachePolicy,
    LeaguesRequest,
    MatchesRequest,
    PlayersRequest,
    SeriesRequest,
    TeamsRequest,
    TournamentsRequest,
)
from domain.requests.base import APIRequest
from infrastructure.api import APIError, ClientConfiguration, StarCraftClient
from .formatting import render_json, render_text

_SCOPES = [s.value for s in EndpointScope]


def _scope(args: argparse.Namespace) -> EndpointScope:
    return EndpointScope(getattr(args, "scope", EndpointScope.ALL.value))


def _request_options(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {"page": args.page, "page_size": args.page_size}
    if args.no_cache:
        options["cache_policy"] = CachePolicy.no_cache()
    return options


def _leagues(args: argparse.Namespace) -> APIRequest:
    return LeaguesRequest(**_request_options(args))


def _matches(args: argparse.Namespace) -> APIRequest:
    return MatchesRequest(_scope(args), tournament_id=args.tournament, **_request_options(args))


def _players(args: argparse.Namespace) -> APIRequest:
    search = {"name": args.search} if args.search else None
    return PlayersRequest(search=search, nationality=args.nationality, **_request_options(args))


def _teams(args: argparse.Namespace) -> APIRequest:
    search = {"name": args.search} if args.search else None
    return TeamsRequest(search=search, **_request_options(args))


def _series(args: argparse.Namespace) -> APIRequest:
    return SeriesRequest(_scope(args), year=args.year, **_request_options(args))


def _tournaments(args: argparse.Namespace) -> APIRequest:
    return TournamentsRequest(_scope(args), tier=args.tier, **_request_options(args))


RequestFactory = Callable[[argparse.Namespace], APIRequest]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starcraft",
        description="Query PandaScore StarCraft II esports data.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--page", type=int, default=1)
    common.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE)
    common.add_argument("--all", action="store_true", help="follow pages until the last one")
    common.add_argument("--max-pages", type=int, default=None, help="page limit for --all")
    common.add_argument("--json", action="store_true", help="print results as JSON")
    common.add_argument("--no-cache", action="store_true")
    common.add_argument("--rate-limit", action="store_true", help="print the remaining quota to stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("leagues", parents=[common], help="list leagues")
    p.set_defaults(factory=_leagues)

    p = sub.add_parser("matches", parents=[common], help="list matches")
    p.add_argument("--scope", choices=_SCOPES, default=EndpointScope.ALL.value)
    p.add_argument("--tournament", type=int, default=None, help="only matches of this tournament id")
    p.set_defaults(factory=_matches)

    p = sub.add_parser("players", parents=[common], help="list or search players")
    p.add_argument("--search", default=None, help="name to search for")
    p.add_argument("--nationality", default=None, help="two-letter country code")
    p.set_defaults(factory=_players)

    p = sub.add_parser("teams", parents=[common], help="list or search teams")
    p.add_argument("--search", default=None, help="name to search for")
    p.set_defaults(factory=_teams)

    p = sub.add_parser("series", parents=[common], help="list series")
    p.add_argument("--scope", choices=_SCOPES, default=EndpointScope.ALL.value)
    p.add_argument("--year", type=int, default=None)
    p.set_defaults(factory=_series)

    p = sub.add_parser("tournaments", parents=[common], help="list tournaments")
    p.add_argument("--scope", choices=_SCOPES, default=EndpointScope.ALL.value)
    p.add_argument("--tier", default=None)
    p.set_defaults(factory=_tournaments)

    return parser


class QueryCommand:
    """Runs one resource query and prints the results to stdout."""

    def __init__(
        self,
        configuration: Optional[ClientConfiguration] = None,
        *,
        client_factory: Callable[[ClientConfiguration], StarCraftClient] = StarCraftClient,
    ) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")
        self._configuration = configuration
        self._client_factory = client_factory

    async def run(self, argv: Optional[List[str]] = None) -> int:
        args = build_parser().parse_args(argv)
        try:
            configuration = self._configuration or ClientConfiguration.from_environment()
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2

        try:
            request = args.factory(args)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2

        async with self._client_factory(configuration) as client:
            try:
                if args.all:
                    items = await client.execute_paginated(request, max_pages=args.max_pages)
                else:
                    items = await client.execute(request)
            except APIError as exc:
                self.logger.error(lambda: f"{args.command} failed: {exc!r}")
                print(f"Error: {exc}", file=sys.stderr)
                return 1

            if args.json:
                print(render_json(items))
            else:
                for line in render_text(items):
                    print(line)

            if args.rate_limit:
                status = client.rate_limit_status()
                reset = status.reset_time.isoformat() if status.reset_time else "unknown"
                remaining = "unknown" if status.remaining is None else status.remaining
                print(f"Rate limit: {remaining} remaining, resets {reset}", file=sys.stderr)

        self.logger.info(lambda: f"{args.command}: {len(items)} results")
        return 0
