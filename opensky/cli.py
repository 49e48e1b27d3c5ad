"""Command line access to the OpenSky API.

Usage examples:
    python -m opensky states --bbox 45.8 5.9 47.8 10.5
    python -m opensky states --icao24 ae1fa7 a50c7c --json
    python -m opensky own-states --serial 1000 1042
    python -m opensky flights --begin 1624800000 --end 1624890000 --icao24 a50c7c
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from opensky.client import OpenSkyClient
from opensky.config import settings
from opensky.errors import OpenSkyError
from opensky.models.flight import Flight
from opensky.models.query import BoundingBox
from opensky.models.state import StatesResponse

logger = logging.getLogger("opensky.cli")


def _client(args) -> OpenSkyClient:
    return OpenSkyClient(args.username, args.password)


def _print_states(response: StatesResponse, as_json: bool) -> None:
    if as_json:
        print(response.model_dump_json(indent=2))
        return

    print(f"{len(response.states)} states at {response.time.isoformat()}")
    for state in response.states:
        print(
            f"{state.icao24}: callsign={(state.callsign or '').strip() or 'n/a'}"
            f" country={state.origin_country}"
            f" lat={state.latitude} lon={state.longitude}"
            f" alt_m={state.baro_altitude} on_ground={state.on_ground}"
        )


def _print_flights(flights: list[Flight], as_json: bool) -> None:
    if as_json:
        print(json.dumps([f.model_dump(mode="json", by_alias=True) for f in flights], indent=2))
        return

    if len(flights) == 0:
        print("No flights found.")
    for flight in flights:
        print(
            f"{flight.icao24}: callsign={(flight.callsign or '').strip() or 'n/a'}"
            f" {flight.est_departure_airport or '????'} {flight.first_seen.isoformat()}"
            f" -> {flight.est_arrival_airport or '????'} {flight.last_seen.isoformat()}"
        )


async def cmd_states(args) -> None:
    bbox = BoundingBox(*args.bbox) if args.bbox else None
    response = await _client(args).get_states(args.time, args.icao24, bbox)
    _print_states(response, args.json)


async def cmd_own_states(args) -> None:
    response = await _client(args).get_own_states(args.time, args.icao24, args.serial)
    _print_states(response, args.json)


async def cmd_flights(args) -> None:
    client = _client(args)
    if args.icao24:
        flights = await client.get_flights_by_aircraft(args.icao24, args.begin, args.end)
    else:
        flights = await client.get_flights(args.begin, args.end)
    _print_flights(flights, args.json)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the OpenSky Network API")
    parser.add_argument("--username", help="OpenSky username (default: OPENSKY_USERNAME)")
    parser.add_argument("--password", help="OpenSky password (default: OPENSKY_PASSWORD)")
    sub = parser.add_subparsers(dest="command", required=True)

    states_cmd = sub.add_parser("states", help="Fetch state vectors of all aircraft")
    states_cmd.add_argument("--time", type=int, help="Unix time to query, defaults to now")
    states_cmd.add_argument("--icao24", nargs="+", help="Only these transponder addresses")
    states_cmd.add_argument(
        "--bbox",
        nargs=4,
        type=float,
        metavar=("LAMIN", "LOMIN", "LAMAX", "LOMAX"),
        help="Only aircraft inside this bounding box",
    )
    states_cmd.add_argument("--json", action="store_true", help="Return JSON output")
    states_cmd.set_defaults(func=cmd_states)

    own_cmd = sub.add_parser("own-states", help="Fetch state vectors seen by your receivers")
    own_cmd.add_argument("--time", type=int, help="Unix time to query, defaults to now")
    own_cmd.add_argument("--icao24", nargs="+", help="Only these transponder addresses")
    own_cmd.add_argument("--serial", nargs="+", type=int, help="Only these receiver serials")
    own_cmd.add_argument("--json", action="store_true", help="Return JSON output")
    own_cmd.set_defaults(func=cmd_own_states)

    flights_cmd = sub.add_parser("flights", help="Fetch flights within a time interval")
    flights_cmd.add_argument("--begin", type=int, required=True, help="Interval start (unix time)")
    flights_cmd.add_argument("--end", type=int, required=True, help="Interval end (unix time)")
    flights_cmd.add_argument("--icao24", help="Only flights of this aircraft")
    flights_cmd.add_argument("--json", action="store_true", help="Return JSON output")
    flights_cmd.set_defaults(func=cmd_flights)

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        asyncio.run(args.func(args))
    except OpenSkyError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
