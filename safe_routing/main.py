#!/usr/bin/env python3
"""
Safe Routing - Command Line Interface

Plans the three recommended routes between two points and prints their
safety summary and the crime zones each one passes.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import RoutingConfig
from .data import JsonZoneStore, Point, ZoneSnapshotHolder
from .algorithms import RoutePlanner, CRIME_TYPE_LABELS
from .exceptions import SafeRoutingError
from .providers import OSRMRoutingProvider, NominatimGeocoder

PRESETS = {
    'balanced': RoutingConfig.create_balanced_config,
    'conservative': RoutingConfig.create_conservative_config,
    'speed': RoutingConfig.create_speed_focused_config,
}


def parse_point(value: str) -> Point:
    try:
        lat, lng = (float(part) for part in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'lat,lng', got {value!r}")
    return Point(lat, lng)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Safety-aware route planner")
    parser.add_argument("--from", dest="source", default="17.7047,83.2113",
                        help="Start as 'lat,lng' or a place name (default: Gajuwaka)")
    parser.add_argument("--to", dest="destination", default="17.7200,83.3150",
                        help="Destination as 'lat,lng' or a place name (default: Siripuram)")
    parser.add_argument("--zones", default=None, help="Path to a safety zone JSON file")
    parser.add_argument("--osrm-url", default=None, help="OSRM server URL")
    parser.add_argument("--preset", default="balanced", choices=sorted(PRESETS),
                        help="Routing configuration preset")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    return parser


async def run(args: argparse.Namespace) -> int:
    config = PRESETS[args.preset]()
    holder = ZoneSnapshotHolder(JsonZoneStore(args.zones))
    planner = RoutePlanner(
        OSRMRoutingProvider(args.osrm_url, timeout=config.provider_timeout_seconds),
        holder,
        config,
        geocoder=NominatimGeocoder(),
    )

    try:
        source = parse_point(args.source)
        destination = parse_point(args.destination)
        result = await planner.plan(source, destination)
    except argparse.ArgumentTypeError:
        result = await planner.plan_from_queries(args.source, args.destination)

    print(f"Routes from {result.source} to {result.destination} "
          f"({result.zone_count} safety zones, {result.candidates_considered} candidates)")

    for route in result.routes:
        summary = route.get_summary()
        print(f"\n{summary['type'].upper()}{' (adjusted)' if summary['adjusted'] else ''}")
        print(f"   Distance: {summary['distance_km']} km")
        print(f"   Duration: {summary['duration_min']} min")
        print(f"   Safety:   {summary['safety_score']} ({summary['risk_level']})")
        for warning in route.warnings:
            print(f"   ! {warning}")
        for hit in route.crime_zones[:5]:
            print(f"   - {CRIME_TYPE_LABELS[hit.crime_type]}: {hit.area} "
                  f"(safety {hit.safety_score}, {hit.distance_meters:.0f}m away)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        return asyncio.run(run(args))
    except SafeRoutingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
