#!/usr/bin/env python3
"""Print an itemized fare quote for local checking of pricing config changes.

Distance and duration are given directly, or looked up with the Distance Matrix
API when --from/--to are passed and a Maps key is configured.

Usage:
    python scripts/quote.py SEDAN --km 10 --minutes 20 --pickup 2026-03-13T17:00
    python scripts/quote.py SUV --from "SeaTac Airport" --to "Bellevue, WA" --pickup 2026-03-13T08:30 --tip 15
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for package import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ridefare.clients import get_distance_matrix_client
from ridefare.config import get_config, get_pricing_config
from ridefare.errors import RideFareError
from ridefare.models.route import RouteMetrics
from ridefare.money import format_currency
from ridefare.services.pricing import build_pricing_input, compute_price


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute a fare quote")
    parser.add_argument("vehicle", help="Vehicle class, e.g. SEDAN, SUV, VAN")
    parser.add_argument("--pickup", required=True, help="Pickup time, ISO 8601")
    parser.add_argument("--km", type=float, help="Driving distance in kilometers")
    parser.add_argument("--minutes", type=float, help="Driving time in minutes")
    parser.add_argument("--from", dest="origin", default="", help="Pickup location")
    parser.add_argument("--to", dest="destination", default="", help="Dropoff location")
    parser.add_argument("--tip", type=float, default=0, help="Tip percent")
    parser.add_argument("--tolls", type=float, default=0)
    parser.add_argument("--wait", type=float, default=0, help="Wait minutes at pickup")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not (args.km is not None and args.minutes is not None) and not (args.origin and args.destination):
        print("❌ Pass --km and --minutes, or --from and --to")
        return 2

    pickup_at = datetime.fromisoformat(args.pickup)
    now = datetime.now(pickup_at.tzinfo)

    try:
        if args.km is not None and args.minutes is not None:
            route = RouteMetrics(distance_km=args.km, duration_min=args.minutes)
        else:
            route = get_distance_matrix_client().get_route_metrics(args.origin, args.destination)

        pricing_input = build_pricing_input(
            vehicle_type=args.vehicle.upper(),
            pickup_location=args.origin,
            dropoff_location=args.destination,
            pickup_at=pickup_at,
            route=route,
            now=now,
            tip_percent=args.tip,
            tolls=args.tolls,
            wait_minutes=args.wait,
        )
        breakdown = compute_price(pricing_input, get_pricing_config())
    except RideFareError as e:
        print(f"❌ {e.message}")
        return 1

    currency = breakdown.currency
    print(f"{breakdown.vehicle}: {route.distance_km:.2f} km, {route.duration_min:.0f} min")
    print()
    print(f"  Base fare        {format_currency(breakdown.base_fare, currency)}")
    print(f"  Distance         {format_currency(breakdown.distance_fee, currency)}")
    print(f"  Time             {format_currency(breakdown.time_fee, currency)}")
    print(f"  Pickup-time      ×{breakdown.pickup_time_multiplier:.2f}")
    print(f"  Lead-time        ×{breakdown.lead_time_multiplier:.2f}")
    print(f"  Waiting time     {format_currency(breakdown.wait_fee, currency)}")
    print(f"  Tolls            {format_currency(breakdown.tolls, currency)}")
    print(f"  Airport fee      {format_currency(breakdown.airport_fee, currency)}")
    print(f"  Subtotal         {format_currency(breakdown.pre_tax_subtotal, currency)}")
    print(f"  Tax              {format_currency(breakdown.tax, currency)}")
    print(f"  Tip              {format_currency(breakdown.tip, currency)}")
    print()
    print(f"✅ Total {format_currency(breakdown.total, currency)}" + (" (minimum fare)" if breakdown.min_fare_applied else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())
