"""Command line entry point.

Examples:
  lakescope conditions                       # Conditions at normal pool
  lakescope conditions --elevation 606.5     # Conditions at a given level
  lakescope conditions --offline             # Skip the weather fetch
  lakescope serve --port 8000                # Run the API
  lakescope dashboard                        # Run the Streamlit dashboard
"""

import argparse
import logging
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from lakescope import __version__
from lakescope.lake import SARDIS_BOAT_RAMPS, SARDIS_LAKE, WATER_QUALITY
from lakescope.metrics import (
    DEFAULT_FISHING_CONDITIONS,
    assess_fishing,
    flood_impact,
    moon_phase,
    rate_recreation_day,
    recreation_score,
    solunar_periods,
    summarize_ramps,
)
from lakescope.sources import OpenMeteoClient

logger = logging.getLogger(__name__)


def print_conditions(
    elevation: float,
    water_temp_f: float,
    offline: bool = False,
    when: Optional[datetime] = None,
) -> None:
    """Print flood, ramp, moon, fishing and recreation figures."""
    when = when or datetime.now(timezone.utc)
    normal = SARDIS_LAKE.normal_pool_elevation

    print(f"\n{'=' * 50}")
    print(f"{SARDIS_LAKE.name} at {elevation:.1f} ft (normal pool {normal:.0f} ft)")
    print(f"{'=' * 50}")

    impact = flood_impact(elevation, normal)
    print("\nFlood impact:")
    print(f"  Difference:       {impact.difference_ft:+.1f} ft")
    print(f"  Additional acres: {impact.additional_acres}")
    print(f"  Structures:       {impact.impacted_structures}")
    print(f"  Evacuation zone:  {impact.evacuation_zone_sq_mi} sq mi")

    summary = summarize_ramps(elevation, normal, SARDIS_BOAT_RAMPS)
    print("\nBoat ramps:")
    for status in summary.statuses:
        print(f"  {status.ramp.name:<28} {status.status.value:<8} {status.message}")
    if summary.advisory:
        print(f"  ! {summary.advisory}")

    moon = moon_phase(when)
    periods = solunar_periods(when)
    print("\nMoon:")
    print(f"  {moon.icon} {moon.phase_name} ({moon.illumination_percent}% illuminated)")
    print(f"  Major: {', '.join(p.label for p in periods['major'])}")
    print(f"  Minor: {', '.join(p.label for p in periods['minor'])}")

    if offline:
        conditions = DEFAULT_FISHING_CONDITIONS
        snapshot = None
    else:
        result = OpenMeteoClient().fetch_snapshot()
        snapshot = result.value if result.ok else None
        conditions = assess_fishing(result, water_temp_f, when)

    print("\nFishing:")
    suffix = " (typical conditions)" if conditions.is_fallback else ""
    print(f"  Score: {conditions.overall_score}/100 {conditions.rating}{suffix}")
    if conditions.best_time:
        print(f"  Best time: {conditions.best_time}")
    for species in conditions.target_species:
        print(f"  {species.name}: {species.activity.value}")

    if snapshot is not None:
        score = recreation_score(
            snapshot.temperature,
            snapshot.precipitation_probability or 0,
            snapshot.wind_speed,
            snapshot.weather_code,
        )
        rating = rate_recreation_day(
            snapshot.temperature,
            snapshot.precipitation_probability or 0,
            snapshot.wind_speed,
            snapshot.weather_code,
        )
        print("\nRecreation:")
        print(f"  {snapshot.description}, {snapshot.temperature:.0f}°F, wind {snapshot.wind_speed:.0f} mph")
        print(f"  Score: {score} ({rating})")


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="lakescope",
        description="Sardis Lake conditions, API server and dashboard",
        epilog=__doc__.split("\n", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"lakescope {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress output except errors",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    conditions = subparsers.add_parser("conditions", help="Print current lake conditions")
    conditions.add_argument(
        "--elevation",
        type=float,
        default=SARDIS_LAKE.normal_pool_elevation,
        help="Lake elevation in ft (default: normal pool)",
    )
    conditions.add_argument(
        "--water-temp",
        type=float,
        default=WATER_QUALITY["temperature"],
        help="Water temperature in F",
    )
    conditions.add_argument(
        "--offline",
        action="store_true",
        help="Do not fetch weather; use typical fishing conditions",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("dashboard", help="Run the Streamlit dashboard")

    args = parser.parse_args(argv)

    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "conditions":
        print_conditions(args.elevation, args.water_temp, offline=args.offline)
        return 0

    if args.command == "serve":
        import uvicorn

        logger.info(f"Starting API on http://{args.host}:{args.port}")
        uvicorn.run("lakescope.api.app:app", host=args.host, port=args.port, reload=args.reload)
        return 0

    app_path = Path(__file__).parent / "dashboard" / "app.py"
    logger.info(f"Starting dashboard from {app_path}")
    return subprocess.call([sys.executable, "-m", "streamlit", "run", str(app_path)])


if __name__ == "__main__":
    sys.exit(main())
