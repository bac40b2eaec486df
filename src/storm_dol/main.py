"""
Main entry point for the date-of-loss engine.

Reads a JSON list of weather events, analyzes them for one property and
prints the result as JSON.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from .core import Config, setup_logger
from .analyzer import DOLAnalyzer


def load_events(events_file: str) -> List[Any]:
    """
    Load raw event records from a JSON file.

    Accepts either a list of records or an object with an 'events' list.

    Args:
        events_file: Path to the JSON file

    Returns:
        List of raw records
    """
    path = Path(events_file)
    if not path.exists():
        raise FileNotFoundError(f"Events file not found: {events_file}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("events")

    if not isinstance(data, list):
        raise ValueError(f"Events file must contain a list of events: {events_file}")

    return data


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather event scoring and date-of-loss selection"
    )
    parser.add_argument(
        "--events",
        type=str,
        required=True,
        help="Path to JSON file with weather events"
    )
    parser.add_argument("--lat", type=float, required=True, help="Property latitude")
    parser.add_argument("--lon", type=float, required=True, help="Property longitude")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--days-back",
        type=int,
        default=None,
        help="Only consider events from the last N days"
    )
    parser.add_argument(
        "--as-of",
        type=str,
        default=None,
        help="End of the look-back window (YYYY-MM-DD). Default: now"
    )

    args = parser.parse_args(argv)

    as_of = None
    if args.as_of:
        try:
            # Window ends at the close of the given day
            as_of = datetime.strptime(args.as_of, "%Y-%m-%d").replace(hour=23, minute=59, second=59)
        except ValueError:
            print(f"Invalid date format: {args.as_of}. Use YYYY-MM-DD", file=sys.stderr)
            return 1

    if args.days_back is not None and args.days_back < 1:
        print(f"--days-back must be a positive integer, got {args.days_back}", file=sys.stderr)
        return 1

    try:
        config = Config(args.config)
        logger = setup_logger(
            log_file=config.log_file,
            log_level=config.log_level,
            log_to_file=config.log_to_file
        )
        logger.info(f"Configuration: {config}")

        raw_events = load_events(args.events)
        analyzer = DOLAnalyzer(config=config, logger=logger)
        result = analyzer.analyze_raw(
            args.lat,
            args.lon,
            raw_events,
            as_of=as_of,
            days_back=args.days_back
        )
    except Exception as e:
        print(f"Analysis failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
