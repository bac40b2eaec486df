"""
Look-back window filtering.

Restricts events to the days preceding a reference time, the way a
"how many days back" search is scoped.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..core.date_utils import DateUtils
from ..models.event import WeatherEvent


def filter_by_window(
    events: Iterable[WeatherEvent],
    days_back: int,
    as_of: Optional[datetime] = None,
    logger: Optional[logging.Logger] = None
) -> List[WeatherEvent]:
    """
    Keep events whose timestamp falls inside [as_of - days_back, as_of].

    Both bounds are inclusive. Timestamps without an offset are read as UTC.

    Args:
        events: Weather events with valid timestamps
        days_back: Window length in days
        as_of: End of the window (defaults to now)
        logger: Logger instance

    Returns:
        Events inside the window, in input order
    """
    logger = logger or logging.getLogger(__name__)
    start, end = DateUtils(logger).get_lookback_range(days_back, as_of)

    kept = []
    for event in events:
        timestamp = DateUtils.parse_utc(event.time_utc)
        if start <= timestamp <= end:
            kept.append(event)

    logger.debug(f"Window kept {len(kept)} events between {start.date()} and {end.date()}")
    return kept
