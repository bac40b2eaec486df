"""
Date-of-loss selection module.

Picks the calendar date with the strongest single supporting event and
assembles the ranked evidence for it.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.event import EventType, ScoredEvent
from ..models.result import DOLResult, EventJustification, EventSummary


def rank_dates(by_date: Dict[str, float]) -> List[str]:
    """
    Order dates by their best event score, highest first.

    Equal scores resolve to the earliest date.

    Args:
        by_date: Mapping of 'YYYY-MM-DD' to max event score

    Returns:
        Dates in ranking order
    """
    return sorted(by_date, key=lambda date: (-by_date[date], date))


def justify(scored_event: ScoredEvent) -> EventJustification:
    """Build the compact justification record for one event."""
    distance = scored_event.distance_miles
    return EventJustification(
        id=scored_event.id,
        type=scored_event.type.value,
        magnitude=scored_event.magnitude,
        distance_miles=round(distance, constants.DISTANCE_DECIMALS) if distance is not None else None,
        direction_cardinal=scored_event.direction_cardinal,
        time_utc=scored_event.time_utc,
        source=scored_event.source,
        score=scored_event.score,
    )


def summarize_events(scored_events: Sequence[ScoredEvent]) -> EventSummary:
    """
    Count events by kind and find peak hail size and wind speed.

    Args:
        scored_events: Scored events

    Returns:
        EventSummary
    """
    warning_types = (EventType.TOR_WARNING, EventType.SVR_WARNING, EventType.FF_WARNING)

    hail = [e.magnitude for e in scored_events if e.type is EventType.HAIL_REPORT]
    wind = [e.magnitude for e in scored_events if e.type is EventType.WIND_REPORT]
    warnings = sum(1 for e in scored_events if e.type in warning_types)

    hail_sizes = [m for m in hail if m is not None]
    wind_speeds = [m for m in wind if m is not None]

    return EventSummary(
        hail_reports=len(hail),
        wind_reports=len(wind),
        warnings=warnings,
        other_events=len(scored_events) - len(hail) - len(wind) - warnings,
        max_hail_inches=max(hail_sizes) if hail_sizes else None,
        max_wind_mph=max(wind_speeds) if wind_speeds else None,
    )


def confidence_from_score(best_score: float) -> float:
    """Normalize a best event score to a confidence in [0, 1]."""
    return min(1.0, best_score / constants.CONFIDENCE_SCALE)


class DOLSelector:
    """Select the recommended date of loss from scored events."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize selector.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def pick_dol(
        self,
        scored_events: Sequence[ScoredEvent],
        by_date: Dict[str, float]
    ) -> DOLResult:
        """
        Pick the best-supported date and its top evidence.

        Args:
            scored_events: All scored events
            by_date: Mapping of 'YYYY-MM-DD' to max event score

        Returns:
            DOLResult (empty recommendation when there are no dated events)
        """
        if not by_date:
            self.logger.debug("No dated events; returning empty recommendation")
            return DOLResult(
                recommended_date_utc="",
                top_events=(),
                confidence=0,
                total_events_scanned=len(scored_events),
            )

        ranked = rank_dates(by_date)
        best_date = ranked[0]
        best_score = by_date[best_date]

        if len(ranked) > 1 and by_date[ranked[1]] == best_score:
            self.logger.info(
                f"Dates {best_date} and {ranked[1]} tie at score {best_score:.2f}; "
                f"choosing earliest"
            )

        # sorted() is stable, so equal scores keep input order
        day_events = sorted(
            (e for e in scored_events if DateUtils.event_date(e.time_utc) == best_date),
            key=lambda e: e.score,
            reverse=True,
        )
        top_events = tuple(justify(e) for e in day_events[:constants.TOP_EVENTS_LIMIT])

        confidence = confidence_from_score(best_score)

        self.logger.debug(
            f"Selected {best_date} (best score {best_score:.2f}, "
            f"{len(day_events)} events that day, confidence {confidence:.2f})"
        )

        return DOLResult(
            recommended_date_utc=best_date,
            top_events=top_events,
            confidence=confidence,
            total_events_scanned=len(scored_events),
        )


def pick_dol(scored_events: Sequence[ScoredEvent], by_date: Dict[str, float]) -> DOLResult:
    """Pick the date of loss with the default selector."""
    return DOLSelector().pick_dol(scored_events, by_date)
