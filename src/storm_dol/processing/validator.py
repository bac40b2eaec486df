"""
Event validation module.

Quarantines weather events that would otherwise corrupt date grouping or be
scored from a meaningless location.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from ..algorithms.geo import centroid
from ..algorithms.scoring import UnresolvedLocationPolicy
from ..core.date_utils import DateUtils
from ..core.exceptions import InvalidEventError
from ..models.event import WeatherEvent
from ..models.result import RejectedEvent


class EventValidator:
    """Validate normalized weather events before scoring."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize event validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_event(
        self,
        event: WeatherEvent,
        policy: UnresolvedLocationPolicy = UnresolvedLocationPolicy.EXCLUDE,
        require_timestamp: bool = False
    ) -> List[str]:
        """
        Check a single event.

        Args:
            event: Weather event
            policy: Unresolved location policy
            require_timestamp: Also require a fully parseable ISO-8601 timestamp

        Returns:
            List of problems (empty when the event is usable)
        """
        errors = []

        try:
            if require_timestamp:
                DateUtils.parse_utc(event.time_utc)
            else:
                DateUtils.event_date(event.time_utc)
        except InvalidEventError as e:
            errors.append(str(e))

        if event.magnitude is not None and event.magnitude < 0:
            errors.append(f"Negative magnitude: {event.magnitude}")

        if policy is UnresolvedLocationPolicy.EXCLUDE and centroid(event.geometry) is None:
            errors.append("Event location could not be resolved")

        return errors

    def partition(
        self,
        events: Iterable[WeatherEvent],
        policy: UnresolvedLocationPolicy = UnresolvedLocationPolicy.EXCLUDE,
        require_timestamp: bool = False
    ) -> Tuple[List[WeatherEvent], List[RejectedEvent]]:
        """
        Split events into usable and rejected.

        Args:
            events: Weather events
            policy: Unresolved location policy
            require_timestamp: Also require a fully parseable ISO-8601 timestamp

        Returns:
            Tuple of (accepted_events, rejected_events)
        """
        accepted: List[WeatherEvent] = []
        rejected: List[RejectedEvent] = []

        for event in events:
            errors = self.validate_event(event, policy, require_timestamp)
            if errors:
                reason = "; ".join(errors)
                self.logger.warning(f"Rejected event {event.id}: {reason}")
                rejected.append(RejectedEvent(id=event.id, reason=reason))
            else:
                accepted.append(event)

        if rejected:
            self.logger.info(f"Accepted {len(accepted)} events, rejected {len(rejected)}")

        return accepted, rejected
