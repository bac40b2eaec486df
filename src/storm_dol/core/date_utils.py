"""
Date and timezone utilities.

Centralizes event timestamp handling. Events are grouped by the calendar date
written at the start of their ``time_utc`` string, so that prefix is validated
here instead of being trusted blindly.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
import pytz

from . import constants
from .exceptions import InvalidEventError


class DateUtils:
    """Utilities for event timestamp handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def event_date(time_utc: str) -> str:
        """
        Extract the calendar date key from an event timestamp.

        Args:
            time_utc: ISO-8601 timestamp (e.g., '2024-06-01T10:00:00Z')

        Returns:
            The 'YYYY-MM-DD' prefix of the timestamp

        Raises:
            InvalidEventError: If the timestamp does not start with a real calendar date
        """
        if not isinstance(time_utc, str) or len(time_utc) < constants.EVENT_DATE_LENGTH:
            raise InvalidEventError(f"Invalid event timestamp: {time_utc!r}")

        prefix = time_utc[:constants.EVENT_DATE_LENGTH]
        # strptime tolerates unpadded fields, so check the shape as well
        if prefix[4] != "-" or prefix[7] != "-" or not (prefix[:4] + prefix[5:7] + prefix[8:]).isdigit():
            raise InvalidEventError(f"Invalid event timestamp: {time_utc!r}")

        try:
            datetime.strptime(prefix, constants.EVENT_DATE_FORMAT)
        except ValueError:
            raise InvalidEventError(f"Invalid calendar date in timestamp: {time_utc!r}")

        return prefix

    @staticmethod
    def is_valid_event_date(time_utc: str) -> bool:
        """Check whether a timestamp carries a usable calendar date prefix."""
        try:
            DateUtils.event_date(time_utc)
        except InvalidEventError:
            return False
        return True

    @staticmethod
    def parse_utc(time_utc: str) -> datetime:
        """
        Parse an ISO-8601 timestamp to an aware UTC datetime.

        Naive timestamps are assumed to be UTC; a trailing 'Z' is accepted.

        Args:
            time_utc: ISO-8601 timestamp

        Returns:
            Timezone-aware datetime in UTC

        Raises:
            InvalidEventError: If the timestamp cannot be parsed
        """
        DateUtils.event_date(time_utc)

        text = time_utc.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"

        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidEventError(f"Unparseable event timestamp: {time_utc!r}")

        return DateUtils.to_utc(dt)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    def get_lookback_range(
        self,
        days_back: int,
        reference_time: Optional[datetime] = None
    ) -> Tuple[datetime, datetime]:
        """
        Get the look-back window ending at the reference time.

        Args:
            days_back: Number of days to look back
            reference_time: End of the window (defaults to now in UTC)

        Returns:
            Tuple of (start_datetime, end_datetime), both aware UTC datetimes
        """
        if days_back < 0:
            raise ValueError(f"days_back must be >= 0, got {days_back}")

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)

        end_datetime = self.to_utc(reference_time)
        start_datetime = end_datetime - timedelta(days=days_back)

        self.logger.debug(
            f"Look-back window: {start_datetime.isoformat()} to {end_datetime.isoformat()}"
        )

        return start_datetime, end_datetime
