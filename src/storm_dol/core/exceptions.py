"""
Exceptions raised by the date-of-loss engine.
"""


class StormDolError(Exception):
    """Base exception for date-of-loss errors."""
    pass


class InvalidEventError(StormDolError, ValueError):
    """Raised when a weather event record cannot be used for scoring."""

    def __init__(self, message: str, event_id: str = None):
        super().__init__(message)
        self.event_id = event_id


class InvalidLocationError(StormDolError, ValueError):
    """Raised when a property location is not a usable WGS84 coordinate."""
    pass
