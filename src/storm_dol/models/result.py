"""
Date-of-loss result models.

Contains DTOs returned to report and claim-documentation consumers.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, Tuple


@dataclass(frozen=True)
class EventJustification:
    """Compact summary of one supporting event."""

    id: str
    type: str
    magnitude: Optional[float]
    distance_miles: Optional[float]  # rounded to 2 decimals
    direction_cardinal: Optional[str]
    time_utc: str
    source: str
    score: float


@dataclass(frozen=True)
class EventSummary:
    """Counts and peak magnitudes over the scored events."""

    hail_reports: int = 0
    wind_reports: int = 0
    warnings: int = 0
    other_events: int = 0
    max_hail_inches: Optional[float] = None
    max_wind_mph: Optional[float] = None


@dataclass(frozen=True)
class RejectedEvent:
    """An input event that was quarantined before scoring."""

    id: str
    reason: str


@dataclass(frozen=True)
class DOLResult:
    """Recommended date of loss with supporting evidence."""

    recommended_date_utc: str
    top_events: Tuple[EventJustification, ...]
    confidence: float
    total_events_scanned: int
    summary: EventSummary = field(default_factory=EventSummary)
    rejected_events: Tuple[RejectedEvent, ...] = ()

    @property
    def has_recommendation(self) -> bool:
        return bool(self.recommended_date_utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        result = asdict(self)
        result["top_events"] = [asdict(e) for e in self.top_events]
        result["rejected_events"] = [asdict(r) for r in self.rejected_events]
        return result
