"""
Tests for date-of-loss selection.
"""

import pytest
from src.storm_dol.algorithms import (
    DOLSelector,
    EventScorer,
    pick_dol,
    rank_dates,
    score_events_for_property,
    summarize_events,
)
from src.storm_dol.models import EventType, ScoredEvent, WeatherEvent


class TestPickDOL:
    """Test cases for pick_dol."""

    def test_no_events(self, property_location):
        scored, by_date = score_events_for_property([], property_location)
        result = pick_dol(scored, by_date)

        assert result.recommended_date_utc == ""
        assert result.confidence == 0
        assert result.top_events == ()
        assert result.total_events_scanned == 0
        assert not result.has_recommendation

    def test_single_close_hail(self, make_event, property_location):
        """1.5in hail half a mile away: 15 + 50 = 65."""
        event = make_event(EventType.HAIL_REPORT, magnitude=1.5, miles_north=0.5, time_utc="2024-06-01T10:00:00Z")
        scored, by_date = score_events_for_property([event], property_location)

        assert scored[0].score == pytest.approx(65)

        result = pick_dol(scored, by_date)
        assert result.recommended_date_utc == "2024-06-01"
        assert result.confidence == pytest.approx(0.65)
        assert result.total_events_scanned == 1

        top = result.top_events[0]
        assert top.id == event.id
        assert top.type == "hail_report"
        assert top.magnitude == 1.5
        assert top.distance_miles == 0.5
        assert top.direction_cardinal == "N"
        assert top.time_utc == "2024-06-01T10:00:00Z"
        assert top.source == "test"

    def test_max_not_sum(self, make_event, property_location):
        """One severe close event outranks many weak ones on another day."""
        day_a = [make_event(EventType.HAIL_REPORT, magnitude=3.0, miles_north=0, time_utc="2024-06-01T18:00:00Z")]
        day_b = [
            make_event(EventType.FF_WARNING, miles_north=30 + i, time_utc=f"2024-06-02T0{i}:00:00Z")
            for i in range(5)
        ]
        scored, by_date = score_events_for_property(day_b + day_a, property_location)

        assert by_date == {"2024-06-01": 80, "2024-06-02": 20}

        result = pick_dol(scored, by_date)
        assert result.recommended_date_utc == "2024-06-01"
        assert len(result.top_events) == 1
        assert result.total_events_scanned == 6
        assert result.confidence == pytest.approx(0.8)

    def test_top_events_limited_and_sorted(self, make_event, property_location):
        events = [
            make_event(EventType.HAIL_REPORT, magnitude=0.5 + i * 0.25, miles_north=2)
            for i in range(12)
        ]
        scored, by_date = score_events_for_property(events, property_location)
        result = pick_dol(scored, by_date)

        assert len(result.top_events) == 10
        scores = [e.score for e in result.top_events]
        assert scores == sorted(scores, reverse=True)
        assert result.top_events[0].id == events[-1].id
        assert result.total_events_scanned == 12

    def test_top_events_only_from_winning_date(self, make_event, property_location):
        events = [
            make_event(EventType.HAIL_REPORT, magnitude=2.0, miles_north=0, time_utc="2024-06-01T10:00:00Z"),
            make_event(EventType.WIND_REPORT, magnitude=60, miles_north=3, time_utc="2024-06-01T11:00:00Z"),
            make_event(EventType.SVR_WARNING, miles_north=1, time_utc="2024-05-28T10:00:00Z"),
        ]
        scored, by_date = score_events_for_property(events, property_location)
        result = pick_dol(scored, by_date)

        assert result.recommended_date_utc == "2024-06-01"
        assert [e.id for e in result.top_events] == [events[0].id, events[1].id]
        assert result.total_events_scanned == 3

    def test_tie_goes_to_earliest_date(self, make_event, property_location):
        events = [
            make_event(EventType.TOR_WARNING, miles_north=0.5, time_utc="2024-06-03T10:00:00Z"),
            make_event(EventType.TOR_WARNING, miles_north=0.5, time_utc="2024-06-01T10:00:00Z"),
            make_event(EventType.TOR_WARNING, miles_north=0.5, time_utc="2024-06-02T10:00:00Z"),
        ]
        scored, by_date = score_events_for_property(events, property_location)
        result = pick_dol(scored, by_date)

        assert result.recommended_date_utc == "2024-06-01"

    def test_equal_scores_keep_input_order(self, make_event, property_location):
        events = [make_event(EventType.SVR_WARNING, miles_north=0) for _ in range(3)]
        scored, by_date = score_events_for_property(events, property_location)
        result = pick_dol(scored, by_date)

        assert [e.id for e in result.top_events] == [e.id for e in events]

    def test_distance_is_rounded(self, make_event, property_location):
        event = make_event(EventType.HAIL_REPORT, magnitude=1.0, miles_north=3.14159)
        scored, by_date = score_events_for_property([event], property_location)
        result = pick_dol(scored, by_date)

        assert result.top_events[0].distance_miles == 3.14

    def test_unlocated_events_are_counted(self, make_event, property_location):
        """Every event handed to the scorer shows up in total_events_scanned."""
        located = make_event(EventType.HAIL_REPORT, magnitude=1.0, miles_north=2)
        unlocated = WeatherEvent(id="nowhere", type=EventType.HAIL_REPORT, magnitude=1.0,
                                 time_utc="2024-06-01T12:00:00Z")

        scored, by_date = EventScorer().score_events_for_property([located, unlocated], property_location)
        result = DOLSelector().pick_dol(scored, by_date)

        assert result.total_events_scanned == 2
        assert [e.id for e in result.top_events] == [located.id, "nowhere"]
        assert result.top_events[1].distance_miles is None
        assert result.top_events[1].direction_cardinal is None

    def test_confidence_saturates(self):
        event = WeatherEvent(id="x", type=EventType.OTHER, time_utc="2024-06-01T00:00:00Z")
        scored = [ScoredEvent(
            event=event,
            distance_miles=0.0,
            bearing_deg=0.0,
            direction_cardinal="N",
            magnitude_score=100,
            proximity_score=50,
            score=150,
        )]
        result = pick_dol(scored, {"2024-06-01": 150})

        assert result.confidence == 1.0


class TestRankDates:
    """Test cases for date ranking."""

    def test_descending_by_score(self):
        assert rank_dates({"2024-06-01": 10, "2024-06-02": 30, "2024-06-03": 20}) == [
            "2024-06-02", "2024-06-03", "2024-06-01"
        ]

    def test_ties_earliest_first(self):
        assert rank_dates({"2024-06-05": 40, "2024-05-30": 40, "2024-06-01": 10}) == [
            "2024-05-30", "2024-06-05", "2024-06-01"
        ]


class TestSummarizeEvents:
    """Test cases for the event summary."""

    def test_counts_and_peaks(self, make_event, property_location):
        events = [
            make_event(EventType.HAIL_REPORT, magnitude=1.0),
            make_event(EventType.HAIL_REPORT, magnitude=2.25),
            make_event(EventType.HAIL_REPORT),
            make_event(EventType.WIND_REPORT, magnitude=58),
            make_event(EventType.TOR_WARNING),
            make_event(EventType.FF_WARNING),
            make_event(EventType.OTHER),
        ]
        scored, _ = score_events_for_property(events, property_location)
        summary = summarize_events(scored)

        assert summary.hail_reports == 3
        assert summary.wind_reports == 1
        assert summary.warnings == 2
        assert summary.other_events == 1
        assert summary.max_hail_inches == 2.25
        assert summary.max_wind_mph == 58

    def test_empty(self):
        summary = summarize_events([])
        assert summary.hail_reports == 0
        assert summary.max_hail_inches is None
        assert summary.max_wind_mph is None
