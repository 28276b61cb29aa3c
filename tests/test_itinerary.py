"""Tests for the itinerary builder (core/itinerary.py).

Tip sampling is random, so tip content is only checked through an injected
seeded random.Random.
"""

import random

import pytest

from core.itinerary import (
    ACTIVITY_TEMPLATES,
    DAY_TITLES,
    TIP_POOL,
    build_itinerary,
)


def _itinerary(*args, **kwargs) -> dict:
    result = build_itinerary(*args, **kwargs)
    assert result.status == "success"
    return result.data["itinerary"]


class TestBarcelona:
    """The canonical 3-day, culture + food, moderate trip."""

    @pytest.fixture
    def itinerary(self):
        return _itinerary("Barcelona", 3, ["culture", "food"], "moderate")

    def test_is_halt_result(self):
        result = build_itinerary("Barcelona", 3, ["culture", "food"], "moderate")
        assert result.halt is True
        wire = result.to_dict()
        assert wire["halt"] is True
        assert wire["content"]["status"] == "success"

    def test_three_days_of_four_activities(self, itinerary):
        assert len(itinerary["daily_schedule"]) == 3
        for day in itinerary["daily_schedule"]:
            assert len(day["activities"]) == 4

    def test_food_interest_upgrades_dinner(self, itinerary):
        for day in itinerary["daily_schedule"]:
            assert day["meals"]["dinner"] == "Fine dining experience"

    def test_summary_counts_activities(self, itinerary):
        assert "3-day" in itinerary["summary"]
        assert "12 carefully curated activities" in itinerary["summary"]

    def test_header_fields(self, itinerary):
        assert itinerary["destination"] == "Barcelona"
        assert itinerary["duration"] == "3 days"
        assert itinerary["pace"] == "moderate"
        assert itinerary["interests"] == ["culture", "food"]

    def test_day_shape(self, itinerary):
        day = itinerary["daily_schedule"][0]
        assert day["day"] == 1
        assert day["title"] == "Arrival & Exploration"
        assert day["activities"][0] == {
            "time": "09:00",
            "name": "Breakfast at local café",
            "duration": "1h",
            "location": "Barcelona - TBD",
        }
        assert day["meals"]["lunch"] == "Traditional Barcelona cuisine"
        assert day["meals"]["breakfast"] == "Local café or hotel breakfast"

    def test_tips_are_two_distinct_from_pool(self, itinerary):
        for day in itinerary["daily_schedule"]:
            assert len(day["tips"]) == 2
            assert len(set(day["tips"])) == 2
            assert set(day["tips"]) <= set(TIP_POOL)


class TestPaceAndDays:

    @pytest.mark.parametrize("pace,count", [
        ("relaxed", 3), ("moderate", 4), ("packed", 6),
    ])
    def test_pace_sets_activity_count(self, pace, count):
        day = _itinerary("Lisbon", 1, pace=pace)["daily_schedule"][0]
        assert len(day["activities"]) == count

    def test_packed_is_capped_by_template_table(self):
        day = _itinerary("Lisbon", 1, pace="packed")["daily_schedule"][0]
        assert len(day["activities"]) == len(ACTIVITY_TEMPLATES)

    @pytest.mark.parametrize("pace", ["fast", "", None, "PACKED"])
    def test_unknown_pace_defaults_to_moderate(self, pace):
        itinerary = _itinerary("Lisbon", 1, pace=pace)
        assert itinerary["pace"] == "moderate"
        assert len(itinerary["daily_schedule"][0]["activities"]) == 4

    def test_days_clamped_high(self):
        itinerary = _itinerary("Rome", 20)
        assert len(itinerary["daily_schedule"]) == 14
        assert itinerary["duration"] == "14 days"

    def test_days_clamped_low(self):
        itinerary = _itinerary("Rome", 0)
        assert len(itinerary["daily_schedule"]) == 1
        assert itinerary["duration"] == "1 day"

    def test_titles_fall_back_after_seven_days(self):
        schedule = _itinerary("Tokyo", 9)["daily_schedule"]
        assert [d["title"] for d in schedule[:7]] == list(DAY_TITLES)
        assert schedule[7]["title"] == "Day 8 in Tokyo"
        assert schedule[8]["title"] == "Day 9 in Tokyo"
        assert [d["day"] for d in schedule] == list(range(1, 10))

    def test_casual_dinner_without_food_interest(self):
        day = _itinerary("Rome", 1, ["history"])["daily_schedule"][0]
        assert day["meals"]["dinner"] == "Casual local restaurant"

    def test_interests_default_to_empty(self):
        assert _itinerary("Rome", 1)["interests"] == []

    def test_single_interest_string_is_one_tag(self):
        itinerary = _itinerary("Rome", 1, "food")
        assert itinerary["interests"] == ["food"]
        assert itinerary["daily_schedule"][0]["meals"]["dinner"] == "Fine dining experience"


class TestValidation:

    @pytest.mark.parametrize("destination", ["", "   ", None])
    def test_empty_destination_is_error(self, destination):
        result = build_itinerary(destination, 3)
        assert result.status == "error"
        assert result.halt is False
        assert "cannot be empty" in result.data["message"]
        assert "itinerary" not in result.data

    @pytest.mark.parametrize("days, expected", [("3 days", 3), ("a week", 1), ("20", 14), (2.7, 2)])
    def test_non_numeric_days_are_read_leniently(self, days, expected):
        itinerary = _itinerary("Rome", days)
        assert len(itinerary["daily_schedule"]) == expected


class TestRandomness:

    def test_seeded_rng_is_reproducible(self):
        a = _itinerary("Paris", 5, rng=random.Random(7))
        b = _itinerary("Paris", 5, rng=random.Random(7))
        assert a == b
