# =============================================================================
# core/itinerary.py  -  Day-by-Day Itinerary Builder
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (destination, days, interests, pace) into a structured,
#   day-by-day plan: a themed title, timed activity slots, meals and tips.
#
# THE HALT PATTERN:
#   Weather and destination results are meant to be READ by the LLM and
#   woven into an answer.  An itinerary is different: it's a structured
#   document the frontend renders as-is.  If the LLM "summarizes" it, the
#   user loses the schedule.
#
#   So build_itinerary() returns a ToolResult with halt=True.  On the wire
#   that becomes {"halt": true, "content": {...}}, and the agent layer
#   (agent/callbacks.py) tells ADK to skip the summarization step.
#
# TEMPLATES, NOT AI:
#   Everything here comes from fixed tables.  Pace picks how many of the
#   six activity templates to use (relaxed 3, moderate 4, packed 6).  With
#   only six templates, "packed" can never go beyond six slots a day.
#
# RANDOMNESS:
#   Tips are sampled, so two calls with the same input can differ.  The
#   random source is a parameter: tests pass random.Random(seed) and get a
#   reproducible itinerary.
# =============================================================================

import logging
import random
from dataclasses import asdict
from typing import Iterable

from core.models import Activity, Itinerary, ItineraryDay, Meals, ToolResult
from core.numbers import leading_int

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 14

DEFAULT_PACE = "moderate"
ACTIVITIES_PER_PACE: dict[str, int] = {
    "relaxed": 3,
    "moderate": 4,
    "packed": 6,
}

TIPS_PER_DAY = 2


# -----------------------------------------------------------------------------
# Template tables
# -----------------------------------------------------------------------------
DAY_TITLES: tuple[str, ...] = (
    "Arrival & Exploration",
    "Cultural Immersion",
    "Adventure Day",
    "Local Experiences",
    "Hidden Gems",
    "Relaxation & Leisure",
    "Final Exploration & Departure",
)

# (time, name, duration)
ACTIVITY_TEMPLATES: tuple[tuple[str, str, str], ...] = (
    ("09:00", "Breakfast at local café", "1h"),
    ("10:30", "Visit main historical site", "2h"),
    ("13:00", "Lunch at traditional restaurant", "1.5h"),
    ("15:00", "Explore local market", "2h"),
    ("18:00", "Sunset viewing point", "1h"),
    ("19:30", "Dinner & local entertainment", "2h"),
)

TIP_POOL: tuple[str, ...] = (
    "Book tickets in advance for popular attractions",
    "Wear comfortable walking shoes",
    "Bring a reusable water bottle",
    "Learn a few local phrases",
    "Check opening hours before visiting",
)


# =============================================================================
# Per-day generators
# =============================================================================
def _day_title(destination: str, day_index: int) -> str:
    if day_index < len(DAY_TITLES):
        return DAY_TITLES[day_index]
    return f"Day {day_index + 1} in {destination}"


def _activities(destination: str, count: int) -> list[Activity]:
    return [
        Activity(time=time, name=name, duration=duration, location=f"{destination} - TBD")
        for time, name, duration in ACTIVITY_TEMPLATES[:count]
    ]


def _meals(destination: str, interests: list[str]) -> Meals:
    return Meals(
        breakfast="Local café or hotel breakfast",
        lunch=f"Traditional {destination} cuisine",
        dinner="Fine dining experience" if "food" in interests else "Casual local restaurant",
    )


def _tips(rng: random.Random) -> list[str]:
    return rng.sample(TIP_POOL, TIPS_PER_DAY)


def _summary(destination: str, days: int, schedule: list[ItineraryDay]) -> str:
    total_activities = sum(len(day.activities) for day in schedule)
    return (
        f"A {days}-day itinerary for {destination} with {total_activities} "
        f"carefully curated activities. This itinerary balances sightseeing, "
        f"cultural experiences, and relaxation time."
    )


def clamp_days(days) -> int:
    return max(MIN_DAYS, min(leading_int(days), MAX_DAYS))


def normalize_pace(pace: str) -> str:
    return pace if pace in ACTIVITIES_PER_PACE else DEFAULT_PACE


def generate_itinerary(
    destination: str,
    days: int,
    interests: list[str],
    pace: str,
    rng: random.Random,
) -> Itinerary:
    """Assemble the Itinerary model.  Inputs must already be normalized."""
    per_day = ACTIVITIES_PER_PACE[pace]

    schedule = [
        ItineraryDay(
            day=i + 1,
            title=_day_title(destination, i),
            activities=_activities(destination, per_day),
            meals=_meals(destination, interests),
            tips=_tips(rng),
        )
        for i in range(days)
    ]

    return Itinerary(
        destination=destination,
        duration=f"{days} {'day' if days == 1 else 'days'}",
        pace=pace,
        interests=interests,
        daily_schedule=schedule,
        summary=_summary(destination, days, schedule),
    )


# =============================================================================
# PUBLIC API: build_itinerary
# =============================================================================
def build_itinerary(
    destination: str,
    days: int,
    interests: Iterable[str] | None = None,
    pace: str = DEFAULT_PACE,
    rng: random.Random | None = None,
) -> ToolResult:
    """Build a day-by-day itinerary and return it as a halt result.

    Args:
        destination: City or country name.  Must not be blank.
        days: Trip length; the leading integer of a string ("3 days")
            is used, then clamped to 1-14.
        interests: Interest tags, or a single tag as a string; "food"
            upgrades every dinner.
        pace: "relaxed", "moderate" or "packed".  Unknown values fall back
            to "moderate".
        rng: Source for tip sampling.  A fresh random.Random() if omitted.

    Returns:
        ToolResult(halt=True) with data {"itinerary": {...}} on success,
        or an "error" ToolResult.
    """
    try:
        if not str(destination or "").strip():
            return ToolResult.error("Destination cannot be empty")

        days = clamp_days(days)
        pace = normalize_pace(pace)
        if isinstance(interests, str):
            interests = [interests]
        interests = list(interests or [])
        rng = rng or random.Random()

        itinerary = generate_itinerary(destination, days, interests, pace, rng)
        logger.debug("Built %s %s itinerary for %r", itinerary.duration, pace, destination)

        return ToolResult.halted(itinerary=asdict(itinerary))
    except Exception as e:
        logger.exception("Itinerary build failed for %r", destination)
        return ToolResult.error(f"Failed to build itinerary: {e}")
