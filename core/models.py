# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the three travel tools.  They carry almost no behavior; they're
# structured bags of data that the tools serialize into plain dicts.
#
# WHY DATACLASSES?
#   - They auto-generate __init__, __repr__, and __eq__ for free.
#   - frozen=True makes the static tables (weather, destinations) read-only,
#     so nothing can mutate them between tool calls.
#   - asdict() turns a nested model into a JSON-ready dict in one call.
#
# THE ToolResult ENVELOPE:
#   Every public tool operation returns a ToolResult.  It's a tagged record:
#   a status ("success", "no_data", "no_results", "error"), the data, and a
#   halt flag.  A halt result means "return this payload to the user as-is,
#   don't let the LLM rewrite it into prose."
# =============================================================================

from dataclasses import dataclass, field


# -----------------------------------------------------------------------------
# WeatherRecord: one row of the mock weather table
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WeatherRecord:
    """Current conditions for one city, always stored in Celsius."""

    temperature: int                   # Degrees Celsius
    condition: str                     # e.g., "Partly Cloudy"
    humidity: int                      # Percent (0-100)
    wind_speed: int                    # km/h


# -----------------------------------------------------------------------------
# Destination: one entry in a SkyTraveler pass catalog
# -----------------------------------------------------------------------------
# Tuples instead of lists so the catalog stays immutable.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Destination:
    """A destination unlocked by some pass tier."""

    name: str                          # "Barcelona, Spain"
    region: str                        # "Europe"
    type: str                          # "city", "beach", "culture", ...
    activities: tuple[str, ...]        # Ordered activity tags
    best_seasons: tuple[str, ...]      # Subset of spring/summer/fall/winter
    highlights: str                    # One-line pitch


@dataclass(frozen=True)
class PassTierInfo:
    """What a pass tier gives you access to."""

    tier: str                          # Display name: "Gold"
    destinations_count: int            # Cumulative, includes lower tiers
    regions: tuple[str, ...]
    description: str


# -----------------------------------------------------------------------------
# Itinerary models
# -----------------------------------------------------------------------------
@dataclass
class Activity:
    """One scheduled slot in an itinerary day."""

    time: str                          # "09:00"
    name: str
    duration: str                      # "1.5h"
    location: str                      # "<destination> - TBD"


@dataclass
class Meals:
    breakfast: str
    lunch: str
    dinner: str


@dataclass
class ItineraryDay:
    """A single day of the trip."""

    day: int                           # 1-based
    title: str
    activities: list[Activity] = field(default_factory=list)
    meals: Meals | None = None
    tips: list[str] = field(default_factory=list)


@dataclass
class Itinerary:
    """A complete day-by-day plan.  Built fresh per request, never stored."""

    destination: str
    duration: str                      # "3 days" / "1 day"
    pace: str                          # relaxed / moderate / packed
    interests: list[str] = field(default_factory=list)
    daily_schedule: list[ItineraryDay] = field(default_factory=list)
    summary: str = ""


# -----------------------------------------------------------------------------
# ToolResult: the envelope every tool returns
# -----------------------------------------------------------------------------
# Two cases, distinguished by the `halt` tag:
#
#   halt=False  →  {"status": "success", ...data}
#                  The LLM reads this and writes a natural-language answer.
#
#   halt=True   →  {"halt": true, "content": {"status": "success", ...data}}
#                  The orchestrator must pass `content` through verbatim.
#
# The wire shape is produced by to_dict(); the agent layer only ever looks at
# the dict, so it doesn't need to import this class.
# -----------------------------------------------------------------------------
STATUS_SUCCESS = "success"
STATUS_NO_DATA = "no_data"
STATUS_NO_RESULTS = "no_results"
STATUS_ERROR = "error"

HALT_KEY = "halt"
HALT_CONTENT_KEY = "content"


@dataclass
class ToolResult:
    """Structured outcome of a tool call."""

    status: str
    data: dict = field(default_factory=dict)
    halt: bool = False

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_dict(self) -> dict:
        body = {"status": self.status, **self.data}
        if self.halt:
            return {HALT_KEY: True, HALT_CONTENT_KEY: body}
        return body

    @classmethod
    def error(cls, message: str, **extra) -> "ToolResult":
        return cls(status=STATUS_ERROR, data={"message": message, **extra})

    @classmethod
    def halted(cls, **data) -> "ToolResult":
        return cls(status=STATUS_SUCCESS, data=data, halt=True)
