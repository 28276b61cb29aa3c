# =============================================================================
# core/destinations.py  -  SkyTraveler Pass Destination Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "where can I go with my pass?"  Each SkyTraveler pass tier
#   unlocks a set of destinations, and the search can be narrowed by a
#   free-text interest ("beach", "wine") and a season.
#
# THE BUSINESS RULE (CUMULATIVE TIERS):
#   Silver    →  8 regional destinations (North & Central America)
#   Gold      →  Silver + 10 continental ones              = 18
#   Platinum  →  Silver + Gold additions + 12 worldwide    = 30
#
#   The catalog stores each destination ONCE, in the partition of the tier
#   that first unlocks it.  destinations_for_tier() computes the union by
#   concatenation.  Storing Gold as a full copy of Silver plus extras would
#   let the two lists drift apart.
#
#   Order matters: results come back in catalog order (Silver first, then
#   each tier's additions), not sorted.  With limit=3, a Gold member sees
#   Silver's beaches before Gold's.
#
# IDEMPOTENCY:
#   search_destinations() is a pure function of its arguments and the
#   frozen tables below.  Same inputs, same outputs, every time.
# =============================================================================

import logging

from core.models import (
    STATUS_NO_RESULTS,
    STATUS_SUCCESS,
    Destination,
    PassTierInfo,
    ToolResult,
)
from core.numbers import leading_int

logger = logging.getLogger(__name__)

ANY = "any"
PASS_TIERS = ("silver", "gold", "platinum")
SEASONS = ("spring", "summer", "fall", "winter")

MIN_LIMIT = 1
MAX_LIMIT = 20


# -----------------------------------------------------------------------------
# Silver Pass: regional destinations (8)
# -----------------------------------------------------------------------------
SILVER_DESTINATIONS: tuple[Destination, ...] = (
    Destination(
        name="Mexico City, Mexico",
        region="North America",
        type="culture",
        activities=("culture", "food", "history", "museums"),
        best_seasons=("spring", "fall", "winter"),
        highlights="Ancient pyramids, world-class museums, street food",
    ),
    Destination(
        name="Cancun, Mexico",
        region="North America",
        type="beach",
        activities=("beach", "diving", "relaxation", "nightlife"),
        best_seasons=("winter", "spring"),
        highlights="Caribbean beaches, Mayan ruins, resort paradise",
    ),
    Destination(
        name="Toronto, Canada",
        region="North America",
        type="city",
        activities=("culture", "food", "entertainment", "shopping"),
        best_seasons=("summer", "fall"),
        highlights="Multicultural city, CN Tower, vibrant neighborhoods",
    ),
    Destination(
        name="Vancouver, Canada",
        region="North America",
        type="city",
        activities=("nature", "food", "outdoor sports", "culture"),
        best_seasons=("summer", "fall"),
        highlights="Mountains meet ocean, diverse cuisine, outdoor activities",
    ),
    Destination(
        name="Miami, USA",
        region="North America",
        type="beach",
        activities=("beach", "nightlife", "art", "food"),
        best_seasons=("winter", "spring"),
        highlights="Art Deco architecture, Latin culture, beautiful beaches",
    ),
    Destination(
        name="San Francisco, USA",
        region="North America",
        type="city",
        activities=("culture", "food", "technology", "nature"),
        best_seasons=("fall", "spring"),
        highlights="Golden Gate Bridge, tech culture, steep hills",
    ),
    Destination(
        name="Costa Rica",
        region="Central America",
        type="adventure",
        activities=("nature", "wildlife", "adventure", "beach"),
        best_seasons=("winter", "spring"),
        highlights="Eco-tourism paradise, biodiversity, beaches and rainforests",
    ),
    Destination(
        name="Panama City, Panama",
        region="Central America",
        type="culture",
        activities=("culture", "history", "beach", "shopping"),
        best_seasons=("winter", "spring"),
        highlights="Panama Canal, modern skyline, Caribbean and Pacific access",
    ),
)


# -----------------------------------------------------------------------------
# Gold Pass additions: continental destinations (10 more, 18 total)
# -----------------------------------------------------------------------------
GOLD_DESTINATIONS: tuple[Destination, ...] = (
    Destination(
        name="Barcelona, Spain",
        region="Europe",
        type="city",
        activities=("culture", "architecture", "beach", "food"),
        best_seasons=("spring", "summer", "fall"),
        highlights="Gaudí masterpieces, Mediterranean beaches, vibrant culture",
    ),
    Destination(
        name="Lisbon, Portugal",
        region="Europe",
        type="city",
        activities=("culture", "food", "history", "beach"),
        best_seasons=("spring", "summer", "fall"),
        highlights="Charming hills, tram rides, pastéis de nata",
    ),
    Destination(
        name="Prague, Czech Republic",
        region="Europe",
        type="city",
        activities=("culture", "history", "architecture", "beer"),
        best_seasons=("spring", "summer", "fall"),
        highlights="Medieval architecture, astronomical clock, affordable luxury",
    ),
    Destination(
        name="Athens, Greece",
        region="Europe",
        type="culture",
        activities=("history", "culture", "food", "beach"),
        best_seasons=("spring", "fall"),
        highlights="Ancient ruins, Acropolis, Mediterranean cuisine",
    ),
    Destination(
        name="Rome, Italy",
        region="Europe",
        type="culture",
        activities=("history", "culture", "food", "art"),
        best_seasons=("spring", "fall"),
        highlights="Colosseum, Vatican City, Italian cuisine",
    ),
    Destination(
        name="London, UK",
        region="Europe",
        type="city",
        activities=("culture", "history", "museums", "theater"),
        best_seasons=("summer", "spring"),
        highlights="British Museum, royal palaces, world-class theater",
    ),
    Destination(
        name="Buenos Aires, Argentina",
        region="South America",
        type="city",
        activities=("culture", "tango", "food", "nightlife"),
        best_seasons=("spring", "fall"),
        highlights="Tango capital, European architecture, incredible steakhouses",
    ),
    Destination(
        name="Lima, Peru",
        region="South America",
        type="culture",
        activities=("food", "culture", "history", "beach"),
        best_seasons=("summer", "fall"),
        highlights="Culinary capital, Machu Picchu gateway, colonial architecture",
    ),
    Destination(
        name="Rio de Janeiro, Brazil",
        region="South America",
        type="beach",
        activities=("beach", "carnival", "nature", "nightlife"),
        best_seasons=("summer", "fall"),
        highlights="Christ the Redeemer, Copacabana beach, samba",
    ),
    Destination(
        name="Santiago, Chile",
        region="South America",
        type="city",
        activities=("wine", "mountains", "culture", "food"),
        best_seasons=("spring", "fall"),
        highlights="Wine valleys, Andes views, modern Latin American cuisine",
    ),
)


# -----------------------------------------------------------------------------
# Platinum Pass additions: worldwide luxury destinations (12 more, 30 total)
# -----------------------------------------------------------------------------
PLATINUM_DESTINATIONS: tuple[Destination, ...] = (
    Destination(
        name="Tokyo, Japan",
        region="Asia",
        type="city",
        activities=("culture", "food", "technology", "shopping"),
        best_seasons=("spring", "fall"),
        highlights="Cherry blossoms, cutting-edge tech, incredible cuisine",
    ),
    Destination(
        name="Dubai, UAE",
        region="Middle East",
        type="luxury",
        activities=("luxury", "shopping", "beach", "adventure"),
        best_seasons=("winter", "spring"),
        highlights="World's tallest building, luxury shopping, desert safaris",
    ),
    Destination(
        name="Singapore",
        region="Asia",
        type="city",
        activities=("food", "culture", "shopping", "luxury"),
        best_seasons=("winter", "spring"),
        highlights="Gardens by the Bay, hawker food culture, modern architecture",
    ),
    Destination(
        name="Bali, Indonesia",
        region="Asia",
        type="beach",
        activities=("beach", "culture", "yoga", "diving"),
        best_seasons=("spring", "summer", "fall"),
        highlights="Hindu temples, rice terraces, world-class surfing",
    ),
    Destination(
        name="Maldives",
        region="Asia",
        type="luxury",
        activities=("beach", "diving", "luxury", "relaxation"),
        best_seasons=("winter", "spring"),
        highlights="Overwater villas, pristine reefs, ultimate luxury",
    ),
    Destination(
        name="Sydney, Australia",
        region="Oceania",
        type="city",
        activities=("beach", "culture", "food", "outdoor"),
        best_seasons=("spring", "summer", "fall"),
        highlights="Opera House, Bondi Beach, harbor views",
    ),
    Destination(
        name="Auckland, New Zealand",
        region="Oceania",
        type="adventure",
        activities=("nature", "adventure", "wine", "culture"),
        best_seasons=("summer", "fall"),
        highlights="Lord of the Rings scenery, Māori culture, adventure sports",
    ),
    Destination(
        name="Paris, France",
        region="Europe",
        type="culture",
        activities=("culture", "art", "food", "luxury"),
        best_seasons=("spring", "fall"),
        highlights="Eiffel Tower, Louvre Museum, haute cuisine",
    ),
    Destination(
        name="Swiss Alps, Switzerland",
        region="Europe",
        type="luxury",
        activities=("skiing", "luxury", "nature", "hiking"),
        best_seasons=("winter", "summer"),
        highlights="World-class ski resorts, chocolate and watches",
    ),
    Destination(
        name="Iceland",
        region="Europe",
        type="adventure",
        activities=("nature", "northern lights", "adventure", "hot springs"),
        best_seasons=("winter", "summer"),
        highlights="Northern lights, dramatic landscapes, Blue Lagoon",
    ),
    Destination(
        name="Cape Town, South Africa",
        region="Africa",
        type="adventure",
        activities=("nature", "wine", "beach", "wildlife"),
        best_seasons=("summer", "fall"),
        highlights="Table Mountain, wine country, penguin beaches",
    ),
    Destination(
        name="Marrakech, Morocco",
        region="Africa",
        type="culture",
        activities=("culture", "food", "shopping", "adventure"),
        best_seasons=("spring", "fall", "winter"),
        highlights="Medina markets, riads, Sahara desert access",
    ),
)

# Tier-exclusive partitions, lowest tier first.  A tier unlocks its own
# partition plus every partition before it.
_TIER_PARTITIONS: tuple[tuple[str, tuple[Destination, ...]], ...] = (
    ("silver", SILVER_DESTINATIONS),
    ("gold", GOLD_DESTINATIONS),
    ("platinum", PLATINUM_DESTINATIONS),
)

_TIER_REGIONS: dict[str, tuple[str, ...]] = {
    "silver": ("North America", "Central America"),
    "gold": ("North America", "Central America", "South America", "Europe"),
    "platinum": ("Worldwide",),
}

_TIER_DESCRIPTIONS: dict[str, str] = {
    "silver": "Access to regional destinations",
    "gold": "Access to continental destinations including all Silver destinations",
    "platinum": "Unlimited worldwide access including luxury destinations",
}


# =============================================================================
# Tier rules
# =============================================================================
def destinations_for_tier(pass_tier: str) -> tuple[Destination, ...]:
    """All destinations a tier unlocks, in catalog order.

    Unknown tiers unlock nothing.
    """
    if pass_tier not in PASS_TIERS:
        return ()

    unlocked: tuple[Destination, ...] = ()
    for tier, partition in _TIER_PARTITIONS:
        unlocked += partition
        if tier == pass_tier:
            break
    return unlocked


def pass_benefits(pass_tier: str) -> PassTierInfo:
    """Display metadata for a (valid) tier."""
    return PassTierInfo(
        tier=pass_tier.capitalize(),
        destinations_count=len(destinations_for_tier(pass_tier)),
        regions=_TIER_REGIONS[pass_tier],
        description=_TIER_DESCRIPTIONS[pass_tier],
    )


# =============================================================================
# Filtering
# =============================================================================
def _matches_query(dest: Destination, query: str) -> bool:
    """Does a destination match a free-text interest?

    "any" matches everything.  Otherwise the type, the activity tags (in
    either direction, so "beach holiday" still hits the "beach" tag) and
    the name are checked as substrings.
    """
    if query == ANY:
        return True

    query_lower = str(query).lower()
    return (
        query_lower in dest.type
        or any(act in query_lower or query_lower in act for act in dest.activities)
        or query_lower in dest.name.lower()
    )


def _matches_season(dest: Destination, season: str) -> bool:
    return season == ANY or season in dest.best_seasons


def filter_destinations(
    destinations: tuple[Destination, ...],
    query: str = ANY,
    season: str = ANY,
    limit: int = 10,
) -> list[Destination]:
    """Destinations matching both predicates, first `limit` in order."""
    matches = [
        dest for dest in destinations
        if _matches_query(dest, query) and _matches_season(dest, season)
    ]
    return matches[:limit]


def _format_destination(dest: Destination) -> dict:
    """Project a Destination into the record the LLM sees."""
    return {
        "name": dest.name,
        "region": dest.region,
        "type": dest.type,
        "best_for": ", ".join(dest.activities),
        "best_seasons": ", ".join(dest.best_seasons),
        "highlights": dest.highlights,
    }


def _clamp_limit(limit) -> int:
    return max(MIN_LIMIT, min(leading_int(limit), MAX_LIMIT))


# =============================================================================
# PUBLIC API: search_destinations
# =============================================================================
def search_destinations(
    pass_tier: str,
    query: str = ANY,
    season: str = ANY,
    limit: int = 10,
) -> ToolResult:
    """Search the destinations a SkyTraveler pass unlocks.

    Args:
        pass_tier: "silver", "gold" or "platinum" (any casing).  Anything
            else is rejected; there is no default tier.
        query: Interest to match ("beach", "culture", ...) or "any".
        season: "spring", "summer", "fall", "winter" or "any".
        limit: Max results.  Read leniently (see core/numbers.py), then
            clamped to 1-20.

    Returns:
        A ToolResult with status "success", "no_results" or "error".
    """
    try:
        tier = str(pass_tier).lower()
        if tier not in PASS_TIERS:
            return ToolResult.error(
                "Invalid pass tier. Must be: silver, gold, or platinum",
                results=[],
            )

        limit = _clamp_limit(limit)
        available = destinations_for_tier(tier)
        matches = filter_destinations(available, query, season, limit)
        logger.debug(
            "Tier %s: %d/%d destinations match query=%r season=%r",
            tier, len(matches), len(available), query, season,
        )

        if not matches:
            return ToolResult(
                status=STATUS_NO_RESULTS,
                data={
                    "message": f"No destinations found for {tier.capitalize()} pass matching your criteria.",
                    "pass_tier": tier.capitalize(),
                    "total_available": len(available),
                    "results": [],
                },
            )

        benefits = pass_benefits(tier)
        return ToolResult(
            status=STATUS_SUCCESS,
            data={
                "pass_tier": tier.capitalize(),
                "access_info": {
                    "tier": benefits.tier,
                    "destinations_count": benefits.destinations_count,
                    "regions": list(benefits.regions),
                    "description": benefits.description,
                },
                "total_available": len(available),
                "showing": len(matches),
                "filters": {"query": query, "season": season},
                "results": [_format_destination(d) for d in matches],
            },
        )
    except Exception as e:
        logger.exception("Destination search failed for tier %r", pass_tier)
        return ToolResult.error(f"Search failed: {e}", results=[])
