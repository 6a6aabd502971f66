"""Multiplicative adjustment factors.

Every factor is centred at 1.0 ("no adjustment") and clamps itself to a
strictly positive range, so the compositor can multiply them blindly.
"""

from mlb_valuations.valuation.coercion import clamp, optional_int, optional_number, safe_number
from mlb_valuations.valuation.models import (
    DEFAULT_SETTINGS,
    HistoricalAggregate,
    PlayerRecord,
    ValuationSettings,
)

# (upper age bound inclusive, factor)
AGE_BANDS: tuple[tuple[int, float], ...] = (
    (23, 1.05),
    (26, 1.10),
    (29, 1.15),
    (30, 1.08),
    (32, 0.95),
    (34, 0.80),
    (36, 0.65),
    (37, 0.55),
)
AGE_FLOOR = 0.45
ELITE_DECLINE_RETAINED = 0.5

POSITION_FACTORS: dict[str, float] = {
    "SS": 1.06,
    "C": 1.05,
    "CF": 1.04,
    "2B": 1.02,
    "3B": 1.02,
    "RF": 1.01,
    "LF": 1.00,
    "OF": 1.00,
    "1B": 0.98,
    "DH": 0.92,
    "SP": 1.00,
    "P": 1.00,
    "RP": 0.88,
    "TWP": 1.00,
}

POSITION_ALIASES: dict[str, str] = {
    "SHORTSTOP": "SS",
    "CATCHER": "C",
    "CENTER FIELD": "CF",
    "CENTER FIELDER": "CF",
    "SECOND BASE": "2B",
    "THIRD BASE": "3B",
    "RIGHT FIELD": "RF",
    "LEFT FIELD": "LF",
    "OUTFIELD": "OF",
    "OUTFIELDER": "OF",
    "FIRST BASE": "1B",
    "DESIGNATED HITTER": "DH",
    "STARTING PITCHER": "SP",
    "RELIEF PITCHER": "RP",
    "RELIEVER": "RP",
    "PITCHER": "P",
    "TWO-WAY PLAYER": "TWP",
    "TWO WAY PLAYER": "TWP",
    "TWO-WAY": "TWP",
}

PITCHER_POSITIONS = frozenset({"SP", "RP", "P"})

PLAYING_TIME_FLOOR = 0.85
MIN_PLAYING_TIME_SHARE = 0.35

TWO_WAY_PREMIUM = 1.20
# (percentile threshold, bonus), highest tier first
PLATE_DISCIPLINE_TIERS: tuple[tuple[float, float], ...] = ((97.0, 1.05), (90.0, 1.03))
POWER_TIERS: tuple[tuple[float, float], ...] = ((97.0, 1.07), (90.0, 1.04))
SPEED_TIERS: tuple[tuple[float, float], ...] = ((97.0, 1.04), (90.0, 1.02))
ELITE_SEASON_TIERS: tuple[tuple[int, float], ...] = ((7, 1.10), (5, 1.06), (3, 1.03))

NO_HISTORY_MULTIPLIER = 0.75
ONE_SEASON_MULTIPLIER = 0.80
ONE_ELITE_SEASON_MULTIPLIER = 0.90
TWO_SEASON_MULTIPLIER = 0.92
SPIKE_RATIO = 1.25
SPIKE_DISCOUNT_SLOPE = 0.10
MAX_SPIKE_DISCOUNT = 0.10
LONG_ELITE_RECORD = 5
PROVEN_BONUS = 0.05
PROVEN_CONSISTENCY_LOW = 60.0
PROVEN_CONSISTENCY_HIGH = 85.0

MAX_CONSISTENCY_BONUS = 0.05

POWER_SCORE_AVERAGE = 25.0
POWER_SCORE_SWING = 0.06
POWER_SCORE_CURRENT_WEIGHT = 0.65
POWER_SCORE_RANGE = (0.92, 1.08)


def normalize_position(position: object) -> str | None:
    if position is None:
        return None
    key = str(position).strip().upper()
    if not key:
        return None
    return POSITION_ALIASES.get(key, key)


def is_pitcher(position: object) -> bool:
    return normalize_position(position) in PITCHER_POSITIONS


def age_factor(
    age: object,
    current_metric: object = None,
    settings: ValuationSettings = DEFAULT_SETTINGS,
) -> float:
    """Step curve over age bands, peaking in the late twenties.

    A player currently producing at or above ``elite_override_metric`` keeps
    half of any decline below 1.0.
    """
    years = optional_int(age)
    if years is None:
        return 1.0
    factor = AGE_FLOOR
    for upper, band_factor in AGE_BANDS:
        if years <= upper:
            factor = band_factor
            break
    if factor < 1.0 and safe_number(current_metric) >= settings.elite_override_metric:
        factor = 1.0 - (1.0 - factor) * ELITE_DECLINE_RETAINED
    return factor


def position_factor(position: object) -> float:
    code = normalize_position(position)
    if code is None:
        return 1.0
    return POSITION_FACTORS.get(code, 1.0)


def playing_time_factor(games_played: object, settings: ValuationSettings = DEFAULT_SETTINGS) -> float:
    games = safe_number(games_played)
    if games <= 0:
        return PLAYING_TIME_FLOOR
    share = clamp(games / settings.full_season_games, MIN_PLAYING_TIME_SHARE, 1.0)
    return PLAYING_TIME_FLOOR + (1.0 - PLAYING_TIME_FLOOR) * share


def _tier_bonus(value: float | None, tiers: tuple[tuple[float, float], ...]) -> float:
    if value is None:
        return 1.0
    for threshold, bonus in tiers:
        if value >= threshold:
            return bonus
    return 1.0


def elite_skill_premium(player: PlayerRecord, aggregate: HistoricalAggregate) -> float:
    premium = 1.0
    if normalize_position(player.position) == "TWP":
        premium *= TWO_WAY_PREMIUM
    premium *= _tier_bonus(optional_number(player.plate_discipline_pct), PLATE_DISCIPLINE_TIERS)
    premium *= _tier_bonus(optional_number(player.power_pct), POWER_TIERS)
    premium *= _tier_bonus(optional_number(player.speed_pct), SPEED_TIERS)
    for count, bonus in ELITE_SEASON_TIERS:
        if aggregate.elite_seasons >= count:
            premium *= bonus
            break
    return premium


def track_record_multiplier(
    aggregate: HistoricalAggregate,
    blended_metric: object,
    settings: ValuationSettings = DEFAULT_SETTINGS,
) -> float:
    """Penalise thin track records and one-year spikes; reward proven, steady stars."""
    count = aggregate.season_count
    if count == 0:
        return NO_HISTORY_MULTIPLIER
    if count == 1:
        if aggregate.current_metric >= settings.elite_threshold:
            return ONE_ELITE_SEASON_MULTIPLIER
        return ONE_SEASON_MULTIPLIER
    if count == 2:
        return TWO_SEASON_MULTIPLIER

    multiplier = 1.0
    blended = safe_number(blended_metric)
    prior = aggregate.prior_average
    if prior is not None and prior > 0 and blended > 0:
        excess = blended / prior - SPIKE_RATIO
        if excess > 0:
            multiplier -= min(MAX_SPIKE_DISCOUNT, excess * SPIKE_DISCOUNT_SLOPE)

    score = aggregate.consistency_score
    if aggregate.elite_seasons >= LONG_ELITE_RECORD and score is not None:
        ramp = (score - PROVEN_CONSISTENCY_LOW) / (PROVEN_CONSISTENCY_HIGH - PROVEN_CONSISTENCY_LOW)
        multiplier += PROVEN_BONUS * clamp(ramp, 0.0, 1.0)
    return multiplier


def consistency_bonus(score: object) -> float:
    value = optional_number(score)
    if value is None:
        return 1.0
    return 1.0 + MAX_CONSISTENCY_BONUS * clamp(value, 0.0, 100.0) / 100.0


def power_score_modifier(current: object, trailing: object = None) -> float:
    current_score = optional_number(current)
    if current_score is None:
        return 1.0
    trailing_score = optional_number(trailing)
    if trailing_score is None:
        trailing_score = current_score
    blended = POWER_SCORE_CURRENT_WEIGHT * current_score + (1.0 - POWER_SCORE_CURRENT_WEIGHT) * trailing_score
    lo, hi = POWER_SCORE_RANGE
    return clamp(1.0 + (blended - POWER_SCORE_AVERAGE) / POWER_SCORE_AVERAGE * POWER_SCORE_SWING, lo, hi)
