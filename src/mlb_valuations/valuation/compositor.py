"""Turn a player's season history into a dollar estimate and a 0-100 index."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from mlb_valuations.valuation.aggregator import aggregate_seasons
from mlb_valuations.valuation.blending import blend_metric
from mlb_valuations.valuation.coercion import clamp, optional_int, safe_number
from mlb_valuations.valuation.factors import (
    age_factor,
    consistency_bonus,
    elite_skill_premium,
    is_pitcher,
    playing_time_factor,
    position_factor,
    power_score_modifier,
    track_record_multiplier,
)
from mlb_valuations.valuation.models import (
    DEFAULT_SETTINGS,
    PlayerRecord,
    PlayerValuation,
    ValuationResult,
    ValuationSettings,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mlb_valuations.valuation.models import HistoricalAggregate, SeasonRecord

logger = logging.getLogger(__name__)

POSITION_PLAYER_HORIZON = (6, 4, 8)  # (base, min, max)
PITCHER_HORIZON = (4, 3, 6)
HORIZON_PIVOT_AGE = 31
MAX_DOLLAR_VALUE = 1e15


def present_value(amount: float, year: int, rate: float) -> float:
    return amount / (1.0 + rate) ** year


def horizon_years(age: int | None, position: str | None, settings: ValuationSettings = DEFAULT_SETTINGS) -> int:
    """Years of future value to count. Pitchers and older players get fewer."""
    years = settings.neutral_age if age is None else age
    base, lo, hi = PITCHER_HORIZON if is_pitcher(position) else POSITION_PLAYER_HORIZON
    adj = int(clamp(HORIZON_PIVOT_AGE - years, -3, 6))
    return int(clamp(base + math.floor(adj / 2), lo, hi))


def _saturate(amount: float, lo: float) -> float:
    """Clamp a dollar amount into [lo, MAX_DOLLAR_VALUE]. NaN reads as zero."""
    if math.isnan(amount):
        return 0.0
    return clamp(amount, lo, MAX_DOLLAR_VALUE)


def valuation_index(dollars: float, settings: ValuationSettings = DEFAULT_SETTINGS) -> float:
    """Saturating curve: 100 * (1 - e^(-dollars / scale)), one decimal place."""
    value = max(0.0, safe_number(dollars))
    return round(clamp(100.0 * (1.0 - math.exp(-value / settings.index_scale)), 0.0, 100.0), 1)


def _compute_factors(
    player: PlayerRecord,
    aggregate: HistoricalAggregate,
    blended: float,
    settings: ValuationSettings,
) -> dict[str, float]:
    games = aggregate.current_games_played
    if games is None:
        games = player.games_played
    return {
        "age_factor": age_factor(player.age, aggregate.current_metric, settings),
        "position_factor": position_factor(player.position),
        "playing_time_factor": playing_time_factor(games, settings),
        "elite_skill_premium": elite_skill_premium(player, aggregate),
        "track_record_multiplier": track_record_multiplier(aggregate, blended, settings),
        "consistency_bonus": consistency_bonus(aggregate.consistency_score),
        "power_score_modifier": power_score_modifier(aggregate.current_secondary, aggregate.trailing_secondary),
    }


def _valuate(
    player: PlayerRecord,
    seasons: Iterable[SeasonRecord],
    settings: ValuationSettings,
) -> tuple[ValuationResult, HistoricalAggregate]:
    aggregate = aggregate_seasons(seasons, settings)
    blended = blend_metric(aggregate.current_metric, aggregate, settings)
    factors = _compute_factors(player, aggregate, blended, settings)

    age = optional_int(player.age)
    horizon = horizon_years(age, player.position, settings)
    per_year = blended * settings.dollars_per_unit
    pv_sum = sum(present_value(per_year, year, settings.discount_rate) for year in range(1, horizon + 1))

    total = pv_sum
    for value in factors.values():
        total *= value
    dollars = round(_saturate(total, 0.0))

    breakdown: dict[str, float] = {
        "blended_metric": round(blended, 2),
        "age_used": settings.neutral_age if age is None else age,
    }
    breakdown.update({name: round(value * 100) for name, value in factors.items()})
    breakdown["horizon_years"] = horizon
    breakdown["present_value_sum"] = round(_saturate(pv_sum, -MAX_DOLLAR_VALUE))

    result = ValuationResult(
        index=valuation_index(dollars, settings),
        dollar_value=dollars,
        breakdown=breakdown,
    )
    logger.debug(
        "Valuated %s: %d seasons, blended=%.2f, horizon=%d, dollars=%d, index=%.1f",
        player.player_id or player.name or "player",
        aggregate.season_count,
        blended,
        horizon,
        dollars,
        result.index,
    )
    return result, aggregate


def valuate(
    player: PlayerRecord,
    seasons: Iterable[SeasonRecord],
    settings: ValuationSettings | None = None,
) -> ValuationResult:
    """Value a player from their season history.

    Always returns a finite result: missing ages, unknown positions and empty
    histories degrade to neutral factors or the track-record penalty.
    """
    result, _ = _valuate(player, seasons, settings or DEFAULT_SETTINGS)
    return result


def valuate_with_history(
    player: PlayerRecord,
    seasons: Iterable[SeasonRecord],
    settings: ValuationSettings | None = None,
) -> PlayerValuation:
    result, aggregate = _valuate(player, seasons, settings or DEFAULT_SETTINGS)
    return PlayerValuation(player=player, valuation=result, history=aggregate)
