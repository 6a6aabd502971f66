from mlb_valuations.valuation.aggregator import aggregate_seasons, consistency_score, sort_seasons
from mlb_valuations.valuation.blending import blend_metric
from mlb_valuations.valuation.compositor import (
    horizon_years,
    present_value,
    valuate,
    valuate_with_history,
    valuation_index,
)
from mlb_valuations.valuation.display import format_dollar_value, rating_label
from mlb_valuations.valuation.factors import (
    age_factor,
    consistency_bonus,
    elite_skill_premium,
    playing_time_factor,
    position_factor,
    power_score_modifier,
    track_record_multiplier,
)
from mlb_valuations.valuation.models import (
    DEFAULT_SETTINGS,
    HistoricalAggregate,
    PlayerRecord,
    PlayerValuation,
    SeasonRecord,
    ValuationResult,
    ValuationSettings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "HistoricalAggregate",
    "PlayerRecord",
    "PlayerValuation",
    "SeasonRecord",
    "ValuationResult",
    "ValuationSettings",
    "age_factor",
    "aggregate_seasons",
    "blend_metric",
    "consistency_bonus",
    "consistency_score",
    "elite_skill_premium",
    "format_dollar_value",
    "horizon_years",
    "playing_time_factor",
    "position_factor",
    "power_score_modifier",
    "present_value",
    "rating_label",
    "sort_seasons",
    "track_record_multiplier",
    "valuate",
    "valuate_with_history",
    "valuation_index",
]
