from mlb_valuations.valuation.coercion import bounded_number
from mlb_valuations.valuation.models import DEFAULT_SETTINGS, HistoricalAggregate, ValuationSettings


def _weighted_change(change: float, band: float, settings: ValuationSettings) -> float:
    """Apply marginal blend weights to a change from the trailing average.

    Inside the stable band the change is split evenly with history. Beyond it,
    the extra rise is mostly regressed (spike) and the extra drop is mostly
    kept (decline).
    """
    if change >= 0:
        inside = min(change, band)
        return settings.stable_weight * inside + settings.spike_weight * (change - inside)
    inside = max(change, -band)
    return settings.stable_weight * inside + settings.decline_weight * (change - inside)


def blend_metric(
    current: object,
    aggregate: HistoricalAggregate,
    settings: ValuationSettings = DEFAULT_SETTINGS,
) -> float:
    """Combine the current-season metric with the player's history.

    With no prior seasons the raw value is used and the track-record
    multiplier carries the uncertainty instead.
    """
    value = bounded_number(current)
    seasons = aggregate.seasons
    if len(seasons) < 2:
        return value
    if len(seasons) == 2:
        prior = bounded_number(seasons[1].metric)
        weight = settings.two_season_current_weight
        return weight * value + (1.0 - weight) * prior

    trailing = aggregate.trailing_average
    band = settings.stable_band * abs(trailing)
    return trailing + _weighted_change(value - trailing, band, settings)
