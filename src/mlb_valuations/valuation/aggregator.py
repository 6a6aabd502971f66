import statistics
from collections.abc import Iterable

from mlb_valuations.valuation.coercion import bounded_number, clamp, optional_bounded
from mlb_valuations.valuation.models import DEFAULT_SETTINGS, HistoricalAggregate, SeasonRecord, ValuationSettings


def sort_seasons(seasons: Iterable[SeasonRecord]) -> tuple[SeasonRecord, ...]:
    """Return a new tuple ordered most recent season first."""
    return tuple(sorted(seasons, key=lambda s: s.season, reverse=True))


def consistency_score(values: list[float]) -> float | None:
    """100 minus the coefficient of variation (as a percentage), clamped to [0, 100].

    Undefined for fewer than two seasons or a non-positive mean.
    """
    if len(values) < 2:
        return None
    mean = statistics.fmean(values)
    if mean <= 0.0:
        return None
    cv = statistics.pstdev(values, mu=mean) / mean * 100.0
    return clamp(100.0 - cv, 0.0, 100.0)


def aggregate_seasons(
    seasons: Iterable[SeasonRecord],
    settings: ValuationSettings = DEFAULT_SETTINGS,
) -> HistoricalAggregate:
    ordered = sort_seasons(seasons)
    if not ordered:
        return HistoricalAggregate()

    metrics = [bounded_number(s.metric) for s in ordered]
    window = max(1, settings.trailing_window)
    recent = metrics[:window]

    prior = metrics[1:]
    secondaries = [v for v in (optional_bounded(s.secondary_metric) for s in ordered[:window]) if v is not None]

    return HistoricalAggregate(
        seasons=ordered,
        has_history=True,
        current_metric=metrics[0],
        trailing_average=statistics.fmean(recent),
        prior_average=statistics.fmean(prior) if prior else None,
        career_peak=max(metrics),
        elite_seasons=sum(1 for m in metrics if m >= settings.elite_threshold),
        consistency_score=consistency_score(metrics),
        current_games_played=ordered[0].games_played,
        current_secondary=optional_bounded(ordered[0].secondary_metric),
        trailing_secondary=statistics.fmean(secondaries) if secondaries else None,
    )
