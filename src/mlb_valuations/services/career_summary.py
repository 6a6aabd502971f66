from collections.abc import Iterable

from mlb_valuations.domain.career import CareerSummary, PrimeWindow
from mlb_valuations.valuation.models import SeasonRecord

PRIME_WINDOW = 3


def career_summary(seasons: Iterable[SeasonRecord]) -> CareerSummary:
    """Career totals, peak season and best three-season stretch for a player page."""
    ordered = sorted(seasons, key=lambda s: s.season)
    if not ordered:
        return CareerSummary(
            season_count=0,
            career_metric=None,
            career_games=None,
            peak_season=None,
            peak_metric=None,
            best_prime=None,
            rolling_three_season={},
        )

    known_games = [s.games_played for s in ordered if s.games_played is not None]

    peak = ordered[0]
    for s in ordered[1:]:
        if s.metric > peak.metric:
            peak = s

    rolling: dict[int, float] = {}
    best_prime: PrimeWindow | None = None
    for i in range(len(ordered) - PRIME_WINDOW + 1):
        window = ordered[i : i + PRIME_WINDOW]
        total = sum(s.metric for s in window)
        rolling[window[-1].season] = total
        if best_prime is None or total > best_prime.total_metric:
            best_prime = PrimeWindow(start=window[0].season, end=window[-1].season, total_metric=total)

    return CareerSummary(
        season_count=len(ordered),
        career_metric=sum(s.metric for s in ordered),
        career_games=sum(known_games) if known_games else None,
        peak_season=peak.season,
        peak_metric=peak.metric,
        best_prime=best_prime,
        rolling_three_season=rolling,
    )
