from dataclasses import dataclass


@dataclass(frozen=True)
class PrimeWindow:
    start: int
    end: int
    total_metric: float


@dataclass(frozen=True)
class CareerSummary:
    season_count: int
    career_metric: float | None
    career_games: int | None
    peak_season: int | None
    peak_metric: float | None
    best_prime: PrimeWindow | None
    rolling_three_season: dict[int, float]  # keyed by the window's final season
