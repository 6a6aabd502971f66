from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from mlb_valuations.valuation.coercion import optional_int, optional_number, safe_number


def _first_present(row: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        if key in row and row[key] is not None and row[key] != "":
            return row[key]
    return None


@dataclass(frozen=True)
class PlayerRecord:
    age: int | None = None
    position: str | None = None
    games_played: int | None = None
    player_id: str = ""
    name: str = ""
    plate_discipline_pct: float | None = None
    power_pct: float | None = None
    speed_pct: float | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, object]) -> PlayerRecord:
        """Build a record from a loosely typed row (API payload, CSV row, DB row)."""
        position = _first_present(row, "position", "role")
        return cls(
            age=optional_int(row.get("age")),
            position=str(position).strip() if position is not None else None,
            games_played=optional_int(_first_present(row, "games_played", "gamesPlayed")),
            player_id=str(_first_present(row, "player_id", "id") or "").strip(),
            name=str(row.get("name") or ""),
            plate_discipline_pct=optional_number(_first_present(row, "plate_discipline_pct", "plateDisciplinePct")),
            power_pct=optional_number(_first_present(row, "power_pct", "powerPct")),
            speed_pct=optional_number(_first_present(row, "speed_pct", "speedPct")),
        )


@dataclass(frozen=True)
class SeasonRecord:
    season: int
    metric: float
    games_played: int | None = None
    secondary_metric: float | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, object]) -> SeasonRecord:
        return cls(
            season=int(safe_number(row.get("season"))),
            metric=safe_number(_first_present(row, "metric", "war")),
            games_played=optional_int(_first_present(row, "games_played", "gamesPlayed")),
            secondary_metric=optional_number(_first_present(row, "secondary_metric", "secondaryMetric", "tps")),
        )


@dataclass(frozen=True)
class HistoricalAggregate:
    seasons: tuple[SeasonRecord, ...] = ()
    has_history: bool = False
    current_metric: float = 0.0
    trailing_average: float = 0.0
    prior_average: float | None = None
    career_peak: float = 0.0
    elite_seasons: int = 0
    consistency_score: float | None = None
    current_games_played: int | None = None
    current_secondary: float | None = None
    trailing_secondary: float | None = None

    @property
    def season_count(self) -> int:
        return len(self.seasons)


@dataclass(frozen=True)
class ValuationResult:
    index: float
    dollar_value: int
    breakdown: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copy; the caller's dict stays detached.
        object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))

    @property
    def performance_score(self) -> float:
        return self.breakdown.get("blended_metric", 0.0)


@dataclass(frozen=True)
class PlayerValuation:
    player: PlayerRecord
    valuation: ValuationResult
    history: HistoricalAggregate


@dataclass(frozen=True)
class ValuationSettings:
    """Every tunable constant of the valuation engine.

    Metrics are on the win-contribution scale (about 2 for a replacement-level
    season, 8 and up for a historically great one).
    """

    dollars_per_unit: float = 11_000_000.0
    discount_rate: float = 0.06
    elite_threshold: float = 4.0
    elite_override_metric: float = 6.0
    trailing_window: int = 3
    two_season_current_weight: float = 0.6
    stable_band: float = 0.25
    stable_weight: float = 0.5
    spike_weight: float = 0.3
    decline_weight: float = 0.7
    index_scale: float = 250_000_000.0
    neutral_age: int = 27
    full_season_games: int = 162


DEFAULT_SETTINGS = ValuationSettings()
