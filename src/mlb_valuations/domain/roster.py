from dataclasses import dataclass

from mlb_valuations.valuation.models import PlayerRecord, SeasonRecord, ValuationResult


@dataclass(frozen=True)
class PlayerEntry:
    player: PlayerRecord
    seasons: tuple[SeasonRecord, ...]


@dataclass(frozen=True)
class RankedPlayer:
    rank: int
    player: PlayerRecord
    valuation: ValuationResult
