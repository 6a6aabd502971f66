from dataclasses import dataclass


@dataclass(frozen=True)
class ValueMover:
    player_id: str
    player_name: str
    position: str
    current_value: int
    previous_value: int
    value_delta: int
    current_index: float
    previous_index: float
    direction: str


@dataclass(frozen=True)
class ValueMoversReport:
    season: int
    previous_season: int
    risers: list[ValueMover]
    fallers: list[ValueMover]
