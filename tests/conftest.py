"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mlb_valuations.valuation.models import PlayerRecord, SeasonRecord

if TYPE_CHECKING:
    from pathlib import Path

PLAYERS_CSV = """player_id,name,age,position,games_played,power_pct
p1,Rising Star,25,SS,150,95
p2,Falling Vet,34,DH,120,
p3,Rookie,22,CF,,
"""

SEASONS_CSV = """player_id,season,metric,games_played,secondary_metric
p1,2023,2.0,140,20
p1,2024,6.0,150,35
p2,2023,6.0,150,
p2,2024,1.0,120,
p3,2024,3.0,90,
"""


@pytest.fixture
def csv_paths(tmp_path: Path) -> tuple[Path, Path]:
    """Write a small players/seasons CSV pair and return their paths."""
    players = tmp_path / "players.csv"
    seasons = tmp_path / "seasons.csv"
    players.write_text(PLAYERS_CSV)
    seasons.write_text(SEASONS_CSV)
    return players, seasons


@pytest.fixture
def star() -> PlayerRecord:
    return PlayerRecord(player_id="star", name="Star Player", age=27, position="SS", games_played=155)


@pytest.fixture
def star_seasons() -> list[SeasonRecord]:
    return [
        SeasonRecord(season=2024, metric=7.0, games_played=155),
        SeasonRecord(season=2023, metric=6.5, games_played=150),
        SeasonRecord(season=2022, metric=6.0, games_played=148),
    ]
