import csv
import logging
from collections import defaultdict
from pathlib import Path

from mlb_valuations.domain.roster import PlayerEntry
from mlb_valuations.valuation.models import PlayerRecord, SeasonRecord

logger = logging.getLogger(__name__)


def _normalize_headers(reader: csv.DictReader) -> list[dict[str, str]]:
    """Read all rows with case-insensitive header normalization."""
    if reader.fieldnames is None:
        return []
    lower_map = {name: name.strip().lower() for name in reader.fieldnames}
    rows: list[dict[str, str]] = []
    for row in reader:
        normalized = {lower_map[k]: v for k, v in row.items() if k in lower_map}
        rows.append(normalized)
    return rows


def _read_rows(path: Path, required: tuple[str, ...]) -> list[dict[str, str]]:
    with open(path, newline="") as f:
        reader = csv.DictReader(f)
        rows = _normalize_headers(reader)
        headers = {name.strip().lower() for name in reader.fieldnames or ()}
    missing = [col for col in required if col not in headers]
    if missing:
        raise KeyError(f"{path}: missing required column(s): {', '.join(missing)}")
    return rows


class CsvPlayerSource:
    """Players and their season rows from a pair of CSV exports."""

    def __init__(self, players_path: Path, seasons_path: Path) -> None:
        self._players_path = players_path
        self._seasons_path = seasons_path

    def players(self) -> list[PlayerRecord]:
        rows = _read_rows(self._players_path, ("player_id",))
        return [PlayerRecord.from_mapping(row) for row in rows if (row.get("player_id") or "").strip()]

    def seasons(self) -> dict[str, list[SeasonRecord]]:
        rows = _read_rows(self._seasons_path, ("player_id", "season"))
        if rows and "metric" not in rows[0] and "war" not in rows[0]:
            raise KeyError(f"{self._seasons_path}: missing required column: metric (or war)")
        by_player: dict[str, list[SeasonRecord]] = defaultdict(list)
        skipped = 0
        for row in rows:
            player_id = (row.get("player_id") or "").strip()
            if not player_id:
                skipped += 1
                continue
            by_player[player_id].append(SeasonRecord.from_mapping(row))
        if skipped:
            logger.warning("Skipped %d season row(s) without a player id", skipped)
        return dict(by_player)

    def entries(self) -> list[PlayerEntry]:
        """Join players to their seasons. Players without seasons get an empty history."""
        seasons = self.seasons()
        players = self.players()
        orphaned = set(seasons) - {p.player_id for p in players}
        if orphaned:
            logger.warning("Ignoring seasons for %d unknown player id(s)", len(orphaned))
        return [PlayerEntry(player=p, seasons=tuple(seasons.get(p.player_id, ()))) for p in players]
