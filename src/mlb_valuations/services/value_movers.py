import logging
from collections.abc import Iterable

from mlb_valuations.domain.roster import PlayerEntry
from mlb_valuations.domain.value_movers import ValueMover, ValueMoversReport
from mlb_valuations.valuation.compositor import valuate
from mlb_valuations.valuation.models import ValuationSettings

logger = logging.getLogger(__name__)


class ValueMoversService:
    """Compare each player's valuation through one season against the season before."""

    def __init__(self, entries: Iterable[PlayerEntry], settings: ValuationSettings | None = None) -> None:
        self._entries = list(entries)
        self._settings = settings

    def latest_season(self) -> int | None:
        seasons = [s.season for e in self._entries for s in e.seasons]
        return max(seasons) if seasons else None

    def compute_movers(self, season: int, *, top: int = 20) -> ValueMoversReport:
        previous_season = season - 1
        risers: list[ValueMover] = []
        fallers: list[ValueMover] = []
        skipped = 0

        for entry in self._entries:
            # Only players who appeared this season and also have earlier history.
            if not any(s.season == season for s in entry.seasons):
                continue
            through_current = [s for s in entry.seasons if s.season <= season]
            through_previous = [s for s in entry.seasons if s.season <= previous_season]
            if not through_previous:
                skipped += 1
                continue

            current = valuate(entry.player, through_current, self._settings)
            previous = valuate(entry.player, through_previous, self._settings)
            delta = current.dollar_value - previous.dollar_value
            if delta == 0:
                continue

            mover = ValueMover(
                player_id=entry.player.player_id,
                player_name=entry.player.name or entry.player.player_id,
                position=entry.player.position or "",
                current_value=current.dollar_value,
                previous_value=previous.dollar_value,
                value_delta=delta,
                current_index=current.index,
                previous_index=previous.index,
                direction="riser" if delta > 0 else "faller",
            )
            if delta > 0:
                risers.append(mover)
            else:
                fallers.append(mover)

        if skipped:
            logger.debug("Skipped %d player(s) with no history before %d", skipped, season)

        risers.sort(key=lambda m: m.value_delta, reverse=True)
        fallers.sort(key=lambda m: m.value_delta)

        return ValueMoversReport(
            season=season,
            previous_season=previous_season,
            risers=risers[:top],
            fallers=fallers[:top],
        )
