from collections.abc import Iterable

from mlb_valuations.domain.roster import PlayerEntry, RankedPlayer
from mlb_valuations.valuation.compositor import valuate
from mlb_valuations.valuation.models import ValuationSettings


def rank_players(
    entries: Iterable[PlayerEntry],
    settings: ValuationSettings | None = None,
    *,
    top: int | None = None,
) -> list[RankedPlayer]:
    """Value every player and order by index, then dollar value, best first."""
    valued = [(entry.player, valuate(entry.player, entry.seasons, settings)) for entry in entries]
    valued.sort(key=lambda pv: (pv[1].index, pv[1].dollar_value), reverse=True)
    if top is not None:
        valued = valued[:top]
    return [RankedPlayer(rank=i, player=p, valuation=v) for i, (p, v) in enumerate(valued, start=1)]
