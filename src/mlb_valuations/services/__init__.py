from mlb_valuations.services.career_summary import career_summary
from mlb_valuations.services.rankings import rank_players
from mlb_valuations.services.value_movers import ValueMoversService

__all__ = [
    "ValueMoversService",
    "career_summary",
    "rank_players",
]
