import pytest

from mlb_valuations.valuation.aggregator import aggregate_seasons
from mlb_valuations.valuation.blending import blend_metric
from mlb_valuations.valuation.models import HistoricalAggregate, SeasonRecord, ValuationSettings


def _blend(*metrics: float, settings: ValuationSettings | None = None) -> float:
    """Blend the most recent of ``metrics`` (listed newest first) with the rest."""
    seasons = [SeasonRecord(season=2024 - i, metric=m) for i, m in enumerate(metrics)]
    if settings is None:
        return blend_metric(metrics[0], aggregate_seasons(seasons))
    return blend_metric(metrics[0], aggregate_seasons(seasons, settings), settings)


class TestBlendMetric:
    def test_no_history_returns_raw_value(self) -> None:
        assert blend_metric(5.0, HistoricalAggregate()) == 5.0

    def test_single_season_returns_raw_value(self) -> None:
        assert _blend(7.5) == 7.5

    def test_junk_current_is_zero(self) -> None:
        assert blend_metric("n/a", HistoricalAggregate()) == 0.0

    def test_two_seasons_fixed_weights(self) -> None:
        # 0.6 * 6 + 0.4 * 2
        assert _blend(6.0, 2.0) == pytest.approx(4.4)

    def test_stable_season_split_evenly(self) -> None:
        # trailing 5.0; change 0.5 is inside the 1.25 band
        assert _blend(5.5, 5.0, 4.5) == pytest.approx(5.25)

    def test_decline_mostly_kept(self) -> None:
        # trailing 5.0, band 1.25: -1.25 at 0.5, the remaining -1.75 at 0.7
        assert _blend(2.0, 6.0, 7.0) == pytest.approx(3.15)
        assert _blend(2.0, 6.0, 7.0) < 3.5

    def test_spike_mostly_regressed(self) -> None:
        # trailing 5.0, band 1.25: +1.25 at 0.5, the remaining +2.75 at 0.3
        assert _blend(9.0, 3.0, 3.0, 3.0) == pytest.approx(6.45)

    def test_unchanged_season_returns_trailing(self) -> None:
        assert _blend(4.0, 4.0, 4.0) == pytest.approx(4.0)

    def test_negative_trailing_uses_absolute_band(self) -> None:
        # trailing -1.0, band 0.25: +0.25 at 0.5, the remaining +1.75 at 0.3
        assert _blend(1.0, -2.0, -2.0) == pytest.approx(-1.0 + 0.125 + 0.525)

    def test_monotonic_in_current_metric(self) -> None:
        prior = [SeasonRecord(season=2023, metric=4.0), SeasonRecord(season=2022, metric=3.0)]
        blended = []
        for tenth in range(-20, 121):
            current = tenth / 10
            agg = aggregate_seasons([SeasonRecord(season=2024, metric=current), *prior])
            blended.append(blend_metric(current, agg))
        assert blended == sorted(blended)

    def test_weights_from_settings(self) -> None:
        settings = ValuationSettings(two_season_current_weight=1.0)
        assert _blend(6.0, 2.0, settings=settings) == pytest.approx(6.0)
