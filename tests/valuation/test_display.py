import pytest

from mlb_valuations.valuation.display import format_dollar_value, rating_label


class TestFormatDollarValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1_250_000_000, "$1.25B"),
            (1_000_000_000, "$1.00B"),
            (48_300_000, "$48.3M"),
            (1_000_000, "$1.0M"),
            (950_000, "$950,000"),
            (0, "$0"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_dollar_value(value) == expected


class TestRatingLabel:
    @pytest.mark.parametrize(
        ("index", "expected"),
        [
            (100.0, "MVP"),
            (90.0, "MVP"),
            (89.9, "All-Star"),
            (80.0, "All-Star"),
            (75.0, "Great"),
            (60.0, "Very Good"),
            (55.5, "Good"),
            (40.0, "Average"),
            (39.9, "Role Player"),
            (0.0, "Role Player"),
        ],
    )
    def test_label(self, index: float, expected: str) -> None:
        assert rating_label(index) == expected
