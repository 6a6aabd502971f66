RATING_LABELS: tuple[tuple[float, str], ...] = (
    (90.0, "MVP"),
    (80.0, "All-Star"),
    (70.0, "Great"),
    (60.0, "Very Good"),
    (50.0, "Good"),
    (40.0, "Average"),
)
DEFAULT_RATING_LABEL = "Role Player"


def format_dollar_value(value: float) -> str:
    """Compact dollar string: $1.25B, $48.3M, or $950,000."""
    if value >= 1_000_000_000:
        return f"${value / 1e9:.2f}B"
    if value >= 1_000_000:
        return f"${value / 1e6:.1f}M"
    return f"${value:,.0f}"


def rating_label(index: float) -> str:
    for threshold, label in RATING_LABELS:
        if index >= threshold:
            return label
    return DEFAULT_RATING_LABEL
