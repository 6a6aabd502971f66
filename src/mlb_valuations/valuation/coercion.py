import math


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def safe_number(value: object, fallback: float = 0.0) -> float:
    """Coerce a loosely typed value to a finite float.

    None, non-numeric strings, NaN and infinities all become ``fallback``.
    """
    if value is None or isinstance(value, bool):
        return fallback
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return fallback
    return number if math.isfinite(number) else fallback


def optional_number(value: object) -> float | None:
    """Like ``safe_number`` but keeps "unknown" distinct from zero."""
    if value is None or value == "":
        return None
    number = safe_number(value, math.nan)
    return None if math.isnan(number) else number


def optional_int(value: object) -> int | None:
    number = optional_number(value)
    return None if number is None else int(number)


# Far beyond any real season; keeps sums and products of metrics finite.
METRIC_LIMIT = 1_000_000.0


def bounded_number(value: object, fallback: float = 0.0) -> float:
    """``safe_number`` clamped to +/- ``METRIC_LIMIT``."""
    return clamp(safe_number(value, fallback), -METRIC_LIMIT, METRIC_LIMIT)


def optional_bounded(value: object) -> float | None:
    number = optional_number(value)
    return None if number is None else clamp(number, -METRIC_LIMIT, METRIC_LIMIT)
