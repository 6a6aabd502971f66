from __future__ import annotations

import dataclasses
import math

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from mlb_valuations.valuation.models import DEFAULT_SETTINGS, ValuationSettings


class ValuationConfigError(Exception):
    """Raised when a configured valuation constant is out of range."""


_INT_FIELDS: frozenset[str] = frozenset(
    f.name for f in dataclasses.fields(ValuationSettings) if f.type in ("int", int)
)

_DEFAULTS: dict[str, object] = {
    "valuation": dataclasses.asdict(DEFAULT_SETTINGS),
    "data": {
        "players_path": "players.csv",
        "seasons_path": "seasons.csv",
    },
}


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "MLBVAL",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. ``MLBVAL__VALUATION__DISCOUNT_RATE``.
        defaults: Default configuration values.
        overrides: Values that win over every other layer.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _coerce(name: str, raw: object) -> float | int:
    try:
        number = float(str(raw))
    except ValueError as e:
        raise ValuationConfigError(f"valuation.{name}: expected a number, got {raw!r}") from e
    if not math.isfinite(number):
        raise ValuationConfigError(f"valuation.{name}: expected a finite number, got {raw!r}")
    return int(number) if name in _INT_FIELDS else number


def validate_settings(settings: ValuationSettings) -> None:
    for f in dataclasses.fields(settings):
        if not math.isfinite(getattr(settings, f.name)):
            raise ValuationConfigError(f"valuation.{f.name} must be finite, got {getattr(settings, f.name)}")
    if settings.dollars_per_unit <= 0:
        raise ValuationConfigError(f"valuation.dollars_per_unit must be > 0, got {settings.dollars_per_unit}")
    if settings.discount_rate < 0:
        raise ValuationConfigError(f"valuation.discount_rate must be >= 0, got {settings.discount_rate}")
    if settings.index_scale <= 0:
        raise ValuationConfigError(f"valuation.index_scale must be > 0, got {settings.index_scale}")
    if settings.trailing_window < 1:
        raise ValuationConfigError(f"valuation.trailing_window must be >= 1, got {settings.trailing_window}")
    if settings.full_season_games <= 0:
        raise ValuationConfigError(f"valuation.full_season_games must be > 0, got {settings.full_season_games}")
    if settings.stable_band < 0:
        raise ValuationConfigError(f"valuation.stable_band must be >= 0, got {settings.stable_band}")
    for name in ("elite_threshold", "elite_override_metric", "neutral_age"):
        if getattr(settings, name) < 0:
            raise ValuationConfigError(f"valuation.{name} must be >= 0, got {getattr(settings, name)}")
    for name in ("two_season_current_weight", "stable_weight", "spike_weight", "decline_weight"):
        weight = getattr(settings, name)
        if not 0.0 <= weight <= 1.0:
            raise ValuationConfigError(f"valuation.{name} must be within [0, 1], got {weight}")


def load_valuation_settings(cfg: ConfigurationSet | None = None) -> ValuationSettings:
    if cfg is None:
        cfg = create_config()
    values = {f.name: _coerce(f.name, cfg[f"valuation.{f.name}"]) for f in dataclasses.fields(ValuationSettings)}
    settings = ValuationSettings(**values)  # type: ignore[arg-type]
    validate_settings(settings)
    return settings
