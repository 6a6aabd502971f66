import dataclasses
from pathlib import Path
from typing import Annotated, Any

import typer

from mlb_valuations.cli._logging import configure_logging
from mlb_valuations.cli._output import print_error, print_player_valuation, print_rankings, print_value_movers
from mlb_valuations.config import ValuationConfigError, create_config, load_valuation_settings
from mlb_valuations.data.csv_source import CsvPlayerSource
from mlb_valuations.domain.roster import PlayerEntry
from mlb_valuations.services.career_summary import career_summary
from mlb_valuations.services.rankings import rank_players
from mlb_valuations.services.value_movers import ValueMoversService
from mlb_valuations.valuation.compositor import valuate_with_history
from mlb_valuations.valuation.models import ValuationSettings

app = typer.Typer(name="mlbval", help="MLB Valuations: player value estimates from season history")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """MLB Valuations: player value estimates from season history."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_PlayersOpt = Annotated[Path | None, typer.Option("--players", help="Players CSV (default from config)")]
_SeasonsOpt = Annotated[Path | None, typer.Option("--seasons", help="Seasons CSV (default from config)")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML config file")]
_ParamOpt = Annotated[
    list[str] | None, typer.Option("--param", help="Valuation setting as key=value, e.g. discount_rate=0.05")
]
_TopOpt = Annotated[int, typer.Option("--top", help="Number of players to display")]

_SETTING_NAMES: frozenset[str] = frozenset(f.name for f in dataclasses.fields(ValuationSettings))


def _coerce_value(value: str) -> Any:
    """Coerce a CLI string value to int or float, or leave as str."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _parse_params(raw_params: list[str] | None) -> dict[str, Any]:
    parsed: dict[str, Any] = {}
    for param in raw_params or []:
        key, sep, value = param.partition("=")
        if not sep or not key.strip():
            print_error(f"Invalid --param {param!r}; expected key=value")
            raise typer.Exit(code=1)
        if key.strip() not in _SETTING_NAMES:
            print_error(f"Unknown valuation setting: {key.strip()}")
            raise typer.Exit(code=1)
        parsed[key.strip()] = _coerce_value(value.strip())
    return parsed


def _load(
    config_path: str,
    players: Path | None,
    seasons: Path | None,
    params: list[str] | None,
) -> tuple[CsvPlayerSource, ValuationSettings]:
    overrides = _parse_params(params)
    cfg = create_config(yaml_path=config_path, overrides={"valuation": overrides} if overrides else None)
    try:
        settings = load_valuation_settings(cfg)
    except (ValuationConfigError, KeyError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    players_path = players or Path(str(cfg["data.players_path"]))
    seasons_path = seasons or Path(str(cfg["data.seasons_path"]))
    for path in (players_path, seasons_path):
        if not path.exists():
            print_error(f"File not found: {path}")
            raise typer.Exit(code=1)
    return CsvPlayerSource(players_path, seasons_path), settings


def _entries(source: CsvPlayerSource) -> list[PlayerEntry]:
    try:
        return source.entries()
    except KeyError as e:
        print_error(str(e.args[0]) if e.args else str(e))
        raise typer.Exit(code=1) from e


@app.command()
def player(
    player_id: Annotated[str, typer.Argument(help="Player id as it appears in the players CSV")],
    players: _PlayersOpt = None,
    seasons: _SeasonsOpt = None,
    config: _ConfigOpt = "config.yaml",
    param: _ParamOpt = None,
) -> None:
    """Show one player's valuation with its factor breakdown."""
    source, settings = _load(config, players, seasons, param)
    entry = next((e for e in _entries(source) if e.player.player_id == player_id), None)
    if entry is None:
        print_error(f"Unknown player id: {player_id}")
        raise typer.Exit(code=1)
    result = valuate_with_history(entry.player, entry.seasons, settings)
    print_player_valuation(result, career_summary(entry.seasons))


@app.command()
def rankings(
    players: _PlayersOpt = None,
    seasons: _SeasonsOpt = None,
    config: _ConfigOpt = "config.yaml",
    param: _ParamOpt = None,
    top: _TopOpt = 25,
) -> None:
    """Rank all players by valuation index."""
    source, settings = _load(config, players, seasons, param)
    print_rankings(rank_players(_entries(source), settings, top=top))


@app.command()
def movers(
    players: _PlayersOpt = None,
    seasons: _SeasonsOpt = None,
    config: _ConfigOpt = "config.yaml",
    param: _ParamOpt = None,
    season: Annotated[int | None, typer.Option("--season", help="Season to compare against the one before")] = None,
    top: _TopOpt = 20,
) -> None:
    """Biggest valuation risers and fallers from one season to the next."""
    source, settings = _load(config, players, seasons, param)
    service = ValueMoversService(_entries(source), settings)
    if season is None:
        season = service.latest_season()
        if season is None:
            print_error("No season data found.")
            raise typer.Exit(code=1)
    print_value_movers(service.compute_movers(season, top=top))
