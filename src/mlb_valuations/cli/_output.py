from rich.console import Console
from rich.table import Table

from mlb_valuations.domain.career import CareerSummary
from mlb_valuations.domain.roster import RankedPlayer
from mlb_valuations.domain.value_movers import ValueMover, ValueMoversReport
from mlb_valuations.valuation.display import format_dollar_value, rating_label
from mlb_valuations.valuation.models import PlayerValuation

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_FACTOR_LABELS: dict[str, str] = {
    "age_factor": "Age",
    "position_factor": "Position",
    "playing_time_factor": "Playing time",
    "elite_skill_premium": "Elite skill premium",
    "track_record_multiplier": "Track record",
    "consistency_bonus": "Consistency",
    "power_score_modifier": "Power score",
}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_player_valuation(result: PlayerValuation, summary: CareerSummary) -> None:
    player = result.player
    valuation = result.valuation
    title = player.name or player.player_id
    details = ", ".join(str(v) for v in (player.position, f"age {player.age}" if player.age is not None else None) if v)
    console.print(f"[bold]{title}[/bold]" + (f" [dim]({details})[/dim]" if details else ""))
    console.print(
        f"  Value: [bold]{format_dollar_value(valuation.dollar_value)}[/bold]"
        f"  Index: [bold]{valuation.index:.1f}[/bold] ({rating_label(valuation.index)})"
    )
    console.print(f"  Performance score: {valuation.performance_score:.2f}")

    table = Table(show_header=False, show_edge=False, pad_edge=False, box=None)
    table.add_column("Factor")
    table.add_column("Pct", justify="right")
    for key, label in _FACTOR_LABELS.items():
        if key in valuation.breakdown:
            table.add_row(label, f"{valuation.breakdown[key]:.0f}%")
    table.add_row("Horizon", f"{valuation.breakdown.get('horizon_years', 0):.0f} yrs")
    table.add_row("Discounted stream", format_dollar_value(valuation.breakdown.get("present_value_sum", 0)))
    console.print(table)

    if summary.season_count == 0:
        console.print("  [dim]No season history.[/dim]")
        return
    console.print(f"  Seasons: {summary.season_count}  Career metric: {summary.career_metric:.1f}")
    if summary.career_games is not None:
        console.print(f"  Career games: {summary.career_games}")
    if summary.peak_season is not None and summary.peak_metric is not None:
        console.print(f"  Peak: {summary.peak_metric:.1f} in {summary.peak_season}")
    if summary.best_prime is not None:
        prime = summary.best_prime
        console.print(f"  Best prime: {prime.start}-{prime.end} ({prime.total_metric:.1f})")


def print_rankings(rankings: list[RankedPlayer]) -> None:
    if not rankings:
        console.print("No players found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Rank", justify="right")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Age", justify="right")
    table.add_column("Index", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Rating")
    for ranked in rankings:
        player = ranked.player
        table.add_row(
            str(ranked.rank),
            player.name or player.player_id,
            player.position or "",
            "" if player.age is None else str(player.age),
            f"{ranked.valuation.index:.1f}",
            format_dollar_value(ranked.valuation.dollar_value),
            rating_label(ranked.valuation.index),
        )
    console.print(table)


def _movers_table(title: str, movers: list[ValueMover]) -> Table:
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Change", justify="right")
    table.add_column("Now", justify="right")
    table.add_column("Before", justify="right")
    for m in movers:
        color = "green" if m.value_delta > 0 else "red"
        sign = "+" if m.value_delta > 0 else "-"
        table.add_row(
            m.player_name,
            m.position,
            f"[{color}]{sign}{format_dollar_value(abs(m.value_delta))}[/{color}]",
            format_dollar_value(m.current_value),
            format_dollar_value(m.previous_value),
        )
    return table


def print_value_movers(report: ValueMoversReport) -> None:
    console.print(f"Value movers: {report.previous_season} -> {report.season}")
    if not report.risers and not report.fallers:
        console.print("No movers found.")
        return
    if report.risers:
        console.print(_movers_table("Risers", report.risers))
    if report.fallers:
        console.print(_movers_table("Fallers", report.fallers))
