"""
Five-Year Plan Command-Line Interface.

A terminal front-end for the simulation. Everything shown here is read
from the Session; the only things sent back are player actions.
"""

import logging
import sys
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from fiveyearplan import __version__
from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.engine.errors import InvalidAllocationError
from fiveyearplan.engine.events import EVENT_REGISTRY, describe
from fiveyearplan.engine.simulation import Session
from fiveyearplan.engine.validation import ValidationResult
from fiveyearplan.i18n import t
from fiveyearplan.models.game import GameState, ReportData
from fiveyearplan.models.modifiers import FlagDelta, ModifierDelta
from fiveyearplan.models.outcome import Outcome
from fiveyearplan.models.sectors import Allocation, Goal, Sector

console = Console()

SECTOR_ICONS = {
    Sector.HEAVY: "🏭",
    Sector.LIGHT: "👕",
    Sector.AGRI: "🌾",
}

SECTOR_COLORS = {
    Sector.HEAVY: "red",
    Sector.LIGHT: "green",
    Sector.AGRI: "yellow",
}


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="fiveyearplan")
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity to stderr")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON or YAML file overriding simulation parameters",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[str]) -> None:
    """
    Five-Year Plan Simulator

    Steer a national economy through 1953-1962.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = PlanConfig.from_file(config_path) if config_path else get_default_config()
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


# =============================================================================
# Commands
# =============================================================================


@cli.command()
@click.option(
    "--goal",
    "-g",
    type=click.Choice([g.value for g in Goal]),
    default=None,
    help="Development goal (asked interactively if omitted)",
)
@click.pass_context
def play(ctx: click.Context, goal: Optional[str]) -> None:
    """Play a full game."""
    session = Session(config=ctx.obj["config"])

    console.print()
    console.print(Panel.fit(
        f"[bold red]{t('app.title')}[/bold red]\n[dim]{t('app.subtitle')}[/dim]",
        border_style="red",
    ))
    console.print(t("app.intro"))
    console.print()

    if goal is None:
        goal = _choose_goal()
    session.select_goal(Goal(goal))

    try:
        _play_session(session)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Game abandoned.[/yellow]")


@cli.command()
def events() -> None:
    """List the scripted historical events and their effects."""
    table = Table(title="Historical Events", box=None)
    table.add_column("Year", justify="right")
    table.add_column("Event")
    table.add_column("If accepted")

    for event_id, event in sorted(EVENT_REGISTRY.items(), key=lambda item: item[1].year):
        text = describe(event_id)
        table.add_row(str(event.year), text.title, _format_effect(event.effect.modifiers, event.effect.flags))

    console.print(table)


@cli.command()
def info() -> None:
    """Show information about the simulator."""
    console.print(Panel.fit(
        f"""[bold red]{t('app.title')}[/bold red]

Allocate each year's budget between heavy industry, light industry and
agriculture. Shares run from 5% to 90% and must total exactly 100%.

[bold]Timeline:[/bold]
  - 1953-1957: First Five-Year Plan, reviewed on entering 1958
  - 1958-1962: Second Five-Year Plan, followed by the final review

[bold]Watch for:[/bold]
  - Soviet aid boosts heavy industry until 1960
  - Natural disasters hit agriculture in 1959-1961
  - A strong industrial base unlocks the rocket program""",
        title="About",
        border_style="red",
    ))


# =============================================================================
# Interactive Game Play
# =============================================================================


def _choose_goal() -> str:
    """Ask the player for a development goal."""
    for index, goal in enumerate(Goal, start=1):
        console.print(f"  [{index}] [bold]{t(f'goals.{goal.value}.label')}[/bold]")
        console.print(f"      {t(f'goals.{goal.value}.description')}")
        console.print(f"      [dim]{t(f'goals.{goal.value}.difficulty')}[/dim]")
    choice = Prompt.ask("Goal", choices=["1", "2"], default="1")
    return list(Goal)[int(choice) - 1].value


def _play_session(session: Session) -> None:
    """Main interactive game loop, one action per iteration."""
    while not session.is_final:
        state = session.snapshot()

        if session.is_checkpoint:
            _display_checkpoint(state, session.config.indices.initial)
            Prompt.ask(f"[dim]{t('checkpoint.continue')} (Enter)[/dim]", default="")
            session.continue_to_phase2()
            continue

        if state.report is not None:
            _display_report(state.report)
            if state.report.event is None:
                Prompt.ask(f"[dim]{t('report.continue')} (Enter)[/dim]", default="")
                session.advance_year()
            else:
                text = describe(state.report.event)
                accept = Confirm.ask(f"{text.accept_label}?", default=True)
                session.resolve_event(accept)
                if accept:
                    console.print(f"[italic blue]{text.result}[/italic blue]")
            continue

        _display_status(state)
        _edit_allocation(session)
        result = session.commit_budget()
        _display_validation(result)

    _display_final(session.snapshot(), session.outcome(), session.config.indices.initial)


def _edit_allocation(session: Session) -> None:
    """Let the player adjust shares until they choose to execute."""
    allocation = session.allocation
    while allocation is not None:
        _display_allocation(allocation)

        if allocation.is_balanced and Confirm.ask("Execute this budget?", default=True):
            return

        sector = Prompt.ask(
            "Adjust which sector",
            choices=[s.value for s in Sector],
            default=Sector.HEAVY.value,
        )
        config = session.config.allocation
        percent = IntPrompt.ask(f"  {t(f'sectors.{sector}')} (%)", default=allocation.get(Sector(sector)))
        try:
            allocation = session.set_allocation(
                Sector(sector), max(config.minimum, min(config.maximum, percent))
            )
        except InvalidAllocationError as e:
            console.print(f"[red]{e}[/red]")


# =============================================================================
# Display Functions
# =============================================================================


def _display_status(state: GameState) -> None:
    """Show the year, the indices and any status badges."""
    badges = []
    if state.selected_goal is not None:
        badges.append(f"[bold]{t(f'goals.{state.selected_goal.value}.badge')}[/bold]")
    if state.rocket_program_started:
        badges.append(f"[white on blue] 🚀 {t('status.rocket_program')} [/white on blue]")
    if state.soviet_aid_withdrawn():
        badges.append(f"[red]⚠ {t('status.soviet_withdrawal')}[/red]")

    table = Table(box=None)
    table.add_column(t("status.year"), justify="center")
    for sector in Sector:
        table.add_column(f"{SECTOR_ICONS[sector]} {t(f'sectors.{sector.value}')}", justify="right")
    table.add_column(t("status.total_output"), justify="right")
    table.add_row(
        f"[bold]{state.year}[/bold]",
        *(f"{state.indices.get(sector):,.0f}" for sector in Sector),
        f"[bold]{state.indices.total:,.0f}[/bold]",
    )

    console.print()
    if badges:
        console.print("  ".join(badges))
    console.print(table)


def _display_allocation(allocation: Allocation) -> None:
    """Show the pending budget and whether it can be executed."""

    for sector in Sector:
        share = allocation.get(sector)
        bar = "█" * (share // 5)
        color = SECTOR_COLORS[sector]
        console.print(f"  {SECTOR_ICONS[sector]} {t(f'sectors.{sector.value}'):<15} [{color}]{bar}[/{color}] {share}%")

    total = t("status.allocation_total", total=allocation.total)
    if allocation.is_balanced:
        console.print(f"  [green]{total} ✓[/green]")
    else:
        console.print(f"  [red]{total} {t('status.allocation_needs')}[/red]")


def _display_validation(result: ValidationResult) -> None:
    """Show errors and warnings from a budget commit."""
    if result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]- {warning.message}[/yellow]")
            if warning.suggestion:
                console.print(f"    [dim]{warning.suggestion}[/dim]")

    if not result.valid:
        console.print("\n[red]Budget rejected:[/red]")
        for error in result.errors:
            console.print(f"  [red]- {error}[/red]")


def _display_report(report: ReportData) -> None:
    """Show the annual report and its event."""

    table = Table(title=t("report.title", year=report.year), box=None)
    for sector in Sector:
        table.add_column(t("report.growth", sector=t(f"sectors.{sector.value}")), justify="right")
    table.add_row(*(_format_rate(report.rates.get(sector)) for sector in Sector))

    console.print()
    console.print(table)

    if report.event is not None:
        text = describe(report.event)
        console.print(Panel(
            f"{text.description}\n\n"
            f"[bold]Yes:[/bold] {text.accept_label}\n"
            f"[bold]No:[/bold] {text.decline_label}",
            title=t("report.decision", title=text.title),
            border_style="blue",
        ))


def _display_checkpoint(state: GameState, baseline: dict[str, float]) -> None:
    """Show the review of the first plan."""
    console.print()
    console.print(Panel.fit(
        f"[bold red]{t('checkpoint.title')}[/bold red]\n[italic]{t('checkpoint.motto')}[/italic]",
        border_style="red",
    ))
    console.print(_comparison_table(state, baseline))

    if state.rocket_program_started:
        console.print(Panel(
            t("checkpoint.rocket_started"),
            title=f"🚀 {t('checkpoint.rocket_started_title')}",
            border_style="blue",
        ))
    else:
        console.print(f"[yellow]{t('checkpoint.rocket_not_started')}[/yellow]")


def _display_final(state: GameState, outcome: Outcome, baseline: dict[str, float]) -> None:
    """Show the ending, achievements and year-by-year history."""
    console.print()
    console.print(Panel.fit(
        f"[bold]{t('final.title')}[/bold]\n[dim]{t('final.motto')}[/dim]",
        border_style="white",
    ))

    ending = outcome.ending.value
    console.print(Panel(
        t(f"endings.{ending}.description"),
        title=f"[bold]{t(f'endings.{ending}.title')}[/bold]",
        border_style="green",
    ))
    console.print(_comparison_table(state, baseline))

    console.print(f"\n[bold]{t('final.achievements')}[/bold]")
    if not outcome.achievements:
        console.print(f"  [dim]{t('final.no_achievements')}[/dim]")
    for achievement in outcome.achievements:
        console.print(
            f"  🏅 [bold]{t(f'achievements.{achievement.value}.name')}[/bold] - "
            f"{t(f'achievements.{achievement.value}.description')}"
        )

    history = Table(title="Year by Year", box=None)
    history.add_column("Year", justify="right")
    history.add_column("Budget (H/L/A)")
    for sector in Sector:
        history.add_column(t(f"sectors.{sector.value}"), justify="right")
    history.add_column("Event")
    for record in state.history:
        decision = ""
        if record.event is not None:
            mark = "✓" if record.accepted else "✗"
            decision = f"{describe(record.event).title} {mark}"
        history.add_row(
            str(record.year),
            f"{record.allocation.heavy}/{record.allocation.light}/{record.allocation.agri}",
            *(_format_rate(record.rates.get(sector)) for sector in Sector),
            decision,
        )
    console.print()
    console.print(history)


def _comparison_table(state: GameState, baseline: dict[str, float]) -> Table:
    """Start-versus-now table of every sector index."""
    table = Table(box=None)
    table.add_column("Sector")
    table.add_column("Start", justify="right")
    table.add_column("Now", justify="right")
    table.add_column("Growth", justify="right")

    for sector in Sector:
        ratio = state.indices.growth_ratio(sector, baseline)
        color = "green" if ratio >= 0 else "red"
        table.add_row(
            f"{SECTOR_ICONS[sector]} {t(f'sectors.{sector.value}')}",
            f"{baseline[sector.value]:,.0f}",
            f"{state.indices.get(sector):,.0f}",
            f"[{color}]{ratio * 100:+.0f}%[/{color}]",
        )
    return table


def _format_rate(rate: float) -> str:
    color = "red" if rate < 0 else "green"
    return f"[{color}]{rate * 100:+.1f}%[/{color}]"


def _format_effect(modifiers: ModifierDelta, flags: FlagDelta) -> str:
    """Describe an effect's deltas in one line."""
    parts = [
        f"{name.removesuffix('_add').replace('_', ' ')} {value:+.2f}"
        for name, value in modifiers.model_dump().items()
        if value
    ]
    parts.extend(
        f"sets {name.removeprefix('set_').replace('_', ' ')}"
        for name, value in flags.model_dump().items()
        if value
    )
    return ", ".join(parts)


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    cli()
