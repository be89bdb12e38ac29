"""CLI to show the recommended study hours for the coming days."""
import argparse
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from study_assistant.cli.common import add_common_args, configure_logging
from study_assistant.models.plan import PlannerSettings
from study_assistant.tools.planner import (
    duplicate_names,
    generate_plan,
    save_plan,
    unscheduled_hours,
    upcoming_days,
)
from study_assistant.tools.state_io import load_or_default


console = Console()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(
        description="Show the study plan for the next days"
    )
    add_common_args(parser)
    parser.add_argument(
        "--days",
        type=int,
        default=14,
        help="Number of days to show (default: 14)"
    )
    parser.add_argument(
        "--export",
        type=Path,
        help="Also write the full plan as JSON to this path"
    )
    args = parser.parse_args(argv)
    configure_logging(args)

    state = load_or_default(args.state, args.today)
    plan = generate_plan(state.subjects, state.preferences, args.today, PlannerSettings.from_env())

    table = Table(title=f"Next {args.days} days")
    table.add_column("Date", style="cyan")
    table.add_column("Study", style="white")
    table.add_column("Hours", style="magenta", justify="right")

    for row in upcoming_days(plan, args.today, args.days):
        if row.entries:
            study = "\n".join(f"{e.subject_name} ({e.hours}h)" for e in row.entries)
        else:
            study = "[dim]No study planned[/dim]"
        table.add_row(row.day.strftime("%a %Y-%m-%d"), study, f"{row.total_hours:.2f}h")

    console.print(table)

    for name in duplicate_names(state.subjects):
        console.print(f"[yellow]⚠ Several subjects are named {name!r}; their hours are shown together[/yellow]")

    for name, missing in unscheduled_hours(state.subjects, plan).items():
        console.print(f"[yellow]⚠ {name}: {missing:.2f}h could not be scheduled[/yellow]")

    if args.export:
        save_plan(plan, args.export)
        console.print(f"\n✓ [green]Plan written to[/green] {args.export}")


if __name__ == "__main__":
    main()
