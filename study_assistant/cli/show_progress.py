"""CLI to show study progress per subject."""
import argparse

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from study_assistant.cli.common import add_common_args, configure_logging
from study_assistant.tools.progress import percent_complete, subject_percent
from study_assistant.tools.state_io import load_or_default


console = Console()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Show overall study progress")
    add_common_args(parser)
    args = parser.parse_args(argv)
    configure_logging(args)

    state = load_or_default(args.state, args.today)

    console.print(f"\n[bold]Overall progress:[/bold] {percent_complete(state.subjects)}% complete\n")

    table = Table(title="Progress by subject")
    table.add_column("Subject", style="cyan")
    table.add_column("Exam", style="yellow")
    table.add_column("Done", justify="right")
    table.add_column("%", style="magenta", justify="right")

    for subject in state.subjects:
        exam = subject.exam_date.isoformat() if subject.exam_date else "-"
        table.add_row(
            subject.name or "Untitled",
            exam,
            f"{subject.hours_logged:g} / {subject.total_hours:g}h",
            f"{subject_percent(subject)}%",
        )

    console.print(table)


if __name__ == "__main__":
    main()
