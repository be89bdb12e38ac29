"""CLI to log (or undo) completed study hours for a subject."""
import argparse
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console

from study_assistant.cli.common import add_common_args, configure_logging
from study_assistant.tools.progress import log_hours
from study_assistant.tools.state_io import find_subject, load_or_default, save_state


console = Console()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Log completed study hours")
    parser.add_argument("subject", help="Subject name or id")
    parser.add_argument("hours", type=float, help="Hours studied (negative to undo)")
    add_common_args(parser)
    args = parser.parse_args(argv)
    configure_logging(args)

    state = load_or_default(args.state, args.today)
    subject = find_subject(state, args.subject)
    if subject is None:
        console.print(f"[red]✗ Unknown subject: {args.subject}[/red]")
        sys.exit(1)

    updated = log_hours(subject, args.hours)
    state.subjects = [updated if s.id == subject.id else s for s in state.subjects]
    save_state(state, args.state)
    logger.info(f"Saved state to {args.state}")

    console.print(f"✓ [green]{updated.name}[/green]: {updated.hours_logged:g} / {updated.total_hours:g}h done")


if __name__ == "__main__":
    main()
