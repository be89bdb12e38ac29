"""CLI to send one message to the study assistant."""
import argparse

from dotenv import load_dotenv
from rich.console import Console

from study_assistant.cli.common import add_common_args, configure_logging
from study_assistant.models.state import ChatMessage
from study_assistant.tools.chat import chat_reply
from study_assistant.tools.state_io import load_or_default, save_state


console = Console()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Ask the study assistant")
    parser.add_argument("message", nargs="+", help="Message text")
    add_common_args(parser)
    args = parser.parse_args(argv)
    configure_logging(args)

    state = load_or_default(args.state, args.today)
    state.chat.append(ChatMessage(role="user", text=" ".join(args.message)))

    reply = chat_reply(state.chat, state.subjects)
    state.chat.append(ChatMessage(role="assistant", text=reply))
    save_state(state, args.state)

    console.print(f"[bold cyan]Tutor:[/bold cyan] {reply}")


if __name__ == "__main__":
    main()
