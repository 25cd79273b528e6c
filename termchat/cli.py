"""Interactive terminal chat against OpenAI or a local Ollama server."""
from __future__ import annotations

import argparse
import logging
import readline  # noqa: F401 – side-effect: history & line editing
from pathlib import Path
from typing import Callable, List, Optional

from rich.panel import Panel
from rich.text import Text

from .core import ChatError, ChatSession, ProviderKind
from .utils import (
    Ansi,
    ASSISTANT_LABEL,
    DOCUMENT_ERROR_LABEL,
    ERROR_LABEL,
    PROMPT_LABEL,
    Spinner,
    acquire_credential,
    console,
    setup_logging,
)

logger = logging.getLogger(__name__)

QUIT_COMMAND = "/quit"
SWITCH_COMMAND = "/switch"
DOC_PREFIX = "/doc "

COMMANDS_HELP = (
    "Commands:\n"
    "  /doc <filepath> - Submit a document for analysis\n"
    "  /switch         - Switch between OpenAI and Ollama\n"
    "  /quit           - Exit the application"
)


class ChatCLI:
    """High-level orchestration class for the interactive REPL."""

    def __init__(self, session: ChatSession):
        self.session = session

    # ---------------- Output helpers ----------------

    def _print_reply(self, reply: str) -> None:
        console.print(Ansi.labelled(f"{ASSISTANT_LABEL}: ", reply))

    def _submit(self, action: Callable[[], str], error_label: str) -> None:
        """Run one blocking submission and print its reply or error."""
        try:
            with Spinner(text=f"waiting for {self.session.provider.label}"):
                reply = action()
        except ChatError as exc:
            console.print(Ansi.labelled(f"{error_label}: ", str(exc)))
            return
        except KeyboardInterrupt:
            # the unanswered user turn stays in history
            console.print(Text("\n[interrupted]"))
            return
        self._print_reply(reply)

    # ---------------- Command handling ---------------

    def handle_line(self, line: str) -> bool:
        """Interpret one input line. Return False to exit the REPL."""
        line = line.strip()

        if line == QUIT_COMMAND:
            console.print("Bye.")
            return False

        if line.startswith(DOC_PREFIX):
            path = line[len(DOC_PREFIX):].strip()
            if not Path(path).exists():
                console.print(Ansi.labelled("File not found: ", path))
                return True
            self._submit(lambda: self.session.submit_document(path), DOCUMENT_ERROR_LABEL)

        elif line == SWITCH_COMMAND:
            provider = self.session.switch_provider()
            console.print(Text(f"Switched to {provider.label} (model: {self.session.model})"))

        else:
            self._submit(lambda: self.session.submit_turn(line), ERROR_LABEL)

        return True

    # ---------------- Interaction loop ---------------

    def repl(self) -> None:
        """Run the interactive read–eval–print-loop."""
        console.print(Panel.fit("Welcome to the AI Chat Terminal!", style="bold magenta"))
        console.print(
            Ansi.style(COMMANDS_HELP, Ansi.FG_YELLOW),
            Ansi.style(
                f"Provider: {self.session.provider.label}, model: {Ansi.plain(self.session.model)}.",
                Ansi.FG_YELLOW,
            ),
            "Enter your message:",
            sep="\n",
        )

        while True:
            try:
                line = console.input(f"{PROMPT_LABEL} ")
            except (EOFError, KeyboardInterrupt):
                # end of input is an implicit /quit
                console.print("\nBye.")
                break

            if not self.handle_line(line):
                break


# ---------------------------------------------------------------------------
# Entrypoint helpers (keeping it separate simplifies __main__ handling)
# ---------------------------------------------------------------------------

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive terminal chat with OpenAI or a local Ollama server."
    )
    parser.add_argument(
        "--provider",
        "-p",
        choices=[kind.name.lower() for kind in ProviderKind],
        default="openai",
        help="Provider to start with (default: openai)",
    )
    parser.add_argument(
        "--model", "-m", help="Model to start with (default: the provider's default model)"
    )
    parser.add_argument(
        "--log-level", help="Logging level (default: $TERMCHAT_LOG_LEVEL or WARNING)"
    )
    return parser.parse_args(argv)


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    provider = ProviderKind.from_name(args.provider)
    credential = acquire_credential()
    if credential is None:
        logger.warning("No OpenAI API key configured; OpenAI requests will fail")

    session = ChatSession(provider=provider, credential=credential, model=args.model)
    ChatCLI(session).repl()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(run_cli())
