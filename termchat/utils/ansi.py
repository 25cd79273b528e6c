"""Colour and styling helpers built on :mod:`rich`."""

import os

from rich.console import Console
from rich.markup import escape
from rich.text import Text


console = Console()


class Ansi:
    """Style names used throughout the app."""

    BOLD = "bold"

    FG_GREEN = "green"
    FG_CYAN = "cyan"
    FG_MAGENTA = "magenta"
    FG_YELLOW = "yellow"
    FG_RED = "red"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return text
        style = " ".join(codes)
        return f"[{style}]{text}[/]"

    @staticmethod
    def plain(text: str) -> str:
        """Escape *text* so rich prints it literally (model output, paths, errors)."""
        return escape(text)

    @staticmethod
    def labelled(label: str, text: str) -> Text:
        """Return *label* (markup) followed by *text* exactly as given.

        The text is neither parsed for markup nor emoji codes, nor highlighted.
        """
        return Text.assemble(Text.from_markup(label), text)


PROMPT_LABEL = Ansi.style(">", Ansi.FG_CYAN, Ansi.BOLD)
ASSISTANT_LABEL = Ansi.style("AI", Ansi.FG_GREEN, Ansi.BOLD)
ERROR_LABEL = Ansi.style("Error", Ansi.FG_RED, Ansi.BOLD)
DOCUMENT_ERROR_LABEL = Ansi.style("Error processing document", Ansi.FG_RED, Ansi.BOLD)
