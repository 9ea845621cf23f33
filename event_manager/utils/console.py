"""
Terminal rendering of command output.
"""
from rich.console import Console
from rich.markdown import Markdown

console = Console()


def render_markdown(content: str) -> None:
    """
    Render markdown text to terminal.

    Args:
        content: Markdown source
    """
    console.print(Markdown(content))
    console.print()  # Trailing newline


def render_output(output) -> None:
    """
    Print a CommandOutput.

    Markdown output (the menu) is rendered; everything else is printed
    verbatim, since event and participant names may contain [brackets]
    that rich would otherwise treat as markup.
    """
    if output.markdown:
        render_markdown(output.message)
        return
    console.print(output.message, markup=False, highlight=False)
    console.print()


def render_error(message: str) -> None:
    """Print an error or usage message in red."""
    console.print(message, style="red", markup=False, highlight=False)
    console.print()
