"""Rich console formatting utilities.

All human-readable output goes to stderr: stdout is reserved for the
Script Filter JSON document.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "error": "bold #f53263",
    }
)

# Shared stderr console
err_console = Console(theme=_THEME, stderr=True)


def print_error(message: str) -> None:
    """Print an error message.

    Predicates routinely contain brackets (``CONTAINS[c]``), so the message
    is escaped before being handed to Rich markup.
    """
    err_console.print(f"[error]Error:[/] {escape(message)}")
