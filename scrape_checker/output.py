"""
CLI output helpers with color support

Messages are rendered as ``rich`` Text objects so selector strings such as
``[title]`` are printed literally instead of being read as markup.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text


class Output:
    """Consistent, colored terminal output for CLI commands.

    Errors go to stderr. In quiet mode everything except errors and raw
    data output is suppressed.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        quiet: bool = False,
    ):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.quiet = quiet

    def _print(self, text, style: Optional[str] = None):
        if not self.quiet:
            self.console.print(Text(text, style=style or ''))

    def success(self, message: str):
        self._print(f"✔ {message}", 'green')

    def error(self, message: str):
        self.err_console.print(Text(f"✖ {message}", style='red'))

    def warn(self, message: str):
        self._print(f"⚠ {message}", 'yellow')

    def info(self, message: str):
        self._print(f"ℹ {message}", 'blue')

    def dim(self, message: str):
        self._print(message, 'dim')

    def bold(self, message: str):
        self._print(message, 'bold')

    def log(self, message: str):
        self._print(message)

    def newline(self):
        self._print('')

    def divider(self, char: str = '─', length: int = 40):
        self._print(char * length, 'dim')

    def key_value(self, key: str, value: str):
        if not self.quiet:
            line = Text.assemble((key, 'bold'), f": {value}")
            self.console.print(line)

    def list_item(self, item: str, indent: int = 2):
        self._print(f"{' ' * indent}• {item}")

    def table_header(self, *columns: str):
        self._print('\t'.join(columns), 'bold')

    def table_row(self, *columns: str):
        self._print('\t'.join(columns))

    def raw(self, data: str):
        """Unstyled data output (HTML, JSON). Printed even in quiet mode."""
        self.console.out(data, highlight=False)


output = Output()
