"""
Variable dumper for toolbelt.

Pretty-prints arbitrary values for Facade.dump() when debug mode is on.
"""

from typing import Any, Optional

from rich.console import Console
from rich.pretty import Pretty, pretty_repr


class VarDumper:
    """Renders values with rich's pretty printer."""

    def __init__(self, console: Optional[Console] = None, max_width: int = 100):
        self.console = console or Console()
        self.max_width = max_width

    def dump(self, value: Any) -> str:
        """Return the pretty-printed representation of a value."""
        return pretty_repr(value, max_width=self.max_width)

    def print(self, value: Any) -> None:
        """Write the pretty-printed value to the console."""
        self.console.print(Pretty(value, expand_all=False))
