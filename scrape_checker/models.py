"""
Command Models

Result and context types shared by every CLI command.
"""

from dataclasses import dataclass, asdict
from typing import Any, Optional


@dataclass
class CommandResult:
    """Outcome of one command invocation.

    Attributes:
        success: Whether the command completed.
        message: Human-readable summary (the error message on failure).
        data:    Optional structured payload (ranking, candidates, trends).
    """

    success: bool
    message: str
    data: Optional[Any] = None

    def to_dict(self) -> dict:
        """Return a plain dict, dropping ``data`` when there is none."""
        result = asdict(self)
        if result['data'] is None:
            del result['data']
        return result


@dataclass
class CommandContext:
    """Global CLI state passed to command handlers."""

    command_name: str
    quiet: bool = False
    debug: bool = False
