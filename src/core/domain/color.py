"""Color output choices for the CLI.

Lives in the domain layer so both configuration (`core.config`) and the CLI
share one source of truth.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ColorChoice(str, Enum):
    """When to emit ANSI colors."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def default(cls) -> "ColorChoice":
        return cls.AUTO

    def console_options(self) -> dict[str, Any]:
        """Keyword arguments for `rich.console.Console`."""

        if self is ColorChoice.ALWAYS:
            return {"force_terminal": True}
        if self is ColorChoice.NEVER:
            return {"color_system": None}
        return {}
