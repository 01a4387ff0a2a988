"""Outcome reporter contract.

Why Protocol:
- Structural contract (duck typing) without inheritance.
- Tests can pass a plain recorder object instead of a rich console.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CreationOutcome


@runtime_checkable
class OutcomeReporter(Protocol):
    """Receives each outcome as soon as it is known.

    Rules:
    - Called exactly once per path, in input order.
    - Decides on its own whether anything is shown (`--verbose`, `--no-error`).
    """

    def report(self, outcome: CreationOutcome) -> None:
        ...
