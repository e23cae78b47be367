"""Interactive prompt contract.

Why Protocol:
- The token prompt is the only blocking step of a run; injecting it keeps the
  resolver testable without a terminal.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable


Validator = Callable[[str], Optional[str]]


@runtime_checkable
class SecretPrompt(Protocol):
    """Minimal contract for a masked, validating prompt.

    Rules:
    - `ask` blocks until the user enters a value for which `validate` returns `None`.
    - `validate` returns the message to show when the value is rejected.
    - Input is masked; only one prompt is outstanding at a time.
    """

    def ask(self, message: str, validate: Validator) -> str:
        ...
