"""Defect signalling for the interpreter pipeline.

User-input rejection is never an exception; it travels as ``None``. The
error below marks a mismatch between the grammar and the code walking it.
"""

from __future__ import annotations

from typing import Any


class GrammarContractError(AssertionError):
    """Raised when a variant dispatch meets a value no production can build."""

    def __init__(self, variable: str, value: Any) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"Unexpected {variable} variant: {value!r}")


__all__ = ["GrammarContractError"]
