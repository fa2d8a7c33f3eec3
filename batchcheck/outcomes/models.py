"""
Expectation outcome models.

This module defines the value produced by evaluating a single
expectation: either satisfied, or violated with a diagnostic message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rich.pretty import pretty_repr


class OutcomeStatus(str, Enum):
    """Status of a single evaluated expectation."""
    SATISFIED = "satisfied"
    VIOLATED = "violated"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating one expectation.

    Attributes:
        status: Whether the expectation was satisfied or violated
        message: Diagnostic describing what was expected and what was
            observed. Always None for satisfied outcomes and never
            empty for violated ones.
    """
    status: OutcomeStatus
    message: str | None = None

    def __post_init__(self) -> None:
        if self.status == OutcomeStatus.VIOLATED:
            if not isinstance(self.message, str) or not self.message.strip():
                raise ValueError("A violated outcome needs a non-empty message")
        elif self.message is not None:
            raise ValueError("A satisfied outcome carries no message")

    @property
    def passed(self) -> bool:
        return self.status == OutcomeStatus.SATISFIED

    @property
    def failed(self) -> bool:
        return self.status == OutcomeStatus.VIOLATED

    def __str__(self) -> str:
        if self.passed:
            return "✅ PASS"
        return f"❌ FAIL: {self.message}"

    @classmethod
    def satisfied(cls) -> Outcome:
        """Create a satisfied outcome."""
        return cls(status=OutcomeStatus.SATISFIED)

    @classmethod
    def violated(cls, message: str) -> Outcome:
        """Create a violated outcome carrying a diagnostic message."""
        return cls(status=OutcomeStatus.VIOLATED, message=message)


def format_value(
    value: Any,
    max_length: int | None = None,
    max_string: int | None = None,
    max_width: int = 80,
) -> str:
    """
    Format a value for display in a diagnostic.

    Values are shown in full unless max_length (container items) or
    max_string (string characters) is given. Values whose repr does not
    fit in max_width are spread over several lines.
    """
    return pretty_repr(
        value,
        max_width=max_width,
        max_length=max_length,
        max_string=max_string,
    )
