"""
Verdict models for aggregated expectation checks.

This module defines the combined result of checking a batch of
outcomes, the options that shape its diagnostic, and the exception
raised when a batch fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VerdictStatus(str, Enum):
    """Overall status of a checked batch."""
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckOptions:
    """
    Options for rendering a failed verdict.

    Attributes:
        label: Format string prefixed to each violation, filled with the
            violation's zero-based position in the input. None or "" omits it.
        header: Whether to start the diagnostic with a violation count
    """
    label: str | None = "iteration[{index}]"
    header: bool = True

    def __post_init__(self) -> None:
        if not self.label:
            return
        try:
            self.label.format(index=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"Invalid label {self.label!r}: only the {{index}} field is available"
            ) from e


DEFAULT_OPTIONS = CheckOptions()


@dataclass(frozen=True)
class Violation:
    """A violated outcome and its position in the checked sequence."""
    index: int
    message: str


@dataclass(frozen=True)
class Verdict:
    """
    Combined result of checking a batch of outcomes.

    Attributes:
        total: Number of outcomes consumed
        violations: Violated outcomes, in input order
        options: Options used to render the diagnostic
    """
    total: int
    violations: tuple[Violation, ...] = ()
    options: CheckOptions = DEFAULT_OPTIONS

    @property
    def status(self) -> VerdictStatus:
        return VerdictStatus.FAILED if self.violations else VerdictStatus.PASSED

    @property
    def passed(self) -> bool:
        return self.status == VerdictStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == VerdictStatus.FAILED

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def diagnostic(self) -> str:
        """
        Build the combined failure report.

        Every violation message is kept verbatim and starts on its own
        line. Returns an empty string for a passed verdict.
        """
        if self.passed:
            return ""

        lines = []
        if self.options.header:
            lines.append(
                f"{len(self.violations)} of {self.total} expectation(s) violated:"
            )
        if not self.options.label:
            messages = self.messages
            # Without labels a blank line is the only boundary between multi-line entries
            separator = "\n\n" if any("\n" in m for m in messages) else "\n"
            lines.append(separator.join(messages))
            return "\n".join(lines)

        for violation in self.violations:
            label = self.options.label.format(index=violation.index)
            # Multi-line messages are column-aligned, keep them off the label line
            if "\n" in violation.message:
                lines.append(label)
                lines.append(violation.message)
            else:
                lines.append(f"{label} {violation.message}")
        return "\n".join(lines)

    def __str__(self) -> str:
        if self.passed:
            return f"✅ PASS: {self.total} expectation(s) satisfied"
        return f"❌ FAIL: {self.diagnostic()}"


class ExpectationsFailed(AssertionError):
    """
    Raised when a checked batch contains at least one violation.

    Subclasses AssertionError so test runners report the enclosing test
    as failed, with the combined diagnostic as the failure message.
    """

    def __init__(self, verdict: Verdict):
        super().__init__(verdict.diagnostic())
        self.verdict = verdict

    @property
    def messages(self) -> list[str]:
        return self.verdict.messages
