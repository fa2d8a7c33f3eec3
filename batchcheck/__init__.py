"""
batchcheck - Aggregated Expectations for Test Code

This package lets a test collect many independent expectations and
report every failure from a single test run, instead of stopping at
the first failed assert.

Subpackages:
    - outcomes: Expectation outcomes and the helpers that build them
    - aggregation: Combine outcomes into one verdict

Usage:
    from batchcheck import check, expect, expect_eq

    def test_doubling():
        examples = [(1, 2), (2, 4), (3, 6)]
        check(expect_eq(n * 2, want, f"double({n})") for n, want in examples)
"""

__version__ = "0.1.0"
__author__ = "Ahaan Chaudhuri"

# Re-export outcomes for convenience
from .outcomes import (
    # Models
    Outcome,
    OutcomeStatus,
    format_value,
    # Helpers
    expect,
    expect_compare,
    expect_eq,
    expect_len,
    expect_path,
)

# Re-export aggregation for convenience
from .aggregation import (
    # Models
    CheckOptions,
    ExpectationsFailed,
    Verdict,
    VerdictStatus,
    Violation,
    # Aggregator
    check,
    evaluate,
)

__all__ = [
    # Package info
    "__version__",
    "__author__",
    # Outcomes - Models
    "Outcome",
    "OutcomeStatus",
    "format_value",
    # Outcomes - Helpers
    "expect",
    "expect_compare",
    "expect_eq",
    "expect_len",
    "expect_path",
    # Aggregation - Models
    "CheckOptions",
    "ExpectationsFailed",
    "Verdict",
    "VerdictStatus",
    "Violation",
    # Aggregation - Aggregator
    "check",
    "evaluate",
]
