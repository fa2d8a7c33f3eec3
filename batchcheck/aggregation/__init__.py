"""
Verdict Aggregation

This package combines many expectation outcomes into one verdict,
reporting every violation instead of stopping at the first.

Usage:
    from batchcheck.aggregation import check, evaluate
    from batchcheck.outcomes import expect_eq

    # Fail the enclosing test if anything is violated
    check(expect_eq(n * 2, want) for n, want in [(1, 2), (2, 4)])

    # Or inspect the verdict directly
    verdict = evaluate([expect_eq("hi", "bye")])
    if verdict.failed:
        print(verdict.diagnostic())
"""

# Models
from .models import (
    CheckOptions,
    ExpectationsFailed,
    Verdict,
    VerdictStatus,
    Violation,
)

# Aggregator
from .aggregator import check, evaluate

__all__ = [
    # Models
    "CheckOptions",
    "ExpectationsFailed",
    "Verdict",
    "VerdictStatus",
    "Violation",
    # Aggregator
    "check",
    "evaluate",
]
