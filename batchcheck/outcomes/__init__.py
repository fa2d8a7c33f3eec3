"""
Expectation Outcomes

This package provides the value produced by evaluating one expectation,
and helpers that build such values inline in test code.

Supported expectations:
    - expect: Check that a condition is true
    - expect_eq: Check that two values are equal
    - expect_len: Check that a collection has an exact length
    - expect_compare: Check a comparison, annotating both operands
    - expect_path: Check that a JSONPath matches (and optionally its value)

Usage:
    from batchcheck.outcomes import expect, expect_eq

    outcome = expect_eq(2 + 2, 4)
    if outcome.failed:
        print(outcome.message)
"""

# Models
from .models import Outcome, OutcomeStatus, format_value

# Helpers
from .expectations import (
    COMPARISONS,
    expect,
    expect_compare,
    expect_eq,
    expect_len,
    expect_path,
)
from .rendering import render_condition

__all__ = [
    # Models
    "Outcome",
    "OutcomeStatus",
    "format_value",
    # Helpers
    "COMPARISONS",
    "expect",
    "expect_compare",
    "expect_eq",
    "expect_len",
    "expect_path",
    "render_condition",
]
