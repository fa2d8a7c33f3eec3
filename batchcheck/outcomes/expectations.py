"""
Expectation helpers that build outcomes inline.

Each helper evaluates one condition and returns an Outcome instead of
raising, so many of them can be collected and checked together.
Python cannot capture an argument's source text, so helpers take a
description of the checked expression as an explicit argument.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Sized

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from .models import Outcome, format_value
from .rendering import render_condition

_MISSING = object()

COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda a, b: a in b,
    "not in": lambda a, b: a not in b,
}


def expect(condition: Any, description: str) -> Outcome:
    """
    Expect a condition to be true.

    Args:
        condition: Value whose truthiness is checked
        description: Source text or description of the condition

    Returns:
        Outcome, violated with "Condition failed: <description>" if false

    Example:
        expect(len(rows) > 0, "len(rows) > 0")
    """
    if not description or not description.strip():
        raise ValueError("expect() needs a description of the condition")
    if condition:
        return Outcome.satisfied()
    return Outcome.violated(f"Condition failed: {description}")


def expect_eq(left: Any, right: Any, description: str | None = None) -> Outcome:
    """
    Expect two values to be equal.

    Args:
        left: The observed value
        right: The expected value
        description: Optional text identifying what was compared

    Returns:
        Outcome, violated with both values' reprs if they differ
    """
    if left == right:
        return Outcome.satisfied()
    message = f"Equality failed: {format_value(left)} != {format_value(right)}"
    if description:
        message = f"{description}: {message}"
    return Outcome.violated(message)


def expect_len(
    collection: Sized,
    expected: int,
    description: str | None = None,
) -> Outcome:
    """
    Expect a collection to have an exact length.

    The collection must support len(); anything else raises TypeError.
    """
    actual = len(collection)
    if actual == expected:
        return Outcome.satisfied()
    shown = format_value(collection)
    name = description or shown
    return Outcome.violated(f"Length of {name} is {actual}, not {expected} -- {shown}")


def expect_compare(
    left: Any,
    op: str,
    right: Any,
    left_text: str,
    right_text: str | None = None,
) -> Outcome:
    """
    Expect a comparison between two values to hold.

    On failure the message repeats the comparison and hangs each
    evaluated operand under its source text. The right operand is only
    annotated when right_text is given; otherwise its repr stands in.

    Args:
        left: Value of the left operand
        op: One of ==, !=, <, <=, >, >=, in, not in
        right: Value of the right operand
        left_text: Source text of the left operand
        right_text: Optional source text of the right operand

    Returns:
        Outcome, violated with an annotated rendering if the comparison fails
    """
    compare = COMPARISONS.get(op)
    if compare is None:
        raise ValueError(
            f"Unknown comparison {op!r}, expected one of: {', '.join(COMPARISONS)}"
        )
    if compare(left, right):
        return Outcome.satisfied()

    if right_text is None:
        message = render_condition(left_text, op, format_value(right), format_value(left))
    else:
        message = render_condition(
            left_text, op, right_text, format_value(left), format_value(right)
        )
    return Outcome.violated(message)


def expect_path(data: Any, path: str, expected: Any = _MISSING) -> Outcome:
    """
    Expect a JSONPath to match in data, optionally with a given value.

    Args:
        data: The JSON-like data to search
        path: JSONPath expression
        expected: If given, the first match must equal this value

    Returns:
        Outcome, violated if the path is invalid, missing or mismatched
    """
    try:
        jsonpath_expr = parse_jsonpath(path)
    except JSONPathError as e:
        return Outcome.violated(f"Invalid JSONPath {path}: {e}")

    matches = jsonpath_expr.find(data)
    if not matches:
        return Outcome.violated(f"Path {path} does not exist")
    if expected is _MISSING:
        return Outcome.satisfied()

    actual = matches[0].value
    if actual == expected:
        return Outcome.satisfied()
    return Outcome.violated(
        f"Value at {path} does not match: {format_value(actual)} != {format_value(expected)}"
    )
