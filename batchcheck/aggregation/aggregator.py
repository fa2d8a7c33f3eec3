"""
Verdict aggregator for batches of expectation outcomes.

Unlike a plain assert, checking a batch never stops at the first
violation: every outcome is consumed and every violation is reported
together.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..outcomes import Outcome
from .models import DEFAULT_OPTIONS, CheckOptions, ExpectationsFailed, Verdict, Violation

logger = logging.getLogger(__name__)


def evaluate(
    outcomes: Iterable[Outcome],
    options: CheckOptions | None = None,
) -> Verdict:
    """
    Combine a sequence of outcomes into a single verdict.

    The sequence is consumed exactly once, in order, so generators work
    as well as lists.

    Args:
        outcomes: Outcomes to combine
        options: Diagnostic rendering options

    Returns:
        Verdict listing every violation in input order

    Raises:
        TypeError: If an item is not an Outcome
    """
    violations = []
    total = 0

    for index, outcome in enumerate(outcomes):
        if not isinstance(outcome, Outcome):
            raise TypeError(
                f"Item {index} is {type(outcome).__name__}, expected an Outcome"
            )
        total += 1
        if outcome.failed:
            logger.debug(f"Expectation {index} violated: {outcome.message}")
            violations.append(Violation(index=index, message=outcome.message))

    logger.debug(f"Checked {total} expectation(s), {len(violations)} violated")
    return Verdict(
        total=total,
        violations=tuple(violations),
        options=options or DEFAULT_OPTIONS,
    )


def check(
    outcomes: Iterable[Outcome],
    options: CheckOptions | None = None,
) -> None:
    """
    Check a batch of outcomes, failing the current test on any violation.

    Example:
        check([
            expect_eq(2 + 2, 4),
            expect(2 + 2 == 4, "2 + 2 == 4"),
        ])

        examples = [(1, 2), (2, 4), (3, 6)]
        check(expect_eq(n * 2, want) for n, want in examples)

    Raises:
        ExpectationsFailed: If at least one outcome was violated
    """
    verdict = evaluate(outcomes, options)
    if verdict.failed:
        raise ExpectationsFailed(verdict)
