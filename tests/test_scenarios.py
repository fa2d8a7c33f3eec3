"""End-to-end checks written the way test code uses the library."""

import pytest

from batchcheck import ExpectationsFailed, check, expect, expect_eq, expect_len


def test_simple_expectations():
    check([
        expect_eq(2 + 2, 4),
        expect(2 + 2 == 4, "2 + 2 == 4"),
        expect_eq("hi", "hi"),
    ])


def test_example_based_condition():
    examples = [1, 2, 3]
    check(expect(ex > 0, f"{ex} > 0") for ex in examples)


def test_example_based_input_and_expected():
    examples = [
        # (input, expected result)
        (1, 2),
        (2, 4),
        (3, 6),
    ]
    check(
        expect_eq(value * 2, expected, f"input={value}, expected={expected}")
        for value, expected in examples
    )


def test_example_based_reports_only_violated_pair():
    examples = [(1, 2), (2, 5), (3, 6)]

    with pytest.raises(ExpectationsFailed) as exc_info:
        check(
            expect_eq(value * 2, expected, f"input={value}, expected={expected}")
            for value, expected in examples
        )

    message = str(exc_info.value)
    assert "1 of 3 expectation(s) violated" in message
    assert "iteration[1] input=2, expected=5: Equality failed: 4 != 5" in message
    assert "input=1" not in message
    assert "input=3" not in message


def test_lengths():
    check([
        expect_len([], 0),
        expect_len([1, 2, 3], 3),
        expect_len("hello", 5),
        expect_len(range(1, 100), 99),
    ])
