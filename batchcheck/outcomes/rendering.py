"""
Annotated rendering of failed comparisons.

Hangs each operand's evaluated value under its source text:

    * Condition failed: len(items) > limit
                        ----------   -----
                             |         |
                             |         1000
                             |
                             99
"""

from __future__ import annotations

PREFIX = "* Condition failed: "


def render_condition(
    left_text: str,
    op: str,
    right_text: str,
    left_repr: str,
    right_repr: str | None = None,
) -> str:
    """
    Render a failed comparison with its operand values annotated.

    Args:
        left_text: Source text of the left operand
        op: The comparison operator
        right_text: Source text of the right operand
        left_repr: Formatted value of the left operand
        right_repr: Formatted value of the right operand, or None to leave
            the right operand unannotated

    Returns:
        Multi-line diagnostic string
    """
    left_start = len(PREFIX)
    left_pipe = left_start + len(left_text) // 2
    right_start = left_start + len(left_text) + len(op) + 2
    right_pipe = right_start + len(right_text) // 2

    lines = [f"{PREFIX}{left_text} {op} {right_text}"]

    underlines = {left_start: "-" * len(left_text)}
    pipes = {left_pipe: "|"}
    if right_repr is not None:
        underlines[right_start] = "-" * len(right_text)
        pipes[right_pipe] = "|"
    lines.append(_place(underlines))
    lines.append(_place(pipes))

    if right_repr is not None:
        for value_line in right_repr.splitlines():
            lines.append(_place({left_pipe: "|", right_pipe: value_line}))
        lines.append(_place({left_pipe: "|"}))

    for value_line in left_repr.splitlines():
        lines.append(_place({left_pipe: value_line}))

    return "\n".join(lines)


def _place(columns: dict[int, str]) -> str:
    """Build one line with each text starting at its column."""
    line = ""
    for column, text in sorted(columns.items()):
        line = line.ljust(column) + text
    return line.rstrip()
