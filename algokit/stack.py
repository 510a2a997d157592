"""Problems solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def cal_points(operations: Iterable[str]) -> int:
    """Return the total of a baseball score record.

    ``"C"`` cancels the last score, ``"D"`` doubles it, ``"+"`` adds the
    last two, and any other entry is a score itself.
    """
    scores: list[int] = []
    for op in operations:
        if op == "C":
            scores.pop()
        elif op == "D":
            scores.append(scores[-1] * 2)
        elif op == "+":
            scores.append(scores[-1] + scores[-2])
        else:
            scores.append(int(op))
    return sum(scores)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days pass until a warmer one, or 0."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


_OPERATORS = {
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate a reverse Polish expression of integers.

    A token whose first character is ``*``, ``/``, ``+`` or ``-`` is an
    operator; division truncates toward zero.  The value left on top of
    the stack is returned.
    """
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token[:1])
        if operator is None:
            stack.append(int(token))
            continue
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))
    if not stack:
        raise IndexError("expression left no value")
    return stack[-1]


_CLOSING = {")": "(", "}": "{", "]": "["}


def is_valid_brackets(s: str) -> bool:
    """Tell whether ``s`` consists only of properly nested brackets."""
    open_brackets: list[str] = []
    for char in s:
        if char in "({[":
            open_brackets.append(char)
        elif char in _CLOSING and open_brackets and open_brackets[-1] == _CLOSING[char]:
            open_brackets.pop()
        else:
            return False
    return not open_brackets