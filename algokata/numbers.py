"""Exercises on single numbers and small arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Callable, Iterable

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
}


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS["/"] = _truncating_divide


def trailing_zeroes(n: int) -> int:
    """Return how many zeros ``n!`` ends with."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def find_the_winner(n: int, k: int) -> int:
    """Return the 1-based seat of the last friend left when every ``k``-th leaves."""
    if n < 1:
        raise ValueError("there must be at least one friend")
    winner = 0
    for size in range(2, n + 1):
        winner = (winner + k) % size
    return winner + 1


def can_win_nim(n: int) -> bool:
    """Tell whether the first player wins Nim with ``n`` stones."""
    return n % 4 != 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic written in reverse Polish notation."""
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))
    if not stack:
        raise ValueError("expression is empty")
    return stack[-1]


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins making up ``amount``, or -1 if none do."""
    denominations = list(coins)
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for value in range(1, amount + 1):
        for coin in denominations:
            if coin <= value:
                fewest[value] = min(fewest[value], fewest[value - coin] + 1)
    return -1 if fewest[amount] > amount else fewest[amount]