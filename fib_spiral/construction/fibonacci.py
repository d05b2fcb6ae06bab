"""Fibonacci side-length table.

Values come from the additive recurrence only.  Binet's closed form
(``phi**n / sqrt(5)``) drifts by more than 0.5 at moderate ``n`` in double
precision and then rounds to the wrong integer.
"""

from __future__ import annotations


def fibonacci_table(steps: int) -> tuple[int, ...]:
    """Return ``(F(1), ..., F(steps))`` with ``F(1) = F(2) = 1``.

    Parameters
    ----------
    steps : int
        Number of terms, >= 1.

    Returns
    -------
    tuple[int, ...]
        ``table[i - 1] == F(i)``.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    table: list[int] = []
    a, b = 0, 1
    for _ in range(steps):
        table.append(b)
        a, b = b, a + b
    return tuple(table)
