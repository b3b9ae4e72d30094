"""Fibonacci number calculation.

The sequence is defined as::

    F(0) = 0
    F(1) = 1
    F(n) = F(n-1) + F(n-2) for n >= 2

:func:`fibonacci` evaluates this definition directly by recursion, so it
runs in exponential time. That is what the report demonstrates and it is
left unoptimised on purpose. :func:`fibonacci_iterative` gives the same
values in O(n) time using two accumulators.

Example
-------
>>> fibonacci(9)
34
>>> fibonacci_iterative(10)
55
"""

from __future__ import annotations

from .errors import InvalidIndexError

__all__ = ["fibonacci", "fibonacci_iterative"]


def _check_index(n: object) -> int:
    # bool is an int subclass but True/False are not indices
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidIndexError(n)
    return n


def _fib(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number by naive recursion.

    Parameters
    ----------
    n: int
        Zero-based index of the desired Fibonacci number.

    Returns
    -------
    int
        The *n*-th Fibonacci number. Python integers do not overflow, so the
        result is exact for any index the interpreter's recursion limit
        allows.

    Raises
    ------
    InvalidIndexError
        If ``n`` is negative or not an ``int``.
    """
    return _fib(_check_index(n))


def fibonacci_iterative(n: int) -> int:
    """Return the *n*-th Fibonacci number in linear time."""
    n = _check_index(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a
