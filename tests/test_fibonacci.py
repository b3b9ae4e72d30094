"""
Tests for the recursive Fibonacci calculator
"""
import importlib
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

fib_module = importlib.import_module("fib_report.fibonacci")
from fib_report import InvalidIndexError, fibonacci, fibonacci_iterative

EXPECTED = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


class TestFibonacci:
    """Values, recurrence and base cases"""

    @pytest.mark.parametrize("n, expected", list(enumerate(EXPECTED)))
    def test_first_ten_values(self, n, expected):
        assert fibonacci(n) == expected

    def test_base_cases(self):
        assert fibonacci(0) == 0
        assert fibonacci(1) == 1

    def test_recurrence(self):
        for n in range(2, 10):
            assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)

    def test_larger_index_is_exact(self):
        # F(30) already exceeds what the first ten terms hint at
        assert fibonacci(30) == 832040

    def test_deterministic(self):
        assert [fibonacci(n) for n in range(10)] == [fibonacci(n) for n in range(10)]

    def test_recursive_call_count(self, monkeypatch):
        """Naive recursion makes 2*F(n+1)-1 calls, with no caching"""
        calls = []
        original = fib_module._fib

        def counting(n):
            calls.append(n)
            return original(n)

        monkeypatch.setattr(fib_module, "_fib", counting)

        assert fibonacci(5) == 5
        assert len(calls) == 2 * fibonacci_iterative(6) - 1

        calls.clear()
        fibonacci(5)
        assert len(calls) == 15


class TestFibonacciIterative:
    """The linear-time version must agree with the recursive one"""

    def test_agrees_with_recursive(self):
        for n in range(20):
            assert fibonacci_iterative(n) == fibonacci(n)

    def test_big_index(self):
        assert fibonacci_iterative(100) == 354224848179261915075


class TestInvalidIndex:
    """Bad indices are rejected before any recursion happens"""

    @pytest.mark.parametrize("func", [fibonacci, fibonacci_iterative])
    @pytest.mark.parametrize("bad", [-1, -10, 2.0, "3", None, True])
    def test_rejected(self, func, bad):
        with pytest.raises(InvalidIndexError) as exc_info:
            func(bad)
        assert exc_info.value.index is bad
        assert repr(bad) in str(exc_info.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            fibonacci(-1)
