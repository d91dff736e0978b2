"""
###############################################
Compensated summation (:mod:`quadra.aggregate`)
###############################################

.. currentmodule:: quadra.aggregate

This module provides Kahan's compensated summation, which keeps the rounding error of
a long sum near machine epsilon regardless of the number of terms.

.. autosummary::
    :toctree: generated/

    KahanSum
    ksum
    scanning_sum

"""

from collections.abc import Iterable, Iterator
from typing import Self

from quadra.typing import Scalar


class KahanSum[T: Scalar]:
    """Running sum with compensation of the rounding error.

    Parameters
    ----------
    start : default=0.0
        Initial value of the sum.

    Attributes
    ----------
    sum
        Current (compensated) sum.
    error
        Running error, that is, the low-order part lost by the last addition.

    Examples
    --------
    >>> acc = KahanSum()
    >>> for x in (1.0, 1e-16, 1e-16):
    ...     acc = acc.add(x)
    >>> acc.value() > 1.0
    True
    """

    __slots__ = ("sum", "error")
    sum: T
    error: T

    def __init__(self, start=0.0):
        self.sum = start
        self.error = start * 0

    def add(self, x: T) -> Self:
        """Add `x` to the sum and return ``self``."""
        y = x - self.error
        t = self.sum + y
        self.error = (t - self.sum) - y
        self.sum = t
        return self

    def value(self) -> T:
        return self.sum

    def __repr__(self):
        return f"{self.__class__.__name__}(sum={self.sum!r}, error={self.error!r})"


def ksum[T: Scalar](xs: Iterable[T]) -> T:
    """Return the compensated sum of `xs`.

    Examples
    --------
    >>> ksum([1.0, 1e-16, 1e-16]) > 1.0
    True
    """
    acc = KahanSum()

    for x in xs:
        acc.add(x)

    return acc.value()


def scanning_sum[T: Scalar](xs: Iterable[T]) -> Iterator[T]:
    """Yield every running total of the compensated sum of `xs`.

    `xs` is consumed lazily, so infinite iterables are allowed.

    Examples
    --------
    >>> list(scanning_sum([1.0, 2.0, 3.0]))
    [1.0, 3.0, 6.0]
    """
    acc = KahanSum()

    for x in xs:
        yield acc.add(x).value()
