"""
#############################
Typing (:mod:`quadra.typing`)
#############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self, SupportsAbs


class Scalar(SupportsAbs, Protocol):
    """Protocol of the values that integrands return and tableaux combine.

    Sums, differences, products and quotients of such values, mixed with floats on
    either side, must be defined, and so must ``<`` and ``<=``. Both :class:`float`
    and :class:`mpmath.mpf` satisfy it.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | float) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | float) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | float) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | float) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | float) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | float) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | float) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __lt__(self, rhs: Self | float) -> bool: ...

    @abstractmethod
    def __le__(self, rhs: Self | float) -> bool: ...
