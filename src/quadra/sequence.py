"""
######################################################
Sequences and their limits (:mod:`quadra.sequence`)
######################################################

.. currentmodule:: quadra.sequence

This module provides lazy geometric sequences and the convergence test that decides
whether a sequence of estimates has stabilized. Every integrator in :mod:`quadra`
reports its outcome through :func:`seq_limit`.

.. autosummary::
    :toctree: generated/

    ConvergenceResult
    close_enuf
    powers
    seq_limit
    zeno

"""

import dataclasses
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Final

import numpy as np

from quadra.typing import Scalar

MACHINE_EPSILON: Final = float(np.finfo(np.float64).eps)
SQRT_MACHINE_EPSILON: Final = float(np.sqrt(MACHINE_EPSILON))


@dataclasses.dataclass(frozen=True, slots=True)
class ConvergenceResult[T]:
    """Output of :func:`seq_limit` and of every integrator.

    Attributes
    ----------
    converged : bool
        ``True`` if and only if the sequence stabilized within the tolerance.
    terms_checked : int
        Number of terms examined. For adaptive integrators, the number of pieces
        processed.
    result
        Last examined term, that is, the best available estimate. ``None`` if no term
        was examined.
    """

    converged: bool
    terms_checked: int
    result: T | None

    @property
    def iterations(self) -> int:
        """Alias of `terms_checked`, used by adaptive integrators."""
        return self.terms_checked


def close_enuf(a: Scalar, b: Scalar, tolerance: float) -> bool:
    """Return ``True`` if `a` and `b` agree within `tolerance`.

    The test is relative away from zero and absolute near zero.

    Examples
    --------
    >>> close_enuf(1000.0, 1000.001, 1e-5)
    True
    >>> close_enuf(0.0, 1e-3, 1e-5)
    False
    """
    return abs(a - b) <= 0.5 * tolerance * (2 + abs(a) + abs(b))


def powers[T: Scalar](x: T, x0: T | int = 1) -> Iterator[T]:
    """Yield ``x0, x0 * x, x0 * x**2, ...`` indefinitely.

    Examples
    --------
    >>> import itertools
    >>> list(itertools.islice(powers(2, 3), 4))
    [3, 6, 12, 24]
    """
    return itertools.accumulate(itertools.repeat(x), lambda acc, _: acc * x, initial=x0)


def zeno[T: Scalar](x: T, x0: T | int = 1) -> Iterator[T]:
    """Yield ``x0, x0 / x, x0 / x**2, ...`` indefinitely.

    Examples
    --------
    >>> import itertools
    >>> list(itertools.islice(zeno(2, 1), 4))
    [1, 0.5, 0.25, 0.125]
    """
    return itertools.accumulate(itertools.repeat(x), lambda acc, _: acc / x, initial=x0)


def seq_limit[T: Scalar](
    xs: Iterable[T],
    tolerance: float = SQRT_MACHINE_EPSILON,
    minterms: int = 2,
    maxterms: int | None = None,
    convergence_fn: Callable[[T, T], bool] | None = None,
    fail_fn: Callable[[T, T], bool] | None = None,
) -> ConvergenceResult[T]:
    """Examine `xs` until two consecutive terms agree.

    Parameters
    ----------
    xs : Iterable
        Sequence of estimates. It may be infinite and is consumed lazily; no term
        after the returned one is requested.
    tolerance : default=sqrt(eps)
        Tolerance given to :func:`close_enuf` when `convergence_fn` is omitted.
    minterms : int, default=2
        Minimum number of terms examined before returning.
    maxterms : int, optional
        Maximum number of terms examined. It takes precedence over `minterms`. If
        omitted, examination continues until convergence or exhaustion of `xs`.
    convergence_fn : Callable, optional
        Predicate on the previous and current terms which signals convergence.
    fail_fn : Callable, optional
        Predicate on the previous and current terms which stops the examination
        without convergence, for instance on divergence.

    Returns
    -------
    ConvergenceResult

    Examples
    --------
    >>> seq_limit([1.0, 0.5, 0.25, 0.25])
    ConvergenceResult(converged=True, terms_checked=4, result=0.25)
    >>> seq_limit([1.0, 2.0, 3.0], maxterms=2)
    ConvergenceResult(converged=False, terms_checked=2, result=2.0)
    >>> seq_limit([])
    ConvergenceResult(converged=False, terms_checked=0, result=None)
    """
    if minterms < 1:
        raise ValueError

    if maxterms is not None and maxterms < 1:
        raise ValueError

    if convergence_fn is None:
        convergence_fn = lambda x, y: close_enuf(x, y, tolerance)  # noqa: E731

    it = iter(xs)

    for prev in it:
        break
    else:
        return ConvergenceResult(False, 0, None)

    if maxterms is not None:
        minterms = min(minterms, maxterms)

    terms_checked = 1

    if maxterms == 1:
        return ConvergenceResult(False, 1, prev)

    for curr in it:
        terms_checked += 1
        converged = convergence_fn(prev, curr)
        failed = fail_fn is not None and fail_fn(prev, curr)
        exhausted = maxterms is not None and terms_checked >= maxterms

        if terms_checked >= minterms and (converged or failed or exhausted):
            return ConvergenceResult(converged, terms_checked, curr)

        prev = curr

    return ConvergenceResult(False, terms_checked, prev)
