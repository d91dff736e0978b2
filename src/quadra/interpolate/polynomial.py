from collections.abc import Callable, Iterable, Iterator, Sequence

from quadra.aggregate import ksum, scanning_sum
from quadra.interpolate.tableau import (
    DegenerateAbscissaError,
    TableauFold,
    first_terms,
    tableau_columns,
)
from quadra.typing import Scalar

type NevilleCell[T] = tuple[T, T, T]
type ModifiedNevilleCell[T] = tuple[T, T, T, T]


def lagrange[T: Scalar](points: Sequence[tuple[T, T]], x: T) -> T:
    """Evaluate the Lagrange interpolating polynomial through `points` at `x`.

    Examples
    --------
    >>> lagrange([(0, 1), (1, 2), (2, 5)], 3)
    10.0
    """
    terms = []

    for i, (xi, yi) in enumerate(points):
        term = yi

        for j, (xj, _) in enumerate(points):
            if i == j:
                continue

            if xi == xj:
                raise DegenerateAbscissaError(f"duplicate abscissa {xi!r}")

            term = term * (x - xj) / (xi - xj)

        terms.append(term)

    return ksum(terms)


def neville_prepare[T: Scalar](point: tuple[T, T]) -> NevilleCell[T]:
    x, fx = point
    return (x, x, fx)


def neville_merge[T: Scalar](
    x: T,
) -> Callable[[NevilleCell[T], NevilleCell[T]], NevilleCell[T]]:
    """Return the merge rule of Neville's algorithm evaluating at `x`."""

    def merge(left: NevilleCell[T], right: NevilleCell[T]) -> NevilleCell[T]:
        xl, _, pl = left
        _, xr, pr = right

        if xl == xr:
            raise DegenerateAbscissaError(f"duplicate abscissa {xl!r}")

        return (xl, xr, ((x - xr) * pl - (x - xl) * pr) / (xl - xr))

    return merge


def neville[T: Scalar](points: Iterable[tuple[T, T]], x: T) -> Iterator[T]:
    r"""Yield successively higher-order polynomial interpolations at `x`.

    The ``k``-th estimate is the value at `x` of the polynomial of degree ``k``
    through the first ``k + 1`` points.

    Parameters
    ----------
    points : Iterable[tuple]
        Pairs :math:`(x_i, f(x_i))` with distinct abscissas. May be infinite.
    x
        Abscissa at which the interpolants are evaluated.

    Returns
    -------
    Iterator

    Raises
    ------
    DegenerateAbscissaError
        If two points share an abscissa. Raised lazily, when the offending estimate
        is requested.

    Notes
    -----
    Two neighbors :math:`p_l` (through :math:`x_l,\ldots`) and :math:`p_r` (through
    :math:`\ldots,x_r`) are merged as

    .. math:: p = \frac{(x - x_r)p_l - (x - x_l)p_r}{x_l - x_r}.

    Examples
    --------
    >>> list(neville([(0, 1), (1, 2), (2, 5), (3, 10)], 1.5))
    [1, 2.5, 3.25, 3.25]
    """
    columns = tableau_columns(points, neville_prepare, neville_merge(x))
    return (cell[2] for cell in first_terms(columns))


def neville_fold[T: Scalar](x: T) -> TableauFold[tuple[T, T], NevilleCell[T], T]:
    """Return a fold presenting the interpolation at `x` through every point so far."""
    return TableauFold(neville_prepare, neville_merge(x), lambda row: row[-1][2])


def modified_neville_prepare[T: Scalar](point: tuple[T, T]) -> ModifiedNevilleCell[T]:
    x, fx = point
    return (x, x, fx, fx)


def modified_neville_merge[T: Scalar](
    x: T,
) -> Callable[[ModifiedNevilleCell[T], ModifiedNevilleCell[T]], ModifiedNevilleCell[T]]:
    """Return the merge rule of the modified Neville algorithm evaluating at `x`.

    A cell ``(xl, xr, c, d)`` stores the differences between its interpolant and the
    interpolants that omit its rightmost (`c`) or leftmost (`d`) point.
    """

    def merge(
        left: ModifiedNevilleCell[T], right: ModifiedNevilleCell[T]
    ) -> ModifiedNevilleCell[T]:
        xl, _, _, dl = left
        _, xr, cr, _ = right

        if xl == xr:
            raise DegenerateAbscissaError(f"duplicate abscissa {xl!r}")

        ratio = (cr - dl) / (xl - xr)
        return (xl, xr, (xl - x) * ratio, (xr - x) * ratio)

    return merge


def modified_neville[T: Scalar](points: Iterable[tuple[T, T]], x: T) -> Iterator[T]:
    """Yield the same estimates as :func:`neville` from running sums of differences.

    Each estimate is the previous one plus a correction, which trades a multiplication
    for an addition per step and behaves better on long sequences. Corrections are
    accumulated with compensated summation.

    Examples
    --------
    >>> [round(y, 12) for y in modified_neville([(0, 1), (1, 2), (2, 5), (3, 10)], 1.5)]
    [1.0, 2.5, 3.25, 3.25]
    """
    columns = tableau_columns(
        points, modified_neville_prepare, modified_neville_merge(x)
    )
    return scanning_sum(cell[2] for cell in first_terms(columns))


def modified_neville_fold[T: Scalar](
    x: T,
) -> TableauFold[tuple[T, T], ModifiedNevilleCell[T], T]:
    """Return a fold equivalent to :func:`neville_fold` built on differences."""
    return TableauFold(
        modified_neville_prepare,
        modified_neville_merge(x),
        lambda row: ksum(cell[3] for cell in row),
    )
