from collections.abc import Callable, Iterable, Iterator

from quadra.aggregate import ksum, scanning_sum
from quadra.interpolate.tableau import (
    DegenerateAbscissaError,
    RationalPoleError,
    TableauFold,
    first_terms,
    tableau_columns,
)
from quadra.typing import Scalar

type RationalCell[T] = tuple[T, T, T, T]


def _prepare[T: Scalar](point: tuple[T, T]) -> RationalCell[T]:
    x, fx = point
    return (x, x, fx, fx)


def modified_bulirsch_stoer_merge[T: Scalar](
    x: T,
) -> Callable[[RationalCell[T], RationalCell[T]], RationalCell[T]]:
    """Return the merge rule of Bulirsch-Stoer rational interpolation at `x`.

    Cells have the same layout as in :func:`modified_neville_merge`.
    """

    def merge(left: RationalCell[T], right: RationalCell[T]) -> RationalCell[T]:
        xl, _, _, dl = left
        _, xr, cr, _ = right

        if xl == xr:
            raise DegenerateAbscissaError(f"duplicate abscissa {xl!r}")

        h = xr - x

        if h == 0:
            raise RationalPoleError(f"target abscissa coincides with {xr!r}")

        w = cr - dl
        t = (xl - x) * dl / h
        den = t - cr

        if w == 0:
            return (xl, xr, w * t, w * cr)

        if den == 0:
            raise RationalPoleError(f"pole at {x!r}")

        ratio = w / den
        return (xl, xr, t * ratio, cr * ratio)

    return merge


def modified_bulirsch_stoer[T: Scalar](
    points: Iterable[tuple[T, T]], x: T
) -> Iterator[T]:
    """Yield successively higher-order rational interpolations at `x`.

    The ``k``-th estimate is the value at `x` of the diagonal rational function
    through the first ``k + 1`` points, obtained as a running sum of differences
    like :func:`modified_neville`.

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
        If two points share an abscissa.
    RationalPoleError
        If an interpolant has a pole at `x`.

    Notes
    -----
    Rational extrapolation to :math:`x=0` of estimates computed at step sizes
    :math:`h^2` is the core of the Bulirsch-Stoer method [#Sto02]_.

    References
    ----------
    .. [#Sto02] J. Stoer and R. Bulirsch, *Introduction to Numerical Analysis*, 3rd ed.
        New York, NY, USA: Springer, 2002, Sec. 2.2.

    Examples
    --------
    >>> points = [(0, 1.0), (1, 0.5), (2, 1 / 3)]
    >>> [round(y, 12) for y in modified_bulirsch_stoer(points, 3)]
    [1.0, 0.25, 0.25]
    """
    columns = tableau_columns(points, _prepare, modified_bulirsch_stoer_merge(x))
    return scanning_sum(cell[2] for cell in first_terms(columns))


def modified_bulirsch_stoer_fold[T: Scalar](
    x: T,
) -> TableauFold[tuple[T, T], RationalCell[T], T]:
    """Return a fold presenting the rational interpolation through every point so
    far."""
    return TableauFold(
        _prepare,
        modified_bulirsch_stoer_merge(x),
        lambda row: ksum(cell[3] for cell in row),
    )
