import itertools
from collections.abc import Iterable, Iterator

from quadra.interpolate.tableau import first_terms
from quadra.typing import Scalar


def _accelerate[T: Scalar](xs: Iterable[T], t: float, p: float) -> Iterator[T]:
    tp = t**p
    return ((tp * y - x) / (tp - 1) for x, y in itertools.pairwise(xs))


def _check(t: float, p: float, q: float) -> None:
    if t <= 1:
        raise ValueError(f"geometric factor must exceed 1, got {t!r}")

    if p <= 0 or q <= 0:
        raise ValueError


def richardson_tableau[T: Scalar](
    xs: Iterable[T], t: float, p: float = 1, q: float = 1
) -> Iterator[Iterator[T]]:
    r"""Yield the columns of the Richardson extrapolation tableau of `xs`.

    Parameters
    ----------
    xs : Iterable
        Estimates :math:`A(h), A(h/t), A(h/t^2), \ldots` of a limit :math:`A(0)`.
        May be infinite.
    t : float
        Ratio between successive step sizes. `t` must be greater than 1.
    p : float, default=1
        Order of the leading error term of :math:`A(h)`.
    q : float, default=1
        Increment between the orders of successive error terms.

    Returns
    -------
    Iterator[Iterator]
        Column ``k`` eliminates the error terms of orders :math:`p, p+q, \ldots,
        p+(k-1)q`.

    Notes
    -----
    Suppose :math:`A(h)=A(0)+c_1h^p+c_2h^{p+q}+\cdots`. Column ``k + 1`` is built
    from column ``k`` as

    .. math:: \frac{t^{p+kq}A_k(h/t)-A_k(h)}{t^{p+kq}-1}.

    For instance, ``t=2`` and ``p=q=2`` turn the trapezoidal rule into Simpson's
    rule (column 1), Boole's rule (column 2), and Romberg's method (the diagonal).
    """
    _check(t, p, q)
    return _tableau(iter(xs), t, p, q)


def _tableau(column: Iterator, t: float, p: float, q: float) -> Iterator[Iterator]:
    while True:
        for head in column:
            break
        else:
            return

        this, rest = itertools.tee(itertools.chain((head,), column))
        yield this
        column = _accelerate(rest, t, p)
        p += q


def richardson_sequence[T: Scalar](
    xs: Iterable[T], t: float, p: float = 1, q: float = 1
) -> Iterator[T]:
    """Yield the first term of each column of :func:`richardson_tableau`.

    The ``k``-th term consumes ``k + 1`` elements of `xs`.

    Examples
    --------
    >>> xs = [1 + h**2 + h**4 for h in (1.0, 0.5, 0.25)]
    >>> list(richardson_sequence(xs, 2, 2, 2))
    [3.0, 0.75, 1.0]
    """
    return first_terms(richardson_tableau(xs, t, p, q))


def richardson_column[T: Scalar](
    xs: Iterable[T], column: int, t: float, p: float = 1, q: float = 1
) -> Iterator[T]:
    """Return column `column` of :func:`richardson_tableau` as a lazy sequence.

    Examples
    --------
    >>> xs = [1 + h**2 + h**4 for h in (1.0, 0.5, 0.25)]
    >>> list(richardson_column(xs, 1, 2, 2, 2))
    [0.75, 0.984375]
    """
    _check(t, p, q)

    if column < 0:
        raise ValueError

    result = iter(xs)

    for k in range(column):
        result = _accelerate(result, t, p + k * q)

    return result
