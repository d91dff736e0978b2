from collections.abc import Callable, Iterator

from quadra.aggregate import ksum
from quadra.integrate.common import Options, make_integrator, options
from quadra.interpolate.richardson import richardson_sequence


def single_trapezoid(fun: Callable, a, b):
    """Estimate the integral with one slice, evaluating `fun` at both endpoints."""
    return (fun(a) + fun(b)) * (b - a) / 2


def trapezoid_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the composite trapezoidal rule.

    Interior points are shared between neighboring slices and evaluated once.
    """

    def result(n: int):
        h = (b - a) / n
        inner = ksum(fun(a + i * h) for i in range(1, n))
        return ((fun(a) + fun(b)) / 2 + inner) * h

    return result


def _doubling(fun: Callable, a, b, n: int) -> Iterator:
    h = (b - a) / n
    estimate = trapezoid_sum(fun, a, b)(n)

    while True:
        yield estimate
        midpoints = ksum(fun(a + (i + 0.5) * h) for i in range(n))
        estimate = estimate / 2 + midpoints * h / 2
        n *= 2
        h /= 2


def trapezoid_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return the lazy sequence of composite trapezoidal estimates.

    With an integer `n` the slice counts are ``n, 2n, 4n, ...`` so that every
    evaluation is reused; with ``accelerate=True`` the sequence is Richardson
    extrapolated with ``t=2`` and ``p=q=2``, which is Romberg's method. An explicit
    sequence `n` is evaluated entry by entry.

    Examples
    --------
    >>> import itertools
    >>> xs = trapezoid_sequence(lambda x: x**2, 0.0, 1.0)
    >>> list(itertools.islice(xs, 3))
    [0.5, 0.375, 0.34375]
    """
    opts = options(opts, **overrides)

    match opts.n:
        case int(n):
            xs = _doubling(fun, a, b, n)

            if opts.accelerate:
                xs = richardson_sequence(xs, 2, 2, 2)

            return xs

        case ns:
            if opts.accelerate:
                raise ValueError("accelerate requires a geometric n")

            return map(trapezoid_sum(fun, a, b), ns)


integral = make_integrator(single_trapezoid, trapezoid_sequence)
