from collections.abc import Callable, Iterator

from quadra.aggregate import ksum
from quadra.integrate.common import Options, make_integrator, options, windowed_sum
from quadra.interpolate.richardson import richardson_sequence


def single_midpoint(fun: Callable, a, b):
    """Estimate the integral with one slice, evaluating `fun` at the midpoint only."""
    return fun((a + b) / 2) * (b - a)


def midpoint_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the composite midpoint rule.

    The endpoints are never evaluated, which makes the rule suitable for open
    intervals.
    """
    return windowed_sum(lambda l, r: single_midpoint(fun, l, r), a, b)


def _tripling(fun: Callable, a, b, n: int) -> Iterator:
    # Tripling keeps the old midpoints; each slice of width h gains the points at
    # h/6 and 5h/6.
    h = (b - a) / n
    estimate = midpoint_sum(fun, a, b)(n)

    while True:
        yield estimate
        new = ksum(
            fun(a + i * h + h / 6) + fun(a + i * h + 5 * h / 6) for i in range(n)
        )
        estimate = estimate / 3 + new * h / 3
        n *= 3
        h /= 3


def midpoint_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return the lazy sequence of composite midpoint estimates.

    With an integer `n` the slice counts are ``n, 3n, 9n, ...`` so that every
    evaluation is reused; with ``accelerate=True`` the sequence is Richardson
    extrapolated with ``t=3`` and ``p=q=2``. An explicit sequence `n` is evaluated
    entry by entry.

    Examples
    --------
    >>> import itertools
    >>> xs = midpoint_sequence(lambda x: x**2, 0.0, 1.0, n=1)
    >>> [round(x, 6) for x in itertools.islice(xs, 3)]
    [0.25, 0.324074, 0.332305]
    """
    opts = options(opts, **overrides)

    match opts.n:
        case int(n):
            xs = _tripling(fun, a, b, n)

            if opts.accelerate:
                xs = richardson_sequence(xs, 3, 2, 2)

            return xs

        case ns:
            if opts.accelerate:
                raise ValueError("accelerate requires a geometric n")

            return map(midpoint_sum(fun, a, b), ns)


integral = make_integrator(single_midpoint, midpoint_sequence)
