"""Newton-Cotes rules obtained by Richardson extrapolation of simpler rules.

Instead of evaluating weighted sums directly, each rule reads one column of the
Richardson tableau of the trapezoidal or midpoint sequence, which reuses every
evaluation of the coarser estimates.
"""

from collections.abc import Callable, Iterator

from quadra.integrate.common import Options, make_integrator, options
from quadra.integrate.midpoint import midpoint_sum
from quadra.integrate.trapezoid import trapezoid_sequence, trapezoid_sum
from quadra.interpolate.richardson import richardson_column
from quadra.sequence import powers


def _geometric_n(opts: Options) -> int:
    if not isinstance(opts.n, int):
        raise ValueError(f"this rule requires an integer n, got {opts.n!r}")

    return opts.n


def single_simpson(fun: Callable, a, b):
    return (fun(a) + 4 * fun((a + b) / 2) + fun(b)) * (b - a) / 6


def single_simpson38(fun: Callable, a, b):
    h = (b - a) / 3
    return (fun(a) + 3 * fun(a + h) + 3 * fun(a + 2 * h) + fun(b)) * (b - a) / 8


def single_boole(fun: Callable, a, b):
    h = (b - a) / 4
    ys = [fun(a), fun(a + h), fun(a + 2 * h), fun(a + 3 * h), fun(b)]
    return (7 * ys[0] + 32 * ys[1] + 12 * ys[2] + 32 * ys[3] + 7 * ys[4]) * (b - a) / 90


def single_milne(fun: Callable, a, b):
    h = (b - a) / 4
    return (2 * fun(a + h) - fun(a + 2 * h) + 2 * fun(a + 3 * h)) * (b - a) / 3


def simpson_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return Simpson's rule estimates with ``2n, 4n, 8n, ...`` slices.

    Examples
    --------
    >>> import itertools
    >>> list(itertools.islice(simpson_sequence(lambda x: x**3, 0.0, 1.0), 2))
    [0.25, 0.25]
    """
    opts = options(opts, **overrides)
    n = _geometric_n(opts)
    return richardson_column(trapezoid_sequence(fun, a, b, n=n), 1, 2, 2, 2)


def simpson38_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return Simpson's 3/8 rule estimates with ``3n, 9n, 27n, ...`` slices."""
    opts = options(opts, **overrides)
    n = _geometric_n(opts)
    xs = map(trapezoid_sum(fun, a, b), powers(3, n))
    return richardson_column(xs, 1, 3, 2, 2)


def boole_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return Boole's rule estimates with ``4n, 8n, 16n, ...`` slices."""
    opts = options(opts, **overrides)
    n = _geometric_n(opts)
    return richardson_column(trapezoid_sequence(fun, a, b, n=n), 2, 2, 2, 2)


def milne_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return Milne's rule estimates with ``2n, 4n, 8n, ...`` slices.

    Milne's rule is the open Newton-Cotes rule with three points; it never evaluates
    the endpoints.
    """
    opts = options(opts, **overrides)
    n = _geometric_n(opts)
    xs = map(midpoint_sum(fun, a, b), powers(2, n))
    return richardson_column(xs, 1, 2, 2, 2)


simpson_integral = make_integrator(single_simpson, simpson_sequence)
simpson38_integral = make_integrator(single_simpson38, simpson38_sequence)
boole_integral = make_integrator(single_boole, boole_sequence)
milne_integral = make_integrator(single_milne, milne_sequence)
