from collections.abc import Callable, Iterator

from quadra.integrate.common import Options, make_integrator, options
from quadra.integrate.midpoint import midpoint_sequence, single_midpoint
from quadra.integrate.trapezoid import single_trapezoid, trapezoid_sequence
from quadra.interpolate.richardson import richardson_sequence


def closed_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return the diagonal of the Romberg tableau built on the trapezoidal rule."""
    opts = options(opts, **overrides)

    if not isinstance(opts.n, int):
        raise ValueError(f"Romberg's method requires an integer n, got {opts.n!r}")

    return richardson_sequence(trapezoid_sequence(fun, a, b, n=opts.n), 2, 2, 2)


def open_sequence(
    fun: Callable, a, b, opts: Options | None = None, /, **overrides
) -> Iterator:
    """Return the diagonal of the Romberg tableau built on the midpoint rule.

    The midpoint rule is refined by tripling the slice count, so the endpoints are
    never evaluated.
    """
    opts = options(opts, **overrides)

    if not isinstance(opts.n, int):
        raise ValueError(f"Romberg's method requires an integer n, got {opts.n!r}")

    return richardson_sequence(midpoint_sequence(fun, a, b, n=opts.n), 3, 2, 2)


closed_integral = make_integrator(single_trapezoid, closed_sequence)
open_integral = make_integrator(single_midpoint, open_sequence)


def integral(fun: Callable, a, b, opts: Options | None = None, /, **overrides):
    """Integrate with Romberg's method.

    The closed variant is used if and only if both endpoints of ``opts.interval`` are
    closed.

    Examples
    --------
    >>> import math
    >>> r = integral(math.exp, 0.0, 1.0, interval="closed")
    >>> r.converged, abs(r.result - (math.e - 1)) < 1e-10
    (True, True)
    """
    opts = options(opts, **overrides)

    if opts.interval.is_closed():
        return closed_integral(fun, a, b, opts)

    return open_integral(fun, a, b, opts)
