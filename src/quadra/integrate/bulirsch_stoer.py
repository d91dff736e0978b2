import itertools
from collections.abc import Callable, Iterator

from quadra.integrate.common import Options, make_integrator, options
from quadra.integrate.midpoint import midpoint_sum, single_midpoint
from quadra.integrate.trapezoid import single_trapezoid, trapezoid_sum
from quadra.interpolate.polynomial import modified_neville
from quadra.interpolate.rational import modified_bulirsch_stoer
from quadra.sequence import powers


def bulirsch_stoer_steps(n: int = 1) -> Iterator[int]:
    """Yield the slice counts ``2n, 3n, 4n, 6n, 8n, 12n, ...``.

    Examples
    --------
    >>> import itertools
    >>> list(itertools.islice(bulirsch_stoer_steps(), 7))
    [2, 3, 4, 6, 8, 12, 16]
    """
    steps = itertools.chain.from_iterable(zip(powers(2, 2), powers(2, 3)))
    return (n * k for k in steps)


def _sequence(sum_fn: Callable) -> Callable[..., Iterator]:
    def sequence(fun, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)
        ns = opts.n if isinstance(opts.n, tuple) else bulirsch_stoer_steps(opts.n)
        estimate = sum_fn(fun, a, b)
        # Both rules have error expansions in even powers of the step size.
        points = ((((b - a) / n) ** 2, estimate(n)) for n in ns)

        match opts.bs_extrapolator:
            case "rational":
                return modified_bulirsch_stoer(points, 0.0)

            case "polynomial":
                return modified_neville(points, 0.0)

            case _:
                raise ValueError

    return sequence


open_sequence = _sequence(midpoint_sum)
closed_sequence = _sequence(trapezoid_sum)

open_integral = make_integrator(single_midpoint, open_sequence)
closed_integral = make_integrator(single_trapezoid, closed_sequence)


def integral(fun: Callable, a, b, opts: Options | None = None, /, **overrides):
    """Integrate with the Bulirsch-Stoer method.

    The closed variant, built on the trapezoidal rule, is used if and only if both
    endpoints of ``opts.interval`` are closed; otherwise the midpoint rule is used.

    Examples
    --------
    >>> import math
    >>> r = integral(math.sin, 0.0, math.pi)
    >>> r.converged, abs(r.result - 2) < 1e-8
    (True, True)
    """
    opts = options(opts, **overrides)

    if opts.interval.is_closed():
        return closed_integral(fun, a, b, opts)

    return open_integral(fun, a, b, opts)
