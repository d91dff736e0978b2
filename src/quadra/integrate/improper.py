import logging
from collections.abc import Callable
from typing import Final, Literal

from quadra.aggregate import ksum
from quadra.integrate import (
    bulirsch_stoer,
    midpoint,
    newtoncotes,
    riemann,
    romberg,
    trapezoid,
)
from quadra.integrate.common import Integrator, Options, isinfinite, options
from quadra.integrate.substitute import infinitize
from quadra.interval import CLOSED, OPEN, Interval
from quadra.sequence import ConvergenceResult

logger = logging.getLogger(__name__)

type Case = Literal[
    "SAME_INFINITY",
    "DESCENDING",
    "FULL_LINE",
    "LEFT_INFINITE",
    "RIGHT_INFINITE",
    "FINITE",
]


def classify(a, b) -> Case:
    """Classify the endpoints of an integral.

    Returns
    -------
    Literal["SAME_INFINITY", "DESCENDING", "FULL_LINE", "LEFT_INFINITE", \
"RIGHT_INFINITE", "FINITE"]
        ``"SAME_INFINITY"`` if both endpoints are the same infinity,
        ``"DESCENDING"`` if `a` is :math:`+\\infty` or `b` is :math:`-\\infty`,
        ``"FULL_LINE"`` for :math:`(-\\infty,+\\infty)`, ``"LEFT_INFINITE"`` and
        ``"RIGHT_INFINITE"`` if only `a` or `b` is infinite, and ``"FINITE"``
        otherwise.

    Examples
    --------
    >>> import math
    >>> classify(-math.inf, math.inf)
    'FULL_LINE'
    >>> classify(math.inf, 0.0)
    'DESCENDING'
    >>> classify(0.0, 1.0)
    'FINITE'
    """
    match isinfinite(a), isinfinite(b):
        case True, True if a == b:
            return "SAME_INFINITY"

        case True, _ if a > 0:
            return "DESCENDING"

        case _, True if b < 0:
            return "DESCENDING"

        case True, True:
            return "FULL_LINE"

        case True, False:
            return "LEFT_INFINITE"

        case False, True:
            return "RIGHT_INFINITE"

        case _:
            return "FINITE"


def _combine(results: list[ConvergenceResult]) -> ConvergenceResult:
    return ConvergenceResult(
        all(r.converged for r in results),
        sum(r.terms_checked for r in results),
        ksum(r.result for r in results),
    )


OPEN_FORMS: Final[dict[Integrator, Integrator]] = {
    trapezoid.integral: midpoint.integral,
    romberg.closed_integral: romberg.open_integral,
    bulirsch_stoer.closed_integral: bulirsch_stoer.open_integral,
    newtoncotes.simpson_integral: newtoncotes.milne_integral,
    newtoncotes.simpson38_integral: newtoncotes.milne_integral,
    newtoncotes.boole_integral: newtoncotes.milne_integral,
    riemann.left_integral: midpoint.integral,
    riemann.right_integral: midpoint.integral,
    riemann.lower_integral: midpoint.integral,
    riemann.upper_integral: midpoint.integral,
}
"""Open rules standing in for rules that always evaluate both endpoints."""


def open_form(integrator: Integrator) -> Integrator:
    """Return an integrator that never evaluates the open endpoints of a range.

    Rules listed in :data:`OPEN_FORMS` evaluate both endpoints whatever
    ``opts.interval`` says, so their open counterpart is returned. Any other
    integrator is assumed to honor ``opts.interval`` and is returned unchanged.

    Examples
    --------
    >>> from quadra.integrate import midpoint, romberg, trapezoid
    >>> open_form(trapezoid.integral) is midpoint.integral
    True
    >>> open_form(romberg.open_integral) is romberg.open_integral
    True
    """
    return OPEN_FORMS.get(integrator, integrator)


def improper(
    integrator: Integrator, open_integrator: Integrator | None = None
) -> Integrator:
    r"""Wrap `integrator` so that it accepts infinite endpoints.

    Infinite tails beyond ``opts.infinite_breakpoint`` are integrated with
    :func:`~quadra.integrate.substitute.infinitize`, and the remaining finite part
    with `integrator` itself. Each breakpoint is closed on exactly one of the two
    pieces it separates, and tails are open at infinity.

    ======================================= =========================================
    Endpoints                               Treatment
    ======================================= =========================================
    :math:`(-\infty,-\infty)`, :math:`(\infty,\infty)` zero
    :math:`a=+\infty` or :math:`b=-\infty`  swap the endpoints and negate the result
    :math:`(-\infty,+\infty)`               :math:`(-\infty,-c)`, :math:`[-c,c]`,
                                            :math:`(c,+\infty)`
    :math:`(-\infty,b)`                     substitute entirely if :math:`b\le -c`;
                                            otherwise :math:`(-\infty,-c)` and
                                            :math:`[-c,b)`
    :math:`(a,+\infty)`                     substitute entirely if :math:`a\ge c`;
                                            otherwise :math:`(a,c]` and
                                            :math:`(c,+\infty)`
    finite                                  `integrator` unchanged
    ======================================= =========================================

    Here :math:`c` is ``opts.infinite_breakpoint``.

    Parameters
    ----------
    integrator : Integrator
        Integrator of the finite pieces.
    open_integrator : Integrator, optional
        Integrator of the substituted tails, whose endpoint at infinity becomes 0.
        Defaults to ``open_form(integrator)``.

    Returns
    -------
    Integrator
        The result of a split integral is converged if and only if every piece is;
        `terms_checked` is the total over the pieces.

    Examples
    --------
    >>> import math
    >>> from quadra.integrate import bulirsch_stoer
    >>> integrate = improper(bulirsch_stoer.integral)
    >>> r = integrate(lambda x: math.exp(-x * x), -math.inf, math.inf)
    >>> r.converged, abs(r.result - math.sqrt(math.pi)) < 1e-6
    (True, True)
    """
    if open_integrator is None:
        open_integrator = open_form(integrator)

    inf_integrator = infinitize(open_integrator)

    def call(integrate: Integrator, fun, l, r, opts: Options, interval: Interval):
        return integrate(fun, l, r, opts.replace(interval=interval))

    def same_infinity(fun, a, b, opts):
        return ConvergenceResult(True, 0, 0.0)

    def descending(fun, a, b, opts):
        res = result(fun, b, a, opts.replace(interval=opts.interval.flip()))
        return ConvergenceResult(res.converged, res.terms_checked, -res.result)

    def full_line(fun, a, b, opts):
        c = abs(opts.infinite_breakpoint)
        return _combine(
            [
                call(inf_integrator, fun, a, -c, opts, OPEN),
                call(integrator, fun, -c, c, opts, CLOSED),
                call(inf_integrator, fun, c, b, opts, OPEN),
            ]
        )

    def left_infinite(fun, a, b, opts):
        c = abs(opts.infinite_breakpoint)
        interval = opts.interval.open_left()

        if b <= -c:
            return call(inf_integrator, fun, a, b, opts, interval)

        return _combine(
            [
                call(inf_integrator, fun, a, -c, opts, OPEN),
                call(integrator, fun, -c, b, opts, interval.close_left()),
            ]
        )

    def right_infinite(fun, a, b, opts):
        c = abs(opts.infinite_breakpoint)
        interval = opts.interval.open_right()

        if a >= c:
            return call(inf_integrator, fun, a, b, opts, interval)

        return _combine(
            [
                call(integrator, fun, a, c, opts, interval.close_right()),
                call(inf_integrator, fun, c, b, opts, OPEN),
            ]
        )

    def finite(fun, a, b, opts):
        return integrator(fun, a, b, opts)

    handlers: dict[Case, Callable[..., ConvergenceResult]] = {
        "SAME_INFINITY": same_infinity,
        "DESCENDING": descending,
        "FULL_LINE": full_line,
        "LEFT_INFINITE": left_infinite,
        "RIGHT_INFINITE": right_infinite,
        "FINITE": finite,
    }

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)
        case = classify(a, b)
        logger.debug("improper integral over [%r, %r]: %s", a, b, case)
        return handlers[case](fun, a, b, opts)

    return result
