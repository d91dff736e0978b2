import dataclasses
import functools
import logging
from collections.abc import Callable, Mapping
from typing import Any, Final

from quadra.integrate import (
    bulirsch_stoer,
    midpoint,
    newtoncotes,
    riemann,
    romberg,
    trapezoid,
)
from quadra.integrate.adaptive import adaptive
from quadra.integrate.common import Integrator, isinfinite, options
from quadra.integrate.improper import improper
from quadra.sequence import ConvergenceResult

logger = logging.getLogger(__name__)

type MethodSpec = Named | Direct | WithOptions


@dataclasses.dataclass(frozen=True, slots=True)
class Named:
    """Method referring to an entry of :data:`METHODS`."""

    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Direct:
    """Method given as an integrator."""

    fun: Integrator


@dataclasses.dataclass(frozen=True, slots=True)
class WithOptions:
    """Method together with options overriding those of `method`."""

    method: MethodSpec
    options: Mapping[str, Any]


METHODS: Final[dict[str, MethodSpec]] = {
    "open": WithOptions(Named("adaptive-bulirsch-stoer"), {"interval": "open"}),
    "closed": WithOptions(Named("adaptive-bulirsch-stoer"), {"interval": "closed"}),
    "closed-open": WithOptions(
        Named("adaptive-bulirsch-stoer"), {"interval": "closed-open"}
    ),
    "open-closed": WithOptions(
        Named("adaptive-bulirsch-stoer"), {"interval": "open-closed"}
    ),
    "bulirsch-stoer-open": Direct(bulirsch_stoer.open_integral),
    "bulirsch-stoer-closed": Direct(bulirsch_stoer.closed_integral),
    "adaptive-bulirsch-stoer": Direct(
        adaptive(bulirsch_stoer.open_integral, bulirsch_stoer.closed_integral)
    ),
    "left-riemann": Direct(riemann.left_integral),
    "right-riemann": Direct(riemann.right_integral),
    "lower-riemann": Direct(riemann.lower_integral),
    "upper-riemann": Direct(riemann.upper_integral),
    "midpoint": Direct(midpoint.integral),
    "trapezoid": Direct(trapezoid.integral),
    "boole": Direct(newtoncotes.boole_integral),
    "milne": Direct(newtoncotes.milne_integral),
    "simpson": Direct(newtoncotes.simpson_integral),
    "simpson38": Direct(newtoncotes.simpson38_integral),
    "romberg": Direct(romberg.closed_integral),
    "romberg-open": Direct(romberg.open_integral),
}


def available_methods() -> list[str]:
    """Return the names accepted as `method` by :func:`definite_integral`.

    Examples
    --------
    >>> "romberg" in available_methods()
    True
    """
    return sorted(METHODS)


def _coerce(method) -> MethodSpec:
    match method:
        case Named() | Direct() | WithOptions():
            return method

        case str():
            return Named(method)

        case (inner, Mapping() as opts):
            return WithOptions(_coerce(inner), opts)

        case _ if callable(method):
            return Direct(method)

        case _:
            raise TypeError(f"unsupported method: {method!r}")


def resolve(method) -> tuple[Integrator, dict[str, Any]]:
    """Normalize `method` to an integrator and the options it carries.

    Parameters
    ----------
    method : MethodSpec | str | Integrator | tuple[method, Mapping]
        A string is looked up in :data:`METHODS`, a callable is used as is, and a
        pair ``(method, options)`` attaches `options` to `method`. Options of an
        outer :class:`WithOptions` take precedence over inner ones.

    Raises
    ------
    ValueError
        If a name is not registered.
    TypeError
        If `method` has none of the accepted shapes.

    Examples
    --------
    >>> integrator, opts = resolve(("closed", {"tolerance": 1e-6}))
    >>> opts == {"interval": "closed", "tolerance": 1e-6}
    True
    """
    match _coerce(method):
        case Named(name):
            try:
                spec = METHODS[name]
            except KeyError:
                raise ValueError(
                    f"unknown method: {name!r}; expected one of {available_methods()}"
                ) from None

            return resolve(spec)

        case Direct(fun):
            return fun, {}

        case WithOptions(inner, opts):
            integrator, inner_opts = resolve(inner)
            return integrator, {**inner_opts, **opts}


def get_integrator(method, a, b) -> tuple[Integrator, dict[str, Any]]:
    """Like :func:`resolve`, but the integrator also accepts the endpoints `a` and
    `b` if either is infinite."""
    integrator, opts = resolve(method)

    if isinfinite(a) or isinfinite(b):
        integrator = improper(integrator)

    return integrator, opts


def definite_integral(
    fun: Callable,
    a,
    b,
    method="open",
    info: bool = False,
    memoize: bool = False,
    **kwargs,
):
    r"""Integrate `fun` from `a` to `b`.

    Parameters
    ----------
    fun : Callable
        Integrand. `fun` must be a univariate function returning a scalar.
    a, b
        Limits of integration. Both may be infinite.
    method : MethodSpec | str | Integrator | tuple[method, Mapping], default="open"
        Integration method (see :func:`resolve` and :func:`available_methods`).
        The default is adaptive Bulirsch-Stoer that never evaluates the endpoints.
    info : bool, default=False
        If ``True``, the whole :class:`~quadra.sequence.ConvergenceResult` is
        returned instead of the estimate only.
    memoize : bool, default=False
        If ``True``, `fun` is evaluated at most once per abscissa during this call.
    **kwargs
        Fields of :class:`~quadra.integrate.Options`. They take precedence over the
        options attached to `method`.

    Raises
    ------
    ValueError
        If `method` is unknown or an option is invalid. Nothing is evaluated in
        that case.

    Examples
    --------
    >>> import math
    >>> round(definite_integral(lambda x: x * x, 0.0, 1.0), 10)
    0.3333333333
    >>> r = definite_integral(lambda x: math.exp(-x * x), -math.inf, math.inf,
    ...                       info=True)
    >>> r.converged, abs(r.result - math.sqrt(math.pi)) < 1e-6
    (True, True)
    """
    integrator, method_opts = get_integrator(method, a, b)
    opts = options(method_opts, **kwargs)

    if memoize:
        fun = functools.cache(fun)

    logger.debug("integrating over [%r, %r] with %r", a, b, method)
    result: ConvergenceResult = integrator(fun, a, b, opts)

    if not result.converged:
        logger.info("integral over [%r, %r] did not converge", a, b)

    return result if info else result.result
