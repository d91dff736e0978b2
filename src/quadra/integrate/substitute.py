r"""Variable substitutions that turn improper integrals into proper ones.

Each function in this module wraps an integrator and returns a new integrator that
rewrites :math:`(f, a, b)` into an equivalent integral before delegating to it.
"""

import dataclasses
from collections.abc import Callable
from typing import Final

from quadra import function as qf
from quadra.integrate.common import Integrator, isinfinite, options
from quadra.sequence import ConvergenceResult


def _scale(result: ConvergenceResult, factor) -> ConvergenceResult:
    if result.result is None:
        return result

    return dataclasses.replace(result, result=result.result * factor)


def infinitize(integrator: Integrator) -> Integrator:
    r"""Wrap `integrator` with the substitution :math:`u=1/t`.

    .. math:: \int_a^b f(x)\,\mathrm{d}x = \int_{1/b}^{1/a} \frac{f(1/t)}{t^2}\,
        \mathrm{d}t

    An infinite endpoint is mapped to 0, which is kept open. The integral converges
    only if `f` decays at least as fast as :math:`1/x^2`.

    Raises
    ------
    ValueError
        Unless `a` and `b` are both positive or both negative (infinities included).

    Examples
    --------
    >>> import math
    >>> from quadra.integrate import romberg
    >>> r = infinitize(romberg.open_integral)(lambda x: 1 / x**2, 1.0, math.inf)
    >>> round(r.result, 12)
    1.0
    """

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        if not ((a > 0 and b > 0) or (a < 0 and b < 0)):
            raise ValueError(f"endpoints must share their sign, got [{a!r}, {b!r}]")

        def substituted(t):
            return fun(1 / t) / (t * t)

        a_sub = 0.0 if isinfinite(b) else 1 / b
        b_sub = 0.0 if isinfinite(a) else 1 / a
        interval = opts.interval.flip()

        if isinfinite(b):
            interval = interval.open_left()

        if isinfinite(a):
            interval = interval.open_right()

        return integrator(substituted, a_sub, b_sub, opts.replace(interval=interval))

    return result


def _check_gamma(gamma: float) -> None:
    if not 0 <= gamma < 1:
        raise ValueError(f"gamma must be in [0, 1), got {gamma!r}")


def inverse_power_law_lower(integrator: Integrator, gamma: float) -> Integrator:
    r"""Wrap `integrator` to remove a singularity :math:`(x-a)^{-\gamma}` at `a`.

    With :math:`t=(x-a)^{1-\gamma}`,

    .. math:: \int_a^b f(x)\,\mathrm{d}x = \frac{1}{1-\gamma}
        \int_0^{(b-a)^{1-\gamma}} t^{\gamma/(1-\gamma)} f(a+t^{1/(1-\gamma)})\,
        \mathrm{d}t.

    Parameters
    ----------
    integrator : Integrator
    gamma : float
        Exponent of the singularity. `gamma` must be in :math:`[0,1)`.

    Examples
    --------
    >>> import math
    >>> from quadra.integrate import romberg
    >>> integrate = inverse_power_law_lower(romberg.open_integral, 0.5)
    >>> round(integrate(lambda x: 1 / math.sqrt(x), 0.0, 1.0).result, 12)
    2.0
    """
    _check_gamma(gamma)
    inner_pow = 1 / (1 - gamma)
    gamma_pow = gamma * inner_pow

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        def substituted(t):
            return qf.pow(t, gamma_pow) * fun(a + qf.pow(t, inner_pow))

        b_sub = qf.pow(b - a, 1 - gamma)
        res = integrator(substituted, 0.0, b_sub, opts, **overrides)
        return _scale(res, inner_pow)

    return result


def inverse_power_law_upper(integrator: Integrator, gamma: float) -> Integrator:
    r"""Wrap `integrator` to remove a singularity :math:`(b-x)^{-\gamma}` at `b`.

    The substitution is :math:`t=(b-x)^{1-\gamma}`, which reverses the orientation
    of the range; the kinds of the endpoints are swapped accordingly.
    """
    _check_gamma(gamma)
    inner_pow = 1 / (1 - gamma)
    gamma_pow = gamma * inner_pow

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        def substituted(t):
            return qf.pow(t, gamma_pow) * fun(b - qf.pow(t, inner_pow))

        b_sub = qf.pow(b - a, 1 - gamma)
        opts = opts.replace(interval=opts.interval.flip())
        return _scale(integrator(substituted, 0.0, b_sub, opts), inner_pow)

    return result


def inverse_sqrt_lower(integrator: Integrator) -> Integrator:
    r"""Wrap `integrator` to remove a singularity :math:`(x-a)^{-1/2}` at `a`.

    This is :func:`inverse_power_law_lower` with :math:`\gamma=1/2`, using
    :math:`t^2=x-a` directly:

    .. math:: \int_a^b f(x)\,\mathrm{d}x = 2\int_0^{\sqrt{b-a}} t f(a+t^2)\,
        \mathrm{d}t.
    """

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        def substituted(t):
            return t * fun(a + t * t)

        b_sub = qf.sqrt(b - a)
        return _scale(integrator(substituted, 0.0, b_sub, opts, **overrides), 2)

    return result


def inverse_sqrt_upper(integrator: Integrator) -> Integrator:
    r"""Wrap `integrator` to remove a singularity :math:`(b-x)^{-1/2}` at `b`."""

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        def substituted(t):
            return t * fun(b - t * t)

        b_sub = qf.sqrt(b - a)
        opts = opts.replace(interval=opts.interval.flip())
        return _scale(integrator(substituted, 0.0, b_sub, opts), 2)

    return result


def exponential_upper(integrator: Integrator) -> Integrator:
    r"""Wrap `integrator` to integrate up to :math:`+\infty` with :math:`t=e^{-x}`.

    .. math:: \int_a^\infty f(x)\,\mathrm{d}x = \int_0^{e^{-a}} \frac{f(-\log t)}{t}
        \,\mathrm{d}t

    This suits integrands that decay exponentially.

    Raises
    ------
    ValueError
        If `b` is not :math:`+\infty`.

    Examples
    --------
    >>> import math
    >>> from quadra.integrate import romberg
    >>> integrate = exponential_upper(romberg.open_integral)
    >>> r = integrate(lambda x: math.exp(-x), 0.0, math.inf)
    >>> round(r.result, 12)
    1.0
    """

    def result(fun: Callable, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        if not (isinfinite(b) and b > 0):
            raise ValueError(f"upper endpoint must be +inf, got {b!r}")

        def substituted(t):
            return fun(-qf.log(t)) / t

        interval = opts.interval.flip().open_left()
        return integrator(substituted, 0.0, qf.exp(-a), opts.replace(interval=interval))

    return result


SUBSTITUTIONS: Final[dict[str, Callable[..., Integrator]]] = {
    "infinitize": infinitize,
    "inverse-power-law-lower": inverse_power_law_lower,
    "inverse-power-law-upper": inverse_power_law_upper,
    "inverse-sqrt-lower": inverse_sqrt_lower,
    "inverse-sqrt-upper": inverse_sqrt_upper,
    "exponential-upper": exponential_upper,
}


def get_substitution(name: str) -> Callable[..., Integrator]:
    """Return the substitution registered as `name`.

    Raises
    ------
    ValueError
        If `name` is unknown.
    """
    try:
        return SUBSTITUTIONS[name]
    except KeyError:
        raise ValueError(
            f"unknown substitution: {name!r}; expected one of {sorted(SUBSTITUTIONS)}"
        ) from None
