import math

import pytest

from quadra import definite_integral
from quadra.integrate import romberg
from quadra.integrate.quad import (
    METHODS,
    Direct,
    Named,
    WithOptions,
    available_methods,
    get_integrator,
    resolve,
)
from quadra.sequence import ConvergenceResult

CONVERGENT_METHODS = [
    "open",
    "closed",
    "closed-open",
    "open-closed",
    "bulirsch-stoer-open",
    "bulirsch-stoer-closed",
    "adaptive-bulirsch-stoer",
    "midpoint",
    "trapezoid",
    "boole",
    "milne",
    "simpson",
    "simpson38",
    "romberg",
    "romberg-open",
]


def test_definite_integral():
    assert pytest.approx(definite_integral(lambda x: x * x, 0.0, 1.0), 1e-10) == 1 / 3

    r = definite_integral(lambda x: math.exp(-x * x), -math.inf, math.inf, info=True)
    assert isinstance(r, ConvergenceResult)
    assert r.converged
    assert pytest.approx(r.result, abs=1e-6) == math.sqrt(math.pi)

    r = definite_integral(lambda x: 1 / x**2, 1.0, math.inf)
    assert pytest.approx(r, abs=1e-9) == 1.0


def test_methods():
    assert available_methods() == sorted(METHODS)
    assert set(CONVERGENT_METHODS) <= set(available_methods())

    for method in CONVERGENT_METHODS:
        r = definite_integral(math.exp, 0.0, 1.0, method=method, info=True)
        assert r.converged, method
        assert pytest.approx(r.result, 1e-6) == math.e - 1, method

    for method in ("left-riemann", "right-riemann"):
        r = definite_integral(lambda x: x * x, 0.0, 1.0, method=method, accelerate=True)
        assert pytest.approx(r, 1e-9) == 1 / 3

    for method in ("lower-riemann", "upper-riemann"):
        r = definite_integral(
            lambda x: x, 0.0, 1.0, method=method, maxterms=6, info=True
        )
        assert not r.converged
        assert pytest.approx(abs(r.result - 0.5)) == 1 / 64


def test_infinite_range_every_method():
    for method in available_methods():
        r = definite_integral(
            lambda x: 1 / x**2, 1.0, math.inf, method=method, info=True
        )
        assert r.converged, method
        assert pytest.approx(r.result, 1e-9) == 1.0, method

    for method in CONVERGENT_METHODS:
        r = definite_integral(lambda x: 1 / x**2, 0.5, math.inf, method=method)
        assert pytest.approx(r, 1e-6) == 2.0, method


def test_resolve():
    integrator, opts = resolve("closed")
    assert opts == {"interval": "closed"}

    integrator, opts = resolve(("closed", {"interval": "open", "tolerance": 1e-6}))
    assert opts == {"interval": "open", "tolerance": 1e-6}

    spec = WithOptions(WithOptions(Named("romberg"), {"tolerance": 1e-6}), {"n": 2})
    integrator, opts = resolve(spec)
    assert integrator is romberg.closed_integral
    assert opts == {"tolerance": 1e-6, "n": 2}

    assert resolve(romberg.open_integral) == (romberg.open_integral, {})
    assert resolve(Direct(romberg.open_integral)) == (romberg.open_integral, {})

    with pytest.raises(ValueError):
        resolve("gauss-kronrod")

    with pytest.raises(ValueError):
        resolve(WithOptions(Named("nope"), {}))

    with pytest.raises(TypeError):
        resolve(42)


def test_get_integrator():
    integrator, _ = get_integrator("romberg", 0.0, 1.0)
    assert integrator is romberg.closed_integral

    integrator, _ = get_integrator("romberg-open", 0.0, math.inf)
    assert integrator is not romberg.open_integral
    assert pytest.approx(integrator(lambda x: math.exp(-x), 0.0, math.inf).result) == 1


def test_errors_before_evaluation():
    calls = []

    def fun(x):
        calls.append(x)
        return x

    with pytest.raises(ValueError):
        definite_integral(fun, 0.0, 1.0, method="gauss-kronrod")

    with pytest.raises(ValueError):
        definite_integral(fun, 0.0, 1.0, tolerance=-1.0)

    with pytest.raises(TypeError):
        definite_integral(fun, 0.0, 1.0, bogus=True)

    assert calls == []


def test_options_precedence():
    r = definite_integral(
        math.exp, 0.0, 1.0, method=("romberg", {"maxterms": 2}), info=True
    )
    assert r.terms_checked == 2 and not r.converged

    r = definite_integral(
        math.exp, 0.0, 1.0, method=("romberg", {"maxterms": 2}), maxterms=3, info=True
    )
    assert r.terms_checked == 3


def test_memoize():
    calls = []

    def fun(x):
        calls.append(x)
        return math.sin(x)

    r = definite_integral(fun, 0.0, 1.0, method="simpson38", memoize=True)
    assert pytest.approx(r, 1e-9) == 1 - math.cos(1.0)
    assert len(calls) == len(set(calls))
