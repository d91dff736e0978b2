import itertools
import math

import pytest

from quadra.integrate import midpoint, trapezoid
from quadra.sequence import seq_limit


def square(x):
    return x * x


def test_sums():
    assert midpoint.midpoint_sum(square, 0.0, 1.0)(1) == 0.25
    assert trapezoid.trapezoid_sum(square, 0.0, 1.0)(1) == 0.5
    assert midpoint.single_midpoint(square, 0.0, 2.0) == 2.0
    assert trapezoid.single_trapezoid(square, 0.0, 2.0) == 4.0


def test_refinement():
    xs = list(itertools.islice(midpoint.midpoint_sequence(math.sin, 0.0, 2.0), 4))
    expected = [midpoint.midpoint_sum(math.sin, 0.0, 2.0)(n) for n in (1, 3, 9, 27)]
    assert pytest.approx(xs, 1e-13) == expected

    xs = trapezoid.trapezoid_sequence(math.sin, 0.0, 2.0, n=3)
    xs = list(itertools.islice(xs, 4))
    expected = [trapezoid.trapezoid_sum(math.sin, 0.0, 2.0)(n) for n in (3, 6, 12, 24)]
    assert pytest.approx(xs, 1e-13) == expected

    xs = list(trapezoid.trapezoid_sequence(square, 0.0, 1.0, n=[1, 2, 3]))
    assert xs == [trapezoid.trapezoid_sum(square, 0.0, 1.0)(n) for n in (1, 2, 3)]


def test_open_rule():
    abscissas = []

    def fun(x):
        abscissas.append(x)
        return math.exp(x)

    r = midpoint.integral(fun, 0.0, 1.0)
    assert r.converged
    assert pytest.approx(r.result, 1e-7) == math.e - 1
    assert 0.0 not in abscissas and 1.0 not in abscissas


def test_accelerate():
    r = midpoint.integral(math.exp, 0.0, 1.0, accelerate=True)
    assert pytest.approx(r.result, 1e-10) == math.e - 1

    r = trapezoid.integral(math.exp, 0.0, 1.0, accelerate=True)
    assert pytest.approx(r.result, 1e-10) == math.e - 1

    r = trapezoid.integral(square, 0.0, 1.0, accelerate=True)
    assert r.converged and r.terms_checked == 3

    with pytest.raises(ValueError):
        midpoint.integral(square, 0.0, 1.0, n=[1, 3], accelerate=True)


def test_narrow_slice():
    r = trapezoid.integral(square, 5.0, 5.0 + 1e-16)
    assert r.converged and r.terms_checked == 1


def test_monotone_refinement():
    xs = list(itertools.islice(trapezoid.trapezoid_sequence(square, 0.0, 1.0), 8))
    diffs = [abs(y - x) for x, y in itertools.pairwise(xs)]
    assert all(d2 < d1 for d1, d2 in itertools.pairwise(diffs))

    r = seq_limit(trapezoid.trapezoid_sequence(square, 0.0, 1.0), 1e-8, maxterms=20)
    assert r.converged
    assert pytest.approx(r.result, 1e-7) == 1 / 3
