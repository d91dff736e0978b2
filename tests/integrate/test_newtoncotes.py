import itertools
import math

import pytest

from quadra.integrate import newtoncotes as nc


def test_single_rules():
    def cube(x):
        return x**3

    assert pytest.approx(nc.single_simpson(cube, 0.0, 1.0)) == 0.25
    assert pytest.approx(nc.single_simpson38(cube, 0.0, 1.0)) == 0.25
    assert pytest.approx(nc.single_milne(cube, 0.0, 1.0)) == 0.25
    assert pytest.approx(nc.single_boole(lambda x: x**5, 0.0, 1.0)) == 1 / 6


def test_sequences():
    for single, sequence in (
        (nc.single_simpson, nc.simpson_sequence),
        (nc.single_simpson38, nc.simpson38_sequence),
        (nc.single_boole, nc.boole_sequence),
        (nc.single_milne, nc.milne_sequence),
    ):
        first = next(iter(sequence(math.exp, 0.0, 1.0)))
        assert pytest.approx(first, 1e-13) == single(math.exp, 0.0, 1.0)

    xs = list(itertools.islice(nc.simpson_sequence(math.exp, 0.0, 1.0, n=2), 2))
    halves = (nc.single_simpson(math.exp, l, l + 0.5) for l in (0.0, 0.5))
    assert pytest.approx(xs[0], 1e-13) == sum(halves)


def test_integrals():
    for integrate in (
        nc.simpson_integral,
        nc.simpson38_integral,
        nc.boole_integral,
        nc.milne_integral,
    ):
        r = integrate(math.sin, 0.0, math.pi)
        assert r.converged
        assert pytest.approx(r.result, 1e-8) == 2.0


def test_invalid():
    with pytest.raises(ValueError):
        nc.simpson_integral(math.sin, 0.0, 1.0, n=[2, 4])
