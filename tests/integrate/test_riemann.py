import itertools

import pytest

from quadra.integrate import riemann


def square(x):
    return x * x


def test_sums():
    assert riemann.left_sum(lambda x: x, 0.0, 1.0)(4) == 0.375
    assert riemann.right_sum(lambda x: x, 0.0, 1.0)(4) == 0.625
    assert riemann.upper_sum(lambda x: x, 0.0, 1.0)(4) == 0.625
    assert riemann.lower_sum(lambda x: x, 0.0, 1.0)(4) == 0.375
    assert riemann.upper_sum(lambda x: -x, 0.0, 1.0)(4) == -0.375


def test_doubling():
    for sum_fn, sequence in (
        (riemann.left_sum, riemann.left_sequence),
        (riemann.right_sum, riemann.right_sequence),
        (riemann.upper_sum, riemann.upper_sequence),
    ):
        expected = [sum_fn(square, 0.0, 1.0)(n) for n in (3, 6, 12, 24)]
        xs = list(itertools.islice(sequence(square, 0.0, 1.0, n=3), 4))
        assert pytest.approx(xs, 1e-13) == expected


def test_explicit_n():
    xs = list(riemann.left_sequence(square, 0.0, 1.0, n=(1, 2, 5)))
    assert xs == [riemann.left_sum(square, 0.0, 1.0)(n) for n in (1, 2, 5)]


def test_integral():
    r = riemann.left_integral(square, 0.0, 1.0, accelerate=True)
    assert r.converged
    assert pytest.approx(r.result, 1e-9) == 1 / 3

    r = riemann.right_integral(square, -1.0, 2.0, accelerate=True)
    assert pytest.approx(r.result, 1e-9) == 3.0

    r = riemann.lower_integral(lambda x: x, 0.0, 1.0, maxterms=4)
    assert not r.converged and r.terms_checked == 4
    assert r.result == riemann.lower_sum(lambda x: x, 0.0, 1.0)(8)


def test_invalid():
    with pytest.raises(ValueError):
        riemann.upper_integral(square, 0.0, 1.0, accelerate=True)

    with pytest.raises(ValueError):
        riemann.left_integral(square, 0.0, 1.0, n=(1, 2), accelerate=True)
