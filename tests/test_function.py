import fractions
import math

import mpmath
import pytest

from quadra import function as qf


def test_float():
    assert pytest.approx(qf.exp(2), 1e-12) == math.exp(2)
    assert pytest.approx(qf.log(5.0), 1e-12) == math.log(5.0)
    assert pytest.approx(qf.pow(3.25, 1.25), 1e-12) == 3.25**1.25
    assert qf.sqrt(4) == 2.0


def test_mpmath():
    with mpmath.workdps(30):
        x = mpmath.mpf(2)
        assert isinstance(qf.exp(x), mpmath.mpf)
        assert isinstance(qf.log(x), mpmath.mpf)
        assert isinstance(qf.sqrt(x), mpmath.mpf)
        assert isinstance(qf.pow(2, mpmath.mpf("0.5")), mpmath.mpf)
        assert abs(qf.sqrt(x) ** 2 - 2) < mpmath.mpf("1e-28")


def test_unsupported():
    with pytest.raises(TypeError):
        qf.exp("1")

    with pytest.raises(TypeError):
        qf.sqrt(fractions.Fraction(1, 4))

    with pytest.raises(TypeError):
        qf.pow(2.0, None)
