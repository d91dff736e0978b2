import itertools

import pytest

from quadra.sequence import (
    SQRT_MACHINE_EPSILON,
    ConvergenceResult,
    close_enuf,
    powers,
    seq_limit,
    zeno,
)


def test_close_enuf():
    assert close_enuf(1000.0, 1000.001, 1e-5)
    assert not close_enuf(1000.0, 1000.1, 1e-5)
    assert close_enuf(0.0, 1e-6, 1e-5)
    assert not close_enuf(0.0, 1e-3, 1e-5)


def test_powers_zeno():
    assert list(itertools.islice(powers(2), 5)) == [1, 2, 4, 8, 16]
    assert list(itertools.islice(powers(3, 2), 3)) == [2, 6, 18]
    assert list(itertools.islice(zeno(2, 1), 4)) == [1, 0.5, 0.25, 0.125]


def test_seq_limit():
    assert seq_limit([1.0, 0.5, 0.25, 0.25]) == ConvergenceResult(True, 4, 0.25)
    assert seq_limit([1.0, 2.0, 3.0]) == ConvergenceResult(False, 3, 3.0)
    assert seq_limit([1.0, 2.0, 3.0], maxterms=2) == ConvergenceResult(False, 2, 2.0)
    assert seq_limit([]) == ConvergenceResult(False, 0, None)
    assert seq_limit([7.0]) == ConvergenceResult(False, 1, 7.0)

    r = seq_limit([1.0, 1.0, 1.0, 1.0], minterms=3)
    assert r.converged and r.terms_checked == 3

    with pytest.raises(ValueError):
        seq_limit([1.0], minterms=0)

    with pytest.raises(ValueError):
        seq_limit([1.0], maxterms=0)


def test_seq_limit_maxterms_caps_minterms():
    assert seq_limit([1.0, 2.0, 3.0], maxterms=1) == ConvergenceResult(False, 1, 1.0)
    assert seq_limit([1.0, 1.0], minterms=1, maxterms=1).terms_checked == 1

    r = seq_limit([1.0, 2.0, 3.0, 4.0], minterms=4, maxterms=3)
    assert r == ConvergenceResult(False, 3, 3.0)

    pulled = []

    def terms():
        for x in (1.0, 2.0):
            pulled.append(x)
            yield x

    seq_limit(terms(), maxterms=1)
    assert pulled == [1.0]


def test_seq_limit_lazy():
    pulled = []

    def halves():
        for x in zeno(2.0, 1.0):
            pulled.append(x)
            yield x

    r = seq_limit(halves(), tolerance=1e-3)
    assert r.converged
    assert r.result < 2e-3
    assert len(pulled) == r.terms_checked


def test_seq_limit_callbacks():
    r = seq_limit(powers(2.0), fail_fn=lambda _, y: abs(y) > 100)
    assert r == ConvergenceResult(False, 8, 128.0)

    r = seq_limit([1, 2, 3, 4], convergence_fn=lambda x, y: y - x == 1)
    assert r == ConvergenceResult(True, 2, 2)
    assert r.iterations == 2

    assert SQRT_MACHINE_EPSILON == pytest.approx(2**-26)
