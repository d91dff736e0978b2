import itertools

import pytest

from quadra.interpolate import (
    DegenerateAbscissaError,
    TableauError,
    lagrange,
    modified_neville,
    modified_neville_fold,
    neville,
    neville_fold,
)
from quadra.interpolate.tableau import tableau_columns


def cubic(x):
    return 2 * x**3 - x + 4


def test_neville():
    points = [(0, 1), (1, 2), (2, 5), (3, 10)]
    assert list(neville(points, 1.5)) == [1, 2.5, 3.25, 3.25]
    assert lagrange(points, 1.5) == pytest.approx(3.25)

    points = [(x, cubic(x)) for x in (0.5, -1.0, 2.0, 3.5, 1.25)]
    estimates = list(neville(points, 0.75))
    assert len(estimates) == 5
    assert pytest.approx(estimates[3:], 1e-12) == [cubic(0.75)] * 2
    assert pytest.approx(estimates[-1], 1e-12) == lagrange(points, 0.75)


def test_modified_neville():
    points = [(x, cubic(x)) for x in (0.5, -1.0, 2.0, 3.5, 1.25)]
    expected = list(neville(points, 0.75))
    assert pytest.approx(list(modified_neville(points, 0.75)), 1e-12) == expected


def test_folds():
    points = [(x, cubic(x)) for x in (0.5, -1.0, 2.0, 3.5)]
    expected = [lagrange(points[: k + 1], 0.75) for k in range(len(points))]

    assert pytest.approx(list(neville_fold(0.75).scan(points)), 1e-12) == expected
    r = modified_neville_fold(0.75).reduce(points)
    assert pytest.approx(r, 1e-12) == cubic(0.75)


def test_lazy():
    points = ((float(x), cubic(float(x))) for x in itertools.count())
    estimates = list(itertools.islice(neville(points, -0.5), 5))
    assert pytest.approx(estimates[-1], 1e-12) == cubic(-0.5)

    columns = list(tableau_columns([1, 2, 3], lambda p: p, lambda x, y: x + y))
    assert [list(c) for c in columns] == [[1, 2, 3], [3, 5], [8]]


def test_degenerate():
    with pytest.raises(DegenerateAbscissaError):
        list(neville([(1.0, 2.0), (1.0, 3.0)], 0.0))

    with pytest.raises(DegenerateAbscissaError):
        list(modified_neville([(0.0, 0.0), (1.0, 2.0), (1.0, 3.0)], 0.0))

    with pytest.raises(TableauError):
        lagrange([(1.0, 2.0), (1.0, 3.0)], 0.0)

    assert issubclass(DegenerateAbscissaError, ArithmeticError)
