import dataclasses
import itertools

import pytest

from quadra.interval import (
    CLOSED,
    CLOSED_OPEN,
    OPEN,
    OPEN_CLOSED,
    Boundary,
    Interval,
)

ALL = (OPEN, CLOSED, CLOSED_OPEN, OPEN_CLOSED)


def test_transforms():
    assert OPEN.close_left() == CLOSED_OPEN
    assert OPEN.close_right() == OPEN_CLOSED
    assert CLOSED.open_left() == OPEN_CLOSED
    assert CLOSED.open_right() == CLOSED_OPEN
    assert CLOSED_OPEN.flip() == OPEN_CLOSED
    assert OPEN.flip() == OPEN and CLOSED.flip() == CLOSED


def test_laws():
    for iv in ALL:
        assert iv.flip().flip() == iv
        assert iv.close_left().close_right() == CLOSED
        assert iv.open_left().open_right() == OPEN
        assert iv.close_left().close_left() == iv.close_left()
        assert iv.flip().close_left() == iv.close_right().flip()

        if iv.left is Boundary.OPEN:
            assert iv.close_left().open_left() == iv

    for left, right in itertools.product(Boundary, repeat=2):
        iv = Interval(left, right)
        assert iv.is_closed() == (iv == CLOSED)
        assert iv.is_open() != iv.is_closed()


def test_of():
    assert Interval.of("open") == OPEN
    assert Interval.of("closed") == CLOSED
    assert Interval.of("closed-open") == CLOSED_OPEN
    assert Interval.of("open-closed") == OPEN_CLOSED
    assert Interval.of(CLOSED) is CLOSED

    with pytest.raises(ValueError):
        Interval.of("half-open")

    with pytest.raises(TypeError):
        Interval.of(1)


def test_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        OPEN.left = Boundary.CLOSED

    assert repr(CLOSED_OPEN) == "Interval(CLOSED, OPEN)"
