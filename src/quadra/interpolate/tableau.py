import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator


class TableauError(ArithmeticError):
    """Base class of numerical degeneracies met while building a tableau."""


class DegenerateAbscissaError(TableauError):
    """Raised when two points of a tableau share the same abscissa."""


class RationalPoleError(TableauError):
    """Raised when a rational extrapolant has a pole at the target abscissa."""


def tableau_columns[P, C](
    points: Iterable[P], prepare: Callable[[P], C], merge: Callable[[C, C], C]
) -> Iterator[Iterator[C]]:
    """Yield the columns of a triangular tableau.

    Column 0 is ``map(prepare, points)``, and each element of column ``k + 1`` merges
    two neighbors of column ``k``. Columns are lazy: the first element of column ``k``
    consumes exactly ``k + 1`` points, so `points` may be infinite. For finite
    `points`, the generator stops after the column with a single element.

    Parameters
    ----------
    points : Iterable
    prepare : Callable
        Converts a point into a cell of column 0.
    merge : Callable
        Combines the left and right neighbors of one column into a cell of the next.

    Returns
    -------
    Iterator[Iterator]
        Columns of the tableau.
    """
    column = map(prepare, points)

    while True:
        for head in column:
            break
        else:
            return

        this, rest = itertools.tee(itertools.chain((head,), column))
        yield this
        column = itertools.starmap(merge, itertools.pairwise(rest))


def first_terms[C](columns: Iterable[Iterator[C]]) -> Iterator[C]:
    """Yield the first cell of each column, i.e. the top diagonal of a tableau."""
    for column in columns:
        yield next(column)


class Fold[S, P, R](ABC):
    """Incremental reduction over a sequence of points.

    A fold consumes one point at a time and can present an estimate after each one,
    which makes it suitable for sequences whose length is not known in advance.
    """

    __slots__ = ()

    @abstractmethod
    def init(self) -> S:
        """Return the initial accumulator."""
        raise NotImplementedError

    @abstractmethod
    def step(self, acc: S, point: P) -> S:
        """Return the accumulator after absorbing `point`."""
        raise NotImplementedError

    @abstractmethod
    def present(self, acc: S) -> R:
        """Return the estimate represented by `acc`."""
        raise NotImplementedError

    def reduce(self, points: Iterable[P]) -> R:
        """Return the estimate after absorbing all `points`."""
        acc = self.init()

        for point in points:
            acc = self.step(acc, point)

        return self.present(acc)

    def scan(self, points: Iterable[P]) -> Iterator[R]:
        """Yield the estimate after absorbing each point of `points`."""
        acc = self.init()

        for point in points:
            acc = self.step(acc, point)
            yield self.present(acc)


class TableauFold[P, C, R](Fold[list[C], P, R]):
    """Fold that keeps only the newest row of a tableau.

    After ``n`` points the accumulator holds ``n`` cells, where cell ``k`` combines
    the ``k + 1`` newest points. Memory thus grows with the number of points, not with
    its square.

    Parameters
    ----------
    prepare : Callable
        Converts a point into a cell.
    merge : Callable
        Combines an older (left) and a newer (right) cell.
    present : Callable
        Maps the newest row to an estimate.
    """

    __slots__ = ("_prepare", "_merge", "_present")
    _prepare: Callable[[P], C]
    _merge: Callable[[C, C], C]
    _present: Callable[[list[C]], R]

    def __init__(
        self,
        prepare: Callable[[P], C],
        merge: Callable[[C, C], C],
        present: Callable[[list[C]], R],
    ):
        self._prepare = prepare
        self._merge = merge
        self._present = present

    def init(self) -> list[C]:
        return []

    def step(self, acc: list[C], point: P) -> list[C]:
        row = [self._prepare(point)]

        for cell in acc:
            row.append(self._merge(cell, row[-1]))

        return row

    def present(self, acc: list[C]) -> R:
        return self._present(acc)
