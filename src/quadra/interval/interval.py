import dataclasses
import enum
from typing import Final, Self


class Boundary(enum.Enum):
    """Kind of an endpoint of the integration range.

    Attributes
    ----------
    OPEN
        The endpoint is excluded and the integrand is never evaluated there.
    CLOSED
        The endpoint is included.
    """

    OPEN = enum.auto()
    CLOSED = enum.auto()

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"


@dataclasses.dataclass(frozen=True, slots=True)
class Interval:
    """Openness of both endpoints of an integration range.

    The two kinds are independent, so all four combinations are meaningful. Every
    transform returns a new instance.

    Attributes
    ----------
    left : Boundary
    right : Boundary

    Examples
    --------
    >>> iv = Interval(Boundary.OPEN, Boundary.CLOSED)
    >>> iv.flip() == CLOSED_OPEN
    True
    >>> iv.close_left().is_closed()
    True
    """

    left: Boundary
    right: Boundary

    @classmethod
    def of(cls, value: Self | str) -> Self:
        """Coerce `value` to an interval.

        Parameters
        ----------
        value : Interval | str
            Either an interval or one of ``"open"``, ``"closed"``, ``"closed-open"``,
            and ``"open-closed"``.

        Raises
        ------
        ValueError
            If `value` is an unknown name.
        """
        if isinstance(value, cls):
            return value

        match value:
            case "open":
                return cls(Boundary.OPEN, Boundary.OPEN)

            case "closed":
                return cls(Boundary.CLOSED, Boundary.CLOSED)

            case "closed-open":
                return cls(Boundary.CLOSED, Boundary.OPEN)

            case "open-closed":
                return cls(Boundary.OPEN, Boundary.CLOSED)

            case str():
                raise ValueError(f"unknown interval: {value!r}")

            case _:
                raise TypeError

    def close_left(self) -> Self:
        return dataclasses.replace(self, left=Boundary.CLOSED)

    def close_right(self) -> Self:
        return dataclasses.replace(self, right=Boundary.CLOSED)

    def open_left(self) -> Self:
        return dataclasses.replace(self, left=Boundary.OPEN)

    def open_right(self) -> Self:
        return dataclasses.replace(self, right=Boundary.OPEN)

    def flip(self) -> Self:
        """Swap the kinds of the endpoints, as required when the bounds are reversed."""
        return self.__class__(self.right, self.left)

    def is_closed(self) -> bool:
        """Return ``True`` if and only if both endpoints are closed."""
        return self.left is Boundary.CLOSED and self.right is Boundary.CLOSED

    def is_open(self) -> bool:
        """Return ``True`` if and only if at least one endpoint is open."""
        return not self.is_closed()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.left.name}, {self.right.name})"


OPEN: Final = Interval(Boundary.OPEN, Boundary.OPEN)
CLOSED: Final = Interval(Boundary.CLOSED, Boundary.CLOSED)
CLOSED_OPEN: Final = Interval(Boundary.CLOSED, Boundary.OPEN)
OPEN_CLOSED: Final = Interval(Boundary.OPEN, Boundary.CLOSED)
