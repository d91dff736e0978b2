import dataclasses
import logging
import math
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, Final, Literal, Protocol, Self

from quadra.aggregate import ksum
from quadra.interval import OPEN, Interval
from quadra.sequence import SQRT_MACHINE_EPSILON, ConvergenceResult, seq_limit

logger = logging.getLogger(__name__)

ROUNDOFF_CUTOFF: Final = 1e-14
INFINITE_BREAKPOINT: Final = 1.0
ADAPTIVE_MAXTERMS: Final = 10
NEIGHBORHOOD_WIDTH: Final = 0.05
ADAPTIVE_MAX_ITERATIONS: Final = 10000


@dataclasses.dataclass(frozen=True, slots=True)
class Options:
    """Configuration threaded through every integrator.

    Instances are immutable. Use :meth:`replace` or :func:`options` to derive new
    ones.

    Attributes
    ----------
    interval : Interval, default=OPEN
        Openness of the endpoints. Names accepted by :meth:`Interval.of` are converted.
    tolerance : float, default=sqrt(eps)
        Convergence tolerance given to :func:`quadra.sequence.seq_limit`.
    minterms : int, default=2
        Minimum number of estimates examined.
    maxterms : int | None, default=None
        Maximum number of estimates examined. ``None`` means unbounded, except inside
        :func:`quadra.integrate.adaptive`, which uses `adaptive_maxterms` instead.
    n : int | tuple[int, ...], default=1
        Initial number of slices, refined geometrically, or an explicit increasing
        sequence of slice counts.
    accelerate : bool, default=False
        Whether to apply Richardson extrapolation to geometric estimate sequences.
    adaptive_maxterms : int, default=10
        `maxterms` of each probe of an adaptive integrator.
    adaptive_neighborhood_width : float, default=0.05
        Adaptive split points are drawn uniformly from a neighborhood of the
        midpoint with this width relative to the piece. ``0`` splits at the
        midpoint.
    adaptive_max_iterations : int, default=10000
        Number of pieces an adaptive integrator processes before it stops splitting.
    seed : int | None, default=None
        Seed of the random generator used for adaptive split points.
    infinite_breakpoint : float, default=1.0
        Magnitude beyond which an infinite tail is substituted.
    roundoff_cutoff : float, default=1e-14
        Relative width below which a range is integrated with a single slice.
    bs_extrapolator : Literal["polynomial", "rational"], default="rational"
        Extrapolation used by the Bulirsch-Stoer integrators.
    """

    interval: Interval = OPEN
    tolerance: float = SQRT_MACHINE_EPSILON
    minterms: int = 2
    maxterms: int | None = None
    n: int | tuple[int, ...] = 1
    accelerate: bool = False
    adaptive_maxterms: int = ADAPTIVE_MAXTERMS
    adaptive_neighborhood_width: float = NEIGHBORHOOD_WIDTH
    adaptive_max_iterations: int = ADAPTIVE_MAX_ITERATIONS
    seed: int | None = None
    infinite_breakpoint: float = INFINITE_BREAKPOINT
    roundoff_cutoff: float = ROUNDOFF_CUTOFF
    bs_extrapolator: Literal["polynomial", "rational"] = "rational"

    def __post_init__(self):
        object.__setattr__(self, "interval", Interval.of(self.interval))

        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance!r}")

        if self.minterms < 1:
            raise ValueError(f"minterms must be positive, got {self.minterms!r}")

        if self.maxterms is not None and self.maxterms < 1:
            raise ValueError(f"maxterms must be positive, got {self.maxterms!r}")

        match self.n:
            case bool():
                raise TypeError

            case int(n):
                if n < 1:
                    raise ValueError(f"n must be positive, got {n!r}")

            case Sequence():
                ns = tuple(self.n)

                if not ns or not all(isinstance(x, int) and x >= 1 for x in ns):
                    raise ValueError(f"invalid slice counts: {self.n!r}")

                if any(x >= y for x, y in zip(ns, ns[1:])):
                    raise ValueError(f"slice counts must increase: {self.n!r}")

                object.__setattr__(self, "n", ns)

            case _:
                raise TypeError

        if self.adaptive_maxterms < 1:
            raise ValueError

        if not 0 <= self.adaptive_neighborhood_width < 1:
            raise ValueError(
                "adaptive_neighborhood_width must be in [0, 1), "
                f"got {self.adaptive_neighborhood_width!r}"
            )

        if self.adaptive_max_iterations < 1:
            raise ValueError

        if not self.infinite_breakpoint > 0:
            raise ValueError

        if not self.roundoff_cutoff >= 0:
            raise ValueError

        if self.bs_extrapolator not in ("polynomial", "rational"):
            raise ValueError(f"unknown extrapolator: {self.bs_extrapolator!r}")

    def replace(self, **changes: Any) -> Self:
        """Return a copy with the fields in `changes` replaced."""
        return dataclasses.replace(self, **changes)


def options(opts: Options | Mapping[str, Any] | None = None, /, **overrides) -> Options:
    """Merge `overrides` into `opts`.

    Parameters
    ----------
    opts : Options | Mapping, optional
        Base configuration. A mapping is interpreted as keyword arguments of
        :class:`Options`.
    **overrides
        Fields taking precedence over `opts`.

    Raises
    ------
    TypeError
        If an unknown field is given.

    Examples
    --------
    >>> opts = options({"tolerance": 1e-6}, n=4)
    >>> opts.tolerance, opts.n
    (1e-06, 4)
    """
    match opts:
        case None:
            return Options(**overrides)

        case Options():
            return opts.replace(**overrides) if overrides else opts

        case Mapping():
            return Options(**{**opts, **overrides})

        case _:
            raise TypeError


class Integrator(Protocol):
    """Calling convention shared by every integrator.

    An integrator is called as ``integrator(fun, a, b)`` or
    ``integrator(fun, a, b, opts, **overrides)`` and returns a
    :class:`~quadra.sequence.ConvergenceResult`.
    """

    def __call__(
        self,
        fun: Callable[[Any], Any],
        a: Any,
        b: Any,
        opts: Options | Mapping[str, Any] | None = None,
        /,
        **overrides: Any,
    ) -> ConvergenceResult: ...


def isinfinite(x: Any) -> bool:
    return x == math.inf or x == -math.inf


def narrow_slice(a: Any, b: Any, cutoff: float = ROUNDOFF_CUTOFF) -> bool:
    """Return ``True`` if `a` and `b` coincide up to `cutoff` relative to their
    magnitudes.

    Examples
    --------
    >>> narrow_slice(5.0, 5.0 + 1e-16)
    True
    >>> narrow_slice(0.0, 1e-3)
    False
    """
    return abs(b - a) <= cutoff * (abs(a) + abs(b))


def windowed_sum(
    area_fn: Callable[[Any, Any], Any], a: Any, b: Any
) -> Callable[[int], Any]:
    """Return a function summing `area_fn` over ``n`` equal slices of ``[a, b]``.

    Slice areas are added with compensated summation.
    """

    def result(n: int):
        h = (b - a) / n
        return ksum(area_fn(a + i * h, a + (i + 1) * h) for i in range(n))

    return result


def make_integrator(
    area_fn: Callable[[Callable, Any, Any], Any],
    sequence_fn: Callable[[Callable, Any, Any, Options], Iterator[Any]],
) -> Integrator:
    """Build an integrator from a single-slice rule and an estimate sequence.

    Parameters
    ----------
    area_fn : Callable
        ``area_fn(fun, a, b)`` estimates the integral with a single slice. It is used
        when ``[a, b]`` is too narrow to be refined (see :func:`narrow_slice`).
    sequence_fn : Callable
        ``sequence_fn(fun, a, b, opts)`` returns a lazy sequence of increasingly
        refined estimates.

    Returns
    -------
    Integrator
        Function that feeds the estimates to :func:`~quadra.sequence.seq_limit`.
    """

    def integrator(fun, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        if isinfinite(a) or isinfinite(b):
            raise ValueError(f"infinite endpoint in [{a!r}, {b!r}]; use improper()")

        if narrow_slice(a, b, opts.roundoff_cutoff):
            logger.debug("integrating narrow slice [%r, %r]", a, b)
            return ConvergenceResult(True, 1, area_fn(fun, a, b))

        return seq_limit(
            sequence_fn(fun, a, b, opts),
            tolerance=opts.tolerance,
            minterms=opts.minterms,
            maxterms=opts.maxterms,
        )

    return integrator
