from collections.abc import Callable, Iterator

from quadra.aggregate import ksum
from quadra.integrate.common import Options, make_integrator, options, windowed_sum
from quadra.interpolate.richardson import richardson_sequence
from quadra.sequence import powers


def left_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the left Riemann sum with ``n`` slices."""
    return windowed_sum(lambda l, r: fun(l) * (r - l), a, b)


def right_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the right Riemann sum with ``n`` slices."""
    return windowed_sum(lambda l, r: fun(r) * (r - l), a, b)


def upper_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the upper Riemann sum with ``n`` slices.

    The height of each slice is the larger of the values at its endpoints, which is
    an upper bound for monotone integrands only.
    """
    return windowed_sum(lambda l, r: max(fun(l), fun(r)) * (r - l), a, b)


def lower_sum(fun: Callable, a, b) -> Callable[[int], float]:
    """Return a function of ``n`` evaluating the lower Riemann sum with ``n`` slices."""
    return windowed_sum(lambda l, r: min(fun(l), fun(r)) * (r - l), a, b)


def _doubling(sum_fn: Callable, fun: Callable, a, b, n: int) -> Iterator:
    # Doubling the slice count adds exactly the midpoints of the current slices to
    # both the left and the right sums.
    h = (b - a) / n
    estimate = sum_fn(fun, a, b)(n)

    while True:
        yield estimate
        midpoints = ksum(fun(a + (i + 0.5) * h) for i in range(n))
        estimate = estimate / 2 + midpoints * h / 2
        n *= 2
        h /= 2


def _sequence(
    sum_fn: Callable, incremental: bool
) -> Callable[[Callable, object, object, Options], Iterator]:
    def sequence(fun, a, b, opts=None, /, **overrides):
        opts = options(opts, **overrides)

        match opts.n:
            case int(n) if incremental:
                xs = _doubling(sum_fn, fun, a, b, n)

                if opts.accelerate:
                    xs = richardson_sequence(xs, 2, 1, 1)

                return xs

            case int(n):
                if opts.accelerate:
                    raise ValueError("upper and lower sums cannot be accelerated")

                return map(sum_fn(fun, a, b), powers(2, n))

            case ns:
                if opts.accelerate:
                    raise ValueError("accelerate requires a geometric n")

                return map(sum_fn(fun, a, b), ns)

    return sequence


left_sequence = _sequence(left_sum, True)
right_sequence = _sequence(right_sum, True)
upper_sequence = _sequence(upper_sum, False)
lower_sequence = _sequence(lower_sum, False)

left_integral = make_integrator(lambda fun, a, b: fun(a) * (b - a), left_sequence)
right_integral = make_integrator(lambda fun, a, b: fun(b) * (b - a), right_sequence)
upper_integral = make_integrator(
    lambda fun, a, b: max(fun(a), fun(b)) * (b - a), upper_sequence
)
lower_integral = make_integrator(
    lambda fun, a, b: min(fun(a), fun(b)) * (b - a), lower_sequence
)
