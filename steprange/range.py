import logging
import math
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Callable

from typing_extensions import override

from steprange.mathx import (
    Number,
    as_number,
    get_precision,
    modulo,
    normalize_step,
    round_half_up,
    to_fixed,
)
from steprange.util import (
    DEFAULT_PRECISION,
    DEFAULT_STEP,
    MAX_LENGTH,
    MAX_PRECISION,
    SLICE_STEP_PRECISION,
)

logger = logging.getLogger(__name__)


def _walk(first: Number, last: Number, step: Number, precision: int) -> Iterator[Number]:
    """Yield first..last inclusive, moving towards last by step.

    Stops at ``last`` when the step is below float resolution there, and
    raises OverflowError when it stalls short of ``last``.
    """
    ascending = first <= last
    value = first
    while (value <= last) if ascending else (value >= last):
        yield value
        following = to_fixed(value + step if ascending else value - step, precision)
        if following == value:
            if value == last:
                return
            raise OverflowError(
                f"Cannot step from {value!r} towards {last!r}: a step of {step!r} "
                f"is below float resolution at this magnitude.\n"
                f"Hint: Use a step larger than math.ulp({value!r}) = "
                f"{math.ulp(value)!r}"
            )
        value = following


def _check_length(length: int | float) -> None:
    if length > MAX_LENGTH:
        raise OverflowError(
            f"Cannot iterate infinite size range: {length} values exceed the "
            f"limit of {MAX_LENGTH}.\n"
            f"Hint: Use a larger step, or query the range without walking it:\n"
            f"  r.has(x), r.clamp(x), r.get_fraction(x), r.mod(x)"
        )


def _divide(numerator: Number, denominator: Number) -> float:
    """IEEE 754 division: a zero denominator gives NaN or a signed infinity."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _output_precision(precision: Any) -> int | None:
    digits = as_number(precision)
    if math.isnan(digits) or digits < 0:
        return None
    return int(min(digits, MAX_PRECISION))


@dataclass(frozen=True, init=False)
class Range(Collection[Number]):
    """Inclusive numeric range walked by a positive step.

    ``Range(n)`` covers ``0..n``, ``Range(a, b)`` covers ``a..b``. When
    ``start > end`` the range walks downwards; the step is always positive.
    Missing or non-numeric bounds give the empty range, whose ``start``,
    ``end`` and ``step`` are all ``None``.

    Example:
        >>> list(Range(0, 1, 0.25))
        [0, 0.25, 0.5, 0.75, 1.0]
        >>> Range(3, -7).center
        -2.0
    """

    start: Number | None
    end: Number | None
    step: Number | None

    def __init__(self, low: Any = None, high: Any = None, step: Any = DEFAULT_STEP):
        if high is None:
            start, end = 0, as_number(low)
        elif low is None:
            start, end = 0, as_number(high)
        else:
            start, end = as_number(low), as_number(high)

        if math.isnan(start) or math.isnan(end):
            if low is not None or high is not None:
                logger.debug(
                    "Non-numeric bounds (%r, %r), building an empty range", low, high
                )
            object.__setattr__(self, "start", None)
            object.__setattr__(self, "end", None)
            object.__setattr__(self, "step", None)
            return

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "step", normalize_step(step))

    @classmethod
    def empty(cls) -> "Range":
        return cls()

    @classmethod
    def from_iterable(cls, numbers: Any) -> "Range":
        """Build a range spanning the smallest and largest of ``numbers``.

        Only the extremes matter, so ordering is not preserved. ``None``,
        non-iterables, empty collections and collections holding
        non-numeric items all give the empty range.

        Example:
            >>> Range.from_iterable([7, 6, 5, 42, 16, 9])
            Range(start=5, end=42, step=1)
        """
        if numbers is None or not isinstance(numbers, Iterable):
            return cls()

        values = [as_number(number) for number in numbers]
        if not values:
            return cls()
        if any(math.isnan(value) for value in values):
            logger.debug("Non-numeric items in %r, building an empty range", numbers)
            return cls()

        return cls(min(values), max(values))

    def _bounds(self) -> tuple[Number, Number, Number] | None:
        """Return (min, max, step), or None for the empty range."""
        if self.start is None or self.end is None or self.step is None:
            return None
        if self.start <= self.end:
            return self.start, self.end, self.step
        return self.end, self.start, self.step

    def _count(self, step: Number) -> int | float:
        if self.start is None or self.end is None:
            return 0
        span = abs(self.end - self.start) / step
        if not math.isfinite(span):
            return math.inf
        return round_half_up(span) + 1

    def _traverse(self, step: Number | None, reverse: bool = False) -> Iterator[Number]:
        """Check the size guard, then return a lazy walk over the range."""
        if self.start is None or self.end is None or step is None:
            return iter(())

        _check_length(self._count(step))
        first, last = (self.end, self.start) if reverse else (self.start, self.end)
        precision = max(get_precision(step), get_precision(first), get_precision(last))
        return _walk(first, last, step, precision)

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def length(self) -> int | float:
        """Number of values the range produces, ``math.inf`` when unbounded."""
        if self.step is None:
            return 0
        return self._count(self.step)

    @property
    def min(self) -> Number | None:
        bounds = self._bounds()
        return None if bounds is None else bounds[0]

    @property
    def max(self) -> Number | None:
        bounds = self._bounds()
        return None if bounds is None else bounds[1]

    @property
    def center(self) -> Number | None:
        bounds = self._bounds()
        if bounds is None:
            return None
        low, high, _ = bounds
        return low + (high - low) / 2

    @override
    def __iter__(self) -> Iterator[Number]:
        return self._traverse(self.step)

    def __reversed__(self) -> Iterator[Number]:
        return self._traverse(self.step, reverse=True)

    @override
    def __len__(self) -> int:
        length = self.length
        if math.isinf(length):
            raise OverflowError(
                f"{self} has infinite length.\n"
                f"Hint: Read r.length instead of len(r) for unbounded ranges"
            )
        return int(length)

    @override
    def __contains__(self, value: object) -> bool:
        return self.has(value)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __str__(self) -> str:
        """Human-friendly string showing bounds and step."""
        if self.is_empty:
            return "Range(empty)"
        return f"Range({self.start}→{self.end}, step {self.step})"

    def for_each(
        self, fn: Callable[[Number, int, "Range"], Any], step: Any = None
    ) -> None:
        """Call ``fn(value, index, range)`` for every value from start to end.

        ``step`` overrides the range's own step for this walk. The size guard
        and decimal rounding use the step actually walked.
        """
        walk_step = normalize_step(self.step if step is None else step)
        for index, value in enumerate(self._traverse(walk_step)):
            fn(value, index, self)

    def for_each_reverse(
        self, fn: Callable[[Number, int, "Range"], Any], step: Any = None
    ) -> None:
        """Like for_each(), walking from end back to start."""
        walk_step = normalize_step(self.step if step is None else step)
        for index, value in enumerate(self._traverse(walk_step, reverse=True)):
            fn(value, index, self)

    def to_list(self) -> list[Number]:
        return list(self)

    def has(self, number: Any) -> bool:
        """True if ``number`` lies within [min, max], whatever the step."""
        bounds = self._bounds()
        if bounds is None:
            return False
        value = as_number(number)
        return bounds[0] <= value <= bounds[1]

    def clamp(self, number: Any) -> Number:
        """Pull ``number`` into [min, max].

        Example:
            >>> Range(100).clamp(120)
            100
            >>> Range(100).clamp(-math.inf)
            0
        """
        value = as_number(number)
        bounds = self._bounds()
        if bounds is None:
            return value
        low, high, _ = bounds
        if value < low:
            return low
        if value > high:
            return high
        return value

    def mod(self, number: Any) -> Number:
        """Wrap ``number`` around the range, like an angle around a circle.

        Example:
            >>> Range(0, 9).mod(-2)
            8
            >>> Range(0, 9).mod(23)
            3
        """
        bounds = self._bounds()
        if bounds is None:
            return math.nan
        low, high, _ = bounds
        return low + modulo(as_number(number), high - low + 1)

    def get_fraction(self, number: Any, precision: Any = DEFAULT_PRECISION) -> Number:
        """Position of ``number`` relative to the range, 0 at min and 1 at max.

        Values outside the range extrapolate:

        Example:
            >>> r = Range(-100, 100)
            >>> r.get_fraction(0)
            0.5
            >>> r.get_fraction(-150)
            -0.25
            >>> r.get_fraction(400)
            2.5
        """
        digits = _output_precision(precision)
        bounds = self._bounds()
        if digits is None or bounds is None:
            return math.nan
        low, high, _ = bounds
        return to_fixed(_divide(as_number(number) - low, high - low), digits)

    def from_fraction(self, fraction: Any, precision: Any = DEFAULT_PRECISION) -> Number:
        """Inverse of get_fraction(): the number at ``fraction`` of the range."""
        digits = _output_precision(precision)
        bounds = self._bounds()
        if digits is None or bounds is None:
            return math.nan
        low, high, _ = bounds
        return to_fixed(low + as_number(fraction) * (high - low), digits)

    def slice(self, parts: Any) -> list[Number]:
        """Split the range into ``parts`` equal slices and return their starts.

        Example:
            >>> Range(359).slice(6)
            [0, 60.0, 120.0, 180.0, 240.0, 300.0]
        """
        count = as_number(parts)
        bounds = self._bounds()
        if not count or math.isnan(count) or bounds is None:
            return []
        if count < 0:
            raise ValueError(
                f"Cannot slice a range into {parts!r} parts.\n"
                f"Hint: Pass a positive number of parts: r.slice(4)"
            )

        low, high, step = bounds
        slice_step = to_fixed((high - low + step) / count, SLICE_STEP_PRECISION)
        boundaries: list[Number] = []
        Range(low, high).for_each(
            lambda value, _index, _range: boundaries.append(value), slice_step
        )
        return boundaries
