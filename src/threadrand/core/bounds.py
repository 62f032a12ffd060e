from dataclasses import dataclass
from numbers import Integral
from typing import Optional, Union

from .types import IntKind


@dataclass(frozen=True)
class Bounds:
    """Lower and upper bound of an integer range.

    A side set to None is unbounded and resolves to the smallest or largest
    value of the integer width being sampled.
    """

    start: Optional[int] = None
    """Lower bound, or None for unbounded"""
    end: Optional[int] = None
    """Upper bound, or None for unbounded"""
    start_inclusive: bool = True
    """Whether `start` itself belongs to the range"""
    end_inclusive: bool = False
    """Whether `end` itself belongs to the range"""

    @classmethod
    def closed(cls, start: int, end: int) -> "Bounds":
        """`start..=end`"""
        return cls(start, end, end_inclusive=True)

    @classmethod
    def half_open(cls, start: int, end: int) -> "Bounds":
        """`start..end`"""
        return cls(start, end)

    @classmethod
    def at_least(cls, start: int) -> "Bounds":
        """`start..`"""
        return cls(start, None)

    @classmethod
    def below(cls, end: int) -> "Bounds":
        """`..end`"""
        return cls(None, end)

    @classmethod
    def up_to(cls, end: int) -> "Bounds":
        """`..=end`"""
        return cls(None, end, end_inclusive=True)

    @classmethod
    def full(cls) -> "Bounds":
        """`..`"""
        return cls()

    def resolve(self, kind: IntKind) -> tuple[int, int]:
        """Resolve to the inclusive (low, high) pair for the given width.

        Raises:
            TypeError: a bound is not an integer
            ValueError: a bound is outside the width, or the range is empty
        """
        for bound in (self.start, self.end):
            if bound is None:
                continue
            if isinstance(bound, bool) or not isinstance(bound, Integral):
                raise TypeError(f"{kind.name} range bound must be an integer, got {bound!r}")

        if self.start is None:
            low = kind.min
        else:
            low = int(self.start) if self.start_inclusive else int(self.start) + 1
        if self.end is None:
            high = kind.max
        else:
            high = int(self.end) if self.end_inclusive else int(self.end) - 1

        if low > high:
            raise ValueError(f"empty range: {self}")
        # Exclusive bounds may sit one past the width, e.g. range(256) for u8.
        if low < kind.min or high > kind.max:
            raise ValueError(
                f"range {self} outside {kind.name} [{kind.min}, {kind.max}]"
            )
        return low, high

    def __str__(self):
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        if not self.start_inclusive and self.start is not None:
            start = f"({start}"
        dots = "..=" if self.end_inclusive and self.end is not None else ".."
        return f"{start}{dots}{end}"


RangeLike = Union[Bounds, range, slice, None, type(Ellipsis)]


def coerce_bounds(spec: RangeLike) -> Bounds:
    """Turn any accepted range specification into a Bounds.

    `range(a, b)` and `slice(a, b)` are half-open, `None` and `...` are the
    full range of the width.
    """
    if isinstance(spec, Bounds):
        return spec
    if spec is None or spec is Ellipsis:
        return Bounds.full()
    if isinstance(spec, range):
        if spec.step != 1:
            raise ValueError(f"range step must be 1, got {spec!r}")
        return Bounds.half_open(spec.start, spec.stop)
    if isinstance(spec, slice):
        if spec.step is not None:
            raise ValueError(f"slice step is not supported, got {spec!r}")
        return Bounds(spec.start, spec.stop)
    raise TypeError(f"Unsupported range specification: {spec!r}")
