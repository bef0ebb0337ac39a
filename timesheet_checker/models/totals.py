"""Minute-count buckets used by the weekly aggregation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeekBucket:
    """Minute totals for one week (or overall).

    Buckets are immutable; combining two buckets returns a new one.

    Attributes:
        basic: Basic minutes
        ot15: Overtime minutes at 1.5x
        ot20: Overtime minutes at 2.0x

    Example:
        >>> WeekBucket(480, 60, 0) + WeekBucket(450, 0, 30)
        WeekBucket(basic=930, ot15=60, ot20=30)
    """

    basic: int = 0
    ot15: int = 0
    ot20: int = 0

    @property
    def total(self) -> int:
        """Sum of all three buckets in minutes."""
        return self.basic + self.ot15 + self.ot20

    def __add__(self, other: "WeekBucket") -> "WeekBucket":
        if not isinstance(other, WeekBucket):
            return NotImplemented
        return WeekBucket(
            basic=self.basic + other.basic,
            ot15=self.ot15 + other.ot15,
            ot20=self.ot20 + other.ot20,
        )
