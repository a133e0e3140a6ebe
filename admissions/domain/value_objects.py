"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

CENTS_PER_DOLLAR = Decimal(100)
TWO_PLACES = Decimal("0.01")


class EntrantCategory(Enum):
    """Age-based visitor class."""

    CHILD = "child"
    ADULT = "adult"
    SENIOR = "senior"

    @classmethod
    def from_name(cls, name: str) -> Self | None:
        """Return the category called `name`, or None if there is none."""
        for member in cls:
            if member.value == name:
                return member
        return None


@dataclass(frozen=True)
class Money:
    """Price representation in integer cents."""

    cents: int

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError("Money amount cannot be negative")
        if self.cents != int(self.cents):
            raise ValueError("Money amount must be whole cents")

    @classmethod
    def zero(cls) -> Self:
        return cls(cents=0)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __radd__(self, other: object) -> "Money":
        # sum() starts from the int 0
        if other == 0:
            return self
        return NotImplemented

    def __str__(self) -> str:
        return f"{to_dollars(self.cents):.2f}"


def to_dollars(cents: int | Decimal) -> Decimal:
    """Convert cents to dollars, rounded half-up to two decimal places."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_dollars(cents: int | Decimal, symbol: str = "$") -> str:
    return f"{symbol}{to_dollars(cents):.2f}"


def capitalize_first(name: str) -> str:
    """Uppercase the first character only; the rest is left as-is."""
    return name[:1].upper() + name[1:]
