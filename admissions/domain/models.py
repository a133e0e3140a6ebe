"""Domain models for pricing data, ticket requests and receipts.

These are pure domain objects with no input-format rules.
Request parsing lives in admissions/handlers/serializers.py.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from admissions.domain.value_objects import (
    EntrantCategory,
    Money,
    capitalize_first,
    format_dollars,
)

EXTRAS_KEY = "extras"
PRICES_KEY = "priceInCents"


@dataclass(frozen=True)
class PriceSchedule:
    """Prices for each entrant category."""

    child: Money
    adult: Money
    senior: Money

    @classmethod
    def from_cents(cls, prices: Mapping[str, int]) -> Self:
        return cls(
            child=Money(prices[EntrantCategory.CHILD.value]),
            adult=Money(prices[EntrantCategory.ADULT.value]),
            senior=Money(prices[EntrantCategory.SENIOR.value]),
        )

    def price_for(self, entrant: EntrantCategory) -> Money:
        return getattr(self, entrant.value)


@dataclass(frozen=True)
class TicketCategory:
    """Domain representation of an admission type, e.g. general or membership."""

    name: str
    prices: PriceSchedule
    description: str = ""


@dataclass(frozen=True)
class AddOn:
    """Domain representation of an optional extra, e.g. movie or terrace access."""

    name: str
    prices: PriceSchedule
    description: str = ""


@dataclass(frozen=True)
class PricingTable:
    """Full rate schedule: ticket categories plus add-ons, keyed by name."""

    ticket_categories: Mapping[str, TicketCategory]
    add_ons: Mapping[str, AddOn] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if EXTRAS_KEY in self.ticket_categories:
            raise ValueError(f"'{EXTRAS_KEY}' is reserved and cannot be a ticket category")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build a table from the nested `{"<name>": {"priceInCents": {...}}}` shape.

        The `extras` entry holds the add-ons in the same shape; every other
        top-level key is a ticket category.
        """
        ticket_categories = {
            name: TicketCategory(
                name=name,
                prices=PriceSchedule.from_cents(entry[PRICES_KEY]),
                description=entry.get("description", ""),
            )
            for name, entry in data.items()
            if name != EXTRAS_KEY
        }
        add_ons = {
            name: AddOn(
                name=name,
                prices=PriceSchedule.from_cents(entry[PRICES_KEY]),
                description=entry.get("description", ""),
            )
            for name, entry in data.get(EXTRAS_KEY, {}).items()
        }
        return cls(ticket_categories=ticket_categories, add_ons=add_ons)

    def get_ticket_category(self, name: str) -> TicketCategory | None:
        """Return the ticket category called `name`, or None if not found."""
        return self.ticket_categories.get(name)

    def get_add_on(self, name: str) -> AddOn | None:
        """Return the add-on called `name`, or None if not found."""
        return self.add_ons.get(name)


@dataclass(frozen=True)
class TicketRequest:
    """A single ticket a visitor wants to buy."""

    ticket_category: str
    entrant_category: str
    add_ons: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReceiptLine:
    """One priced ticket on a receipt."""

    request: TicketRequest
    price: Money

    def describe(self, currency_symbol: str = "$") -> str:
        line = (
            f"{capitalize_first(self.request.entrant_category)} "
            f"{capitalize_first(self.request.ticket_category)} Admission: "
            f"{format_dollars(self.price.cents, currency_symbol)}"
        )
        if self.request.add_ons:
            access = ", ".join(f"{capitalize_first(name)} Access" for name in self.request.add_ons)
            line += f" ({access})"
        return line


@dataclass(frozen=True)
class Receipt:
    """Priced purchase, ready to render."""

    header: str
    lines: tuple[ReceiptLine, ...] = ()
    currency_symbol: str = "$"

    @property
    def total(self) -> Money:
        return sum((line.price for line in self.lines), Money.zero())

    @property
    def separator(self) -> str:
        return "-" * len(self.header)

    def render(self) -> str:
        rows = [self.header, self.separator]
        rows.extend(line.describe(self.currency_symbol) for line in self.lines)
        rows.append(self.separator)
        rows.append(f"TOTAL: {format_dollars(self.total.cents, self.currency_symbol)}")
        return "\n".join(rows)
