"""Price Calculator: validates a ticket request and sums its prices.

Checks run in a fixed order and the first failure wins:
ticket category, then entrant category, then each add-on in list order.
"""

from collections.abc import Iterable

import structlog

from admissions.domain import (
    AddOn,
    AddOnNotFoundError,
    EntrantCategory,
    EntrantCategoryNotFoundError,
    Err,
    Money,
    Ok,
    PricingTable,
    ReferenceNotFoundError,
    Result,
    TicketCategoryNotFoundError,
    TicketRequest,
)

logger = structlog.get_logger(__name__)


def _resolve_add_ons(pricing_table: PricingTable, names: Iterable[str]) -> list[AddOn] | AddOnNotFoundError:
    add_ons: list[AddOn] = []
    for name in names:
        add_on = pricing_table.get_add_on(name)
        if add_on is None:
            return AddOnNotFoundError(name)
        add_ons.append(add_on)
    return add_ons


def _rejected(request: TicketRequest, error: ReferenceNotFoundError) -> Err:
    logger.info(
        "Ticket request rejected",
        ticket_category=request.ticket_category,
        entrant_category=request.entrant_category,
        add_ons=list(request.add_ons),
        error_code=error.code.value,
    )
    return Err(error)


def calculate_price(pricing_table: PricingTable, request: TicketRequest) -> Result[Money]:
    """Return the price of one ticket, or the first reference that cannot be found."""
    ticket_category = pricing_table.get_ticket_category(request.ticket_category)
    if ticket_category is None:
        return _rejected(request, TicketCategoryNotFoundError(request.ticket_category))

    entrant = EntrantCategory.from_name(request.entrant_category)
    if entrant is None:
        return _rejected(request, EntrantCategoryNotFoundError(request.entrant_category))

    add_ons = _resolve_add_ons(pricing_table, request.add_ons)
    if isinstance(add_ons, AddOnNotFoundError):
        return _rejected(request, add_ons)

    price = ticket_category.prices.price_for(entrant)
    for add_on in add_ons:
        price += add_on.prices.price_for(entrant)

    logger.debug(
        "Ticket priced",
        ticket_category=ticket_category.name,
        entrant_category=entrant.value,
        add_ons=list(request.add_ons),
        price_cents=price.cents,
    )
    return Ok(price)
