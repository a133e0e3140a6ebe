"""Receipt Builder: prices a batch of tickets and renders the receipt."""

from collections.abc import Iterable

import structlog

from admissions.conf import AdmissionsSettings, get_admissions_settings
from admissions.domain import Err, Ok, PricingTable, Receipt, ReceiptLine, Result, TicketRequest
from admissions.services.pricing_service import calculate_price

logger = structlog.get_logger(__name__)


def compose_receipt(
    pricing_table: PricingTable,
    requests: Iterable[TicketRequest],
    options: AdmissionsSettings | None = None,
) -> Result[Receipt]:
    """Price every request in order and collect them into a receipt.

    Stops at the first request that cannot be priced and returns its error.
    `requests` is consumed lazily, so later requests are not even produced.
    """
    options = options or get_admissions_settings()
    lines: list[ReceiptLine] = []
    for request in requests:
        result = calculate_price(pricing_table, request)
        if isinstance(result, Err):
            return result
        lines.append(ReceiptLine(request=request, price=result.value))

    receipt = Receipt(
        header=options.receipt_header,
        lines=tuple(lines),
        currency_symbol=options.currency_symbol,
    )
    logger.info("Receipt composed", tickets=len(lines), total_cents=receipt.total.cents)
    return Ok(receipt)


def build_receipt(
    pricing_table: PricingTable,
    requests: Iterable[TicketRequest],
    options: AdmissionsSettings | None = None,
) -> Result[str]:
    """Return the rendered receipt text, or the first pricing error."""
    result = compose_receipt(pricing_table, requests, options)
    if isinstance(result, Err):
        return result
    return Ok(result.value.render())
