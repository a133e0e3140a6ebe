"""Entry points for callers working with raw ticket data.

Handlers:
- Parse request mappings and validate their format
- Call services for business logic
- Map results to plain values: the payload, or the error message string
- Never contain pricing logic
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import structlog

from admissions.domain import Err, TicketRequest
from admissions.handlers.serializers import ReceiptSerializer, TicketRequestSerializer
from admissions.services.admission_service import AdmissionService
from admissions.stores.mapping_store import MappingPricingTableStore

logger = structlog.get_logger(__name__)


def parse_ticket_request(ticket_info: Mapping[str, Any]) -> TicketRequest:
    """Return the TicketRequest described by `ticket_info`.

    Only the shape is checked here, so a format error on any field takes
    priority over an unknown ticket type, entrant type or extra in the same
    request.

    Raises:
        rest_framework.exceptions.ValidationError: If a field is missing or has the wrong type.
    """
    serializer = TicketRequestSerializer(data=ticket_info)
    serializer.is_valid(raise_exception=True)
    return serializer.save()


def _parse_each(purchases: Iterable[Mapping[str, Any]]) -> Iterator[TicketRequest]:
    # Lazy, so purchases after the first unknown reference are never parsed.
    for purchase in purchases:
        yield parse_ticket_request(purchase)


def _service_for(ticket_data: Mapping[str, Any]) -> AdmissionService:
    return AdmissionService(MappingPricingTableStore(ticket_data))


def calculate_ticket_price(ticket_data: Mapping[str, Any], ticket_info: Mapping[str, Any]) -> int | str:
    """Return the ticket price in cents, or an error message naming the unknown value.

    Raises:
        rest_framework.exceptions.ValidationError: If `ticket_info` is malformed.
    """
    result = _service_for(ticket_data).quote(parse_ticket_request(ticket_info))
    if isinstance(result, Err):
        return result.message
    return result.value.cents


def purchase_tickets(ticket_data: Mapping[str, Any], purchases: Iterable[Mapping[str, Any]]) -> str:
    """Return the receipt text for all purchases, or the first error message."""
    result = _service_for(ticket_data).purchase(_parse_each(purchases))
    if isinstance(result, Err):
        return result.message
    return result.value


def summarize_purchase(
    ticket_data: Mapping[str, Any], purchases: Iterable[Mapping[str, Any]]
) -> dict[str, Any] | str:
    """Return the receipt as a serialized mapping, or the first error message."""
    result = _service_for(ticket_data).summarize(_parse_each(purchases))
    if isinstance(result, Err):
        return result.message
    logger.debug("Purchase summarized", tickets=len(result.value.lines))
    return ReceiptSerializer(result.value).data
