"""Admission service - pricing and receipts over a pricing table store.

Services:
- Depend only on interfaces (stores)
- Report unknown references as Err results, never raise them
"""

from collections.abc import Iterable

from admissions.conf import AdmissionsSettings
from admissions.domain import Money, Receipt, Result, TicketRequest
from admissions.services.pricing_service import calculate_price
from admissions.services.receipt_service import build_receipt, compose_receipt
from admissions.stores.interfaces import PricingTableStore


class AdmissionService:
    """Service for admission pricing operations."""

    def __init__(self, store: PricingTableStore, options: AdmissionsSettings | None = None) -> None:
        self._store = store
        self._options = options

    def quote(self, request: TicketRequest) -> Result[Money]:
        """Return the price of a single ticket."""
        return calculate_price(self._store.get_pricing_table(), request)

    def purchase(self, requests: Iterable[TicketRequest]) -> Result[str]:
        """Return the rendered receipt for a batch of tickets."""
        return build_receipt(self._store.get_pricing_table(), requests, self._options)

    def summarize(self, requests: Iterable[TicketRequest]) -> Result[Receipt]:
        """Return the receipt for a batch of tickets as a domain object."""
        return compose_receipt(self._store.get_pricing_table(), requests, self._options)
