"""Store backed by a caller-supplied mapping in the ticket data file shape."""

from collections.abc import Mapping
from typing import Any

from admissions.domain import PricingTable
from admissions.stores.interfaces import PricingTableStore


class MappingPricingTableStore(PricingTableStore):
    """Builds the pricing table from raw ticket data on first use."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data
        self._table: PricingTable | None = None

    def get_pricing_table(self) -> PricingTable:
        if self._table is None:
            self._table = PricingTable.from_mapping(self._data)
        return self._table
