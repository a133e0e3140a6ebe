"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from admissions.domain import PricingTable


class PricingTableStore(ABC):
    """Interface for loading the rate schedule."""

    @abstractmethod
    def get_pricing_table(self) -> PricingTable:
        """Return the current pricing table."""
        ...
