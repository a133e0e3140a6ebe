from admissions.domain.errors import (
    AddOnNotFoundError,
    DomainError,
    EntrantCategoryNotFoundError,
    ErrorCode,
    ReferenceNotFoundError,
    TicketCategoryNotFoundError,
)
from admissions.domain.models import (
    AddOn,
    PriceSchedule,
    PricingTable,
    Receipt,
    ReceiptLine,
    TicketCategory,
    TicketRequest,
)
from admissions.domain.result import Err, Ok, Result
from admissions.domain.value_objects import EntrantCategory, Money, format_dollars

__all__ = [
    "AddOn",
    "PriceSchedule",
    "PricingTable",
    "Receipt",
    "ReceiptLine",
    "TicketCategory",
    "TicketRequest",
    "EntrantCategory",
    "Money",
    "format_dollars",
    "Ok",
    "Err",
    "Result",
    "ErrorCode",
    "DomainError",
    "ReferenceNotFoundError",
    "TicketCategoryNotFoundError",
    "EntrantCategoryNotFoundError",
    "AddOnNotFoundError",
]
