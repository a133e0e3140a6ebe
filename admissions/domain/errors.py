"""Domain error codes for the admissions module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TICKET_CATEGORY_NOT_FOUND = "TICKET_CATEGORY_NOT_FOUND"
    ENTRANT_CATEGORY_NOT_FOUND = "ENTRANT_CATEGORY_NOT_FOUND"
    ADD_ON_NOT_FOUND = "ADD_ON_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ReferenceNotFoundError(DomainError):
    """A request names something the pricing table does not have."""

    reference: str = ""

    def __init__(self, code: ErrorCode, value: str) -> None:
        super().__init__(
            code=code,
            message=f"{self.reference} '{value}' cannot be found.",
        )
        self.value = value


class TicketCategoryNotFoundError(ReferenceNotFoundError):
    """Raised when a ticket category is not in the pricing table."""

    reference = "Ticket type"

    def __init__(self, ticket_category: str) -> None:
        super().__init__(ErrorCode.TICKET_CATEGORY_NOT_FOUND, ticket_category)


class EntrantCategoryNotFoundError(ReferenceNotFoundError):
    """Raised when an entrant category is not child, adult or senior."""

    reference = "Entrant type"

    def __init__(self, entrant_category: str) -> None:
        super().__init__(ErrorCode.ENTRANT_CATEGORY_NOT_FOUND, entrant_category)


class AddOnNotFoundError(ReferenceNotFoundError):
    """Raised when an add-on is not in the pricing table."""

    reference = "Extra type"

    def __init__(self, add_on: str) -> None:
        super().__init__(ErrorCode.ADD_ON_NOT_FOUND, add_on)
