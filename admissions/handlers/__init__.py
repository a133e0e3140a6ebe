from admissions.handlers.purchases import (
    calculate_ticket_price,
    parse_ticket_request,
    purchase_tickets,
    summarize_purchase,
)

__all__ = [
    "calculate_ticket_price",
    "parse_ticket_request",
    "purchase_tickets",
    "summarize_purchase",
]
