"""Unit tests for the pricing and receipt services.

These test validation order, price arithmetic and error results.
Run with: pytest tests/test_services.py -v
"""

import pytest

from admissions.conf import AdmissionsSettings
from admissions.domain import (
    AddOnNotFoundError,
    EntrantCategoryNotFoundError,
    Err,
    ErrorCode,
    Money,
    Ok,
    PricingTable,
    Receipt,
    TicketCategoryNotFoundError,
    TicketRequest,
)
from admissions.services.admission_service import AdmissionService
from admissions.services.pricing_service import calculate_price
from admissions.services.receipt_service import build_receipt, compose_receipt
from admissions.stores.interfaces import PricingTableStore
from admissions.stores.mapping_store import MappingPricingTableStore

SEPARATOR = "-" * 43

FOUR_TICKETS = [
    TicketRequest("general", "adult", ("movie", "terrace")),
    TicketRequest("general", "senior", ("terrace",)),
    TicketRequest("general", "child", ("education", "movie", "terrace")),
    TicketRequest("general", "child", ("education", "movie", "terrace")),
]


@pytest.fixture
def small_table() -> PricingTable:
    return PricingTable.from_mapping(
        {
            "general": {"priceInCents": {"child": 1800, "adult": 3000, "senior": 2200}},
            "membership": {"priceInCents": {"child": 2000, "adult": 2500, "senior": 2100}},
            "extras": {"movie": {"priceInCents": {"child": 500, "adult": 800, "senior": 700}}},
        }
    )


class TestCalculatePrice:
    """Tests for calculate_price."""

    def test_base_price_without_add_ons(self, small_table):
        assert calculate_price(small_table, TicketRequest("general", "adult")) == Ok(Money(3000))

    def test_base_price_plus_add_on(self, small_table):
        result = calculate_price(small_table, TicketRequest("membership", "child", ("movie",)))
        assert result == Ok(Money(2500))

    def test_add_ons_priced_for_the_entrant(self, pricing_table):
        request = TicketRequest("general", "child", ("education", "movie", "terrace"))
        assert calculate_price(pricing_table, request).unwrap() == Money(4500)

    def test_duplicate_add_ons_are_each_charged(self, pricing_table):
        request = TicketRequest("membership", "senior", ("movie", "movie"))
        assert calculate_price(pricing_table, request).unwrap() == Money(4300)

    def test_unknown_ticket_category(self, pricing_table):
        result = calculate_price(pricing_table, TicketRequest("discount", "adult", ("movie",)))
        assert isinstance(result, Err)
        assert isinstance(result.error, TicketCategoryNotFoundError)
        assert result.message == "Ticket type 'discount' cannot be found."

    def test_extras_is_not_a_ticket_category(self, pricing_table):
        result = calculate_price(pricing_table, TicketRequest("extras", "adult"))
        assert result.message == "Ticket type 'extras' cannot be found."

    def test_unknown_entrant_category(self, pricing_table):
        result = calculate_price(pricing_table, TicketRequest("general", "kid", ("movie",)))
        assert isinstance(result.error, EntrantCategoryNotFoundError)
        assert result.message == "Entrant type 'kid' cannot be found."

    def test_unknown_add_on_names_first_offender(self, pricing_table):
        request = TicketRequest("general", "adult", ("movie", "gift", "parking"))
        result = calculate_price(pricing_table, request)
        assert isinstance(result.error, AddOnNotFoundError)
        assert result.message == "Extra type 'gift' cannot be found."

    def test_ticket_category_checked_before_entrant(self, pricing_table):
        result = calculate_price(pricing_table, TicketRequest("discount", "kid", ("gift",)))
        assert result.error.code is ErrorCode.TICKET_CATEGORY_NOT_FOUND

    def test_entrant_checked_before_add_ons(self, pricing_table):
        result = calculate_price(pricing_table, TicketRequest("general", "kid", ("gift",)))
        assert result.error.code is ErrorCode.ENTRANT_CATEGORY_NOT_FOUND


class TestBuildReceipt:
    """Tests for build_receipt and compose_receipt."""

    def test_four_ticket_receipt(self, pricing_table, options):
        result = build_receipt(pricing_table, FOUR_TICKETS, options)
        assert result.unwrap() == (
            "Thank you for visiting the Dinosaur Museum!\n"
            f"{SEPARATOR}\n"
            "Adult General Admission: $50.00 (Movie Access, Terrace Access)\n"
            "Senior General Admission: $35.00 (Terrace Access)\n"
            "Child General Admission: $45.00 (Education Access, Movie Access, Terrace Access)\n"
            "Child General Admission: $45.00 (Education Access, Movie Access, Terrace Access)\n"
            f"{SEPARATOR}\n"
            "TOTAL: $175.00"
        )

    def test_total_is_sum_of_individual_prices(self, pricing_table, options):
        receipt = compose_receipt(pricing_table, FOUR_TICKETS, options).unwrap()
        individual = [calculate_price(pricing_table, request).unwrap() for request in FOUR_TICKETS]
        assert receipt.total == sum(individual)
        assert receipt.render().endswith(f"TOTAL: ${sum(p.cents for p in individual) / 100:.2f}")

    def test_empty_request_list(self, pricing_table, options):
        result = build_receipt(pricing_table, [], options)
        assert result.unwrap() == (
            f"Thank you for visiting the Dinosaur Museum!\n{SEPARATOR}\n{SEPARATOR}\nTOTAL: $0.00"
        )

    def test_short_circuits_on_first_invalid_request(self, pricing_table, options):
        requests = [
            TicketRequest("general", "adult"),
            TicketRequest("membership", "child", ("movie",)),
            TicketRequest("general", "senior", ("gift",)),
            TicketRequest("discount", "adult"),
            TicketRequest("general", "kid"),
        ]
        result = build_receipt(pricing_table, requests, options)
        assert result == calculate_price(pricing_table, requests[2])
        assert result.message == "Extra type 'gift' cannot be found."

    def test_consumes_requests_lazily(self, pricing_table, options):
        """Nothing after the first invalid request is pulled from the iterable."""
        produced = []

        def requests():
            for request in [
                TicketRequest("general", "adult"),
                TicketRequest("general", "kid"),
                TicketRequest("general", "senior"),
            ]:
                produced.append(request)
                yield request

        result = build_receipt(pricing_table, requests(), options)
        assert result.message == "Entrant type 'kid' cannot be found."
        assert len(produced) == 2

    def test_compose_returns_structured_receipt(self, pricing_table, options):
        receipt = compose_receipt(pricing_table, FOUR_TICKETS[:2], options).unwrap()
        assert isinstance(receipt, Receipt)
        assert [line.price for line in receipt.lines] == [Money(5000), Money(3500)]

    def test_options_change_header_and_symbol(self, pricing_table):
        options = AdmissionsSettings(museum_name="Fossil Hall", currency_symbol="£")
        text = build_receipt(pricing_table, [TicketRequest("general", "adult")], options).unwrap()
        assert text.splitlines() == [
            "Thank you for visiting the Fossil Hall!",
            "-" * 39,
            "Adult General Admission: £30.00",
            "-" * 39,
            "TOTAL: £30.00",
        ]

    def test_defaults_to_django_settings(self, pricing_table, settings):
        settings.ADMISSIONS = {"MUSEUM_NAME": "Natural History Museum"}
        text = build_receipt(pricing_table, []).unwrap()
        assert text.startswith("Thank you for visiting the Natural History Museum!\n")
        assert text.endswith("TOTAL: $0.00")


class CountingStore(PricingTableStore):
    def __init__(self, table: PricingTable) -> None:
        self.table = table
        self.calls = 0

    def get_pricing_table(self) -> PricingTable:
        self.calls += 1
        return self.table


class TestAdmissionService:
    """Tests for AdmissionService."""

    def test_quote_uses_store_table(self, pricing_table):
        store = CountingStore(pricing_table)
        service = AdmissionService(store)
        assert service.quote(TicketRequest("general", "adult")) == Ok(Money(3000))
        assert store.calls == 1

    def test_purchase_fetches_table_once(self, pricing_table, options):
        store = CountingStore(pricing_table)
        service = AdmissionService(store, options)
        text = service.purchase(FOUR_TICKETS).unwrap()
        assert text.endswith("TOTAL: $175.00")
        assert store.calls == 1

    def test_summarize_returns_error_result(self, store, options):
        service = AdmissionService(store, options)
        result = service.summarize([TicketRequest("general", "toddler")])
        assert result.message == "Entrant type 'toddler' cannot be found."


class TestMappingPricingTableStore:
    """Tests for MappingPricingTableStore."""

    def test_builds_table_once(self, ticket_data):
        store = MappingPricingTableStore(ticket_data)
        first = store.get_pricing_table()
        assert store.get_pricing_table() is first
        assert first.get_ticket_category("membership").prices.adult == Money(2800)
