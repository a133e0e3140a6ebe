"""Pytest configuration and shared fixtures."""

import copy
import typing as t

import pytest

from admissions.conf import AdmissionsSettings
from admissions.domain import PricingTable
from admissions.stores.mapping_store import MappingPricingTableStore

TICKET_DATA: dict[str, t.Any] = {
    "general": {
        "description": "General Admission",
        "priceInCents": {"child": 2000, "adult": 3000, "senior": 2500},
    },
    "membership": {
        "description": "Membership Admission",
        "priceInCents": {"child": 1500, "adult": 2800, "senior": 2300},
    },
    "extras": {
        "movie": {
            "description": "Movie Access",
            "priceInCents": {"child": 1000, "adult": 1000, "senior": 1000},
        },
        "education": {
            "description": "Education Access",
            "priceInCents": {"child": 1000, "adult": 1000, "senior": 1000},
        },
        "terrace": {
            "description": "Terrace Access",
            "priceInCents": {"child": 500, "adult": 1000, "senior": 1000},
        },
    },
}


@pytest.fixture
def ticket_data() -> dict[str, t.Any]:
    return copy.deepcopy(TICKET_DATA)


@pytest.fixture
def pricing_table(ticket_data: dict[str, t.Any]) -> PricingTable:
    return PricingTable.from_mapping(ticket_data)


@pytest.fixture
def store(ticket_data: dict[str, t.Any]) -> MappingPricingTableStore:
    return MappingPricingTableStore(ticket_data)


@pytest.fixture
def options() -> AdmissionsSettings:
    return AdmissionsSettings()
