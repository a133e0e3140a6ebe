"""App settings, read from `settings.ADMISSIONS`."""

from dataclasses import dataclass

from django.conf import settings

DEFAULT_MUSEUM_NAME = "Dinosaur Museum"
DEFAULT_CURRENCY_SYMBOL = "$"


@dataclass(frozen=True)
class AdmissionsSettings:
    museum_name: str = DEFAULT_MUSEUM_NAME
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @property
    def receipt_header(self) -> str:
        return f"Thank you for visiting the {self.museum_name}!"


def get_admissions_settings() -> AdmissionsSettings:
    """Return the current admissions settings, falling back to defaults.

    Not cached, so overrides made in tests are picked up.
    """
    options = getattr(settings, "ADMISSIONS", {})
    return AdmissionsSettings(
        museum_name=options.get("MUSEUM_NAME", DEFAULT_MUSEUM_NAME),
        currency_symbol=options.get("CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
    )
