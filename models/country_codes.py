"""ISO 3166-1 alpha-2 country codes."""

from typing import FrozenSet

import pycountry

ISO_COUNTRY_CODES: FrozenSet[str] = frozenset(
    country.alpha_2 for country in pycountry.countries
)


def is_valid_country_code(code: object) -> bool:
    """Check if code is an exact (upper case) alpha-2 code."""
    return isinstance(code, str) and code in ISO_COUNTRY_CODES
