"""Small predicates used when reading options."""

from __future__ import annotations

import re
from collections.abc import Iterable

from certsmaker.domains import parse_domains

_TRUE_WORDS = frozenset({"true", "1", "on"})
_COUNTRY = re.compile(r"[0-9A-Za-z_]{2}")


def is_bool_string(value: str) -> bool:
    """True for "true", "1" or "on", ignoring case and surrounding space."""
    return value.lower().strip() in _TRUE_WORDS


def is_not_empty_and_not_default(value: str, default: str) -> bool:
    """True when value is set and differs from the default."""
    return value != "" and value != default


def domain_list_matches(values: Iterable[str], default: str) -> bool:
    """True when values equal the domains parsed from the default string."""
    return list(values) == parse_domains(default)


def is_valid_country(value: str) -> bool:
    """True for a two-character word such as a country code."""
    return _COUNTRY.fullmatch(value) is not None