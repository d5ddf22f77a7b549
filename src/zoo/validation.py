"""Structural validation for animals.

Field-level checks only: nothing here looks at other stored records.
"""

import re

from zoo.models import Animal

CATALOG_NUMBER_PATTERN = re.compile(r"^[A-Z0-9]{12}$")

REQUIRED_TEXT_FIELDS = ("name", "breed", "type", "gender")


def column_length(field: str) -> int | None:
    """Declared length of a String column on the animals table."""
    return getattr(Animal.__table__.c[field].type, "length", None)


def is_blank(value: object) -> bool:
    """True for None, non-strings, empty and whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def is_valid_catalog_number(value: object) -> bool:
    return isinstance(value, str) and CATALOG_NUMBER_PATTERN.fullmatch(value) is not None


def is_valid_animal(animal: Animal | None) -> bool:
    """Check that an animal can be stored.

    Valid means: every required text field is non-blank, the catalog number
    is a 12-character uppercase alphanumeric token, text fits its column,
    age is a non-negative int and is_healthy is a bool.
    """
    if animal is None:
        return False
    if not is_valid_catalog_number(animal.catalog_number):
        return False
    if any(is_blank(getattr(animal, field)) for field in REQUIRED_TEXT_FIELDS):
        return False
    if any(not _fits_column(field, getattr(animal, field)) for field in REQUIRED_TEXT_FIELDS):
        return False
    # bool is an int subclass; True is not an age
    if not isinstance(animal.age, int) or isinstance(animal.age, bool) or animal.age < 0:
        return False
    return isinstance(animal.is_healthy, bool)


def _fits_column(field: str, value: str) -> bool:
    length = column_length(field)
    return length is None or len(value) <= length
