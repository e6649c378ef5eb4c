"""Input coercion shared by the ledger services.

Front ends may pass enum members or their string values; unknown values
become the matching ledger rejection instead of a ``ValueError``.
"""

from __future__ import annotations

from petledger.domain.errors import InvalidAgeError, InvalidAnimalError
from petledger.domain.types import MAX_AGE, AnimalType, Gender


def coerce_animal(animal: AnimalType | str) -> AnimalType:
    try:
        return AnimalType(str(animal).lower())
    except ValueError:
        raise InvalidAnimalError(f"unknown animal type: {animal!r}", animal=str(animal)) from None


def coerce_gender(gender: Gender | str) -> Gender | None:
    """Return the Gender for *gender*, or None if it names no gender."""
    try:
        return Gender(str(gender).lower())
    except ValueError:
        return None


def check_age(age: int) -> None:
    """Reject a zero age, or one outside ``0..MAX_AGE``."""
    if age == 0:
        raise InvalidAgeError("age must be greater than zero", age=age)
    if not 0 < age <= MAX_AGE:
        raise InvalidAgeError(f"age must be between 1 and {MAX_AGE}", age=age)
