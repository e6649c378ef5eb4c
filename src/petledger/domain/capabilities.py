"""Eligibility capability table: which animals a (gender, age) may borrow.

The whole rule set is the single constant :data:`CAPABILITY_TABLE`. Each
gender has one row, split at ``threshold`` into a young mask (age below the
threshold) and an adult mask. Masks are bit sets over ``AnimalType.bit``;
the ``NONE`` bit is never set.

The male threshold is :data:`MAX_AGE`, so the adult branch only applies at
exactly that age and carries the same mask: men may borrow fish or dogs at
any age.
"""

from __future__ import annotations

from typing import NamedTuple

from petledger.domain.errors import IneligibleAnimalError
from petledger.domain.types import MAX_AGE, AnimalType, Gender, mask_of


class CapabilityRow(NamedTuple):
    threshold: int
    young_mask: int
    adult_mask: int


CAPABILITY_TABLE: dict[Gender, CapabilityRow] = {
    Gender.MALE: CapabilityRow(
        threshold=MAX_AGE,
        young_mask=mask_of(AnimalType.FISH, AnimalType.DOG),
        adult_mask=mask_of(AnimalType.FISH, AnimalType.DOG),
    ),
    Gender.FEMALE: CapabilityRow(
        threshold=40,
        young_mask=mask_of(
            AnimalType.FISH, AnimalType.DOG, AnimalType.RABBIT, AnimalType.PARROT
        ),
        adult_mask=mask_of(
            AnimalType.FISH,
            AnimalType.CAT,
            AnimalType.DOG,
            AnimalType.RABBIT,
            AnimalType.PARROT,
        ),
    ),
}

INELIGIBLE_MESSAGES: dict[Gender, str] = {
    Gender.MALE: "invalid animal for men",
    Gender.FEMALE: "invalid animal for women under 40",
}


def permitted_mask(gender: Gender, age: int) -> int:
    """Return the bit mask of animal types *gender* at *age* may borrow."""
    row = CAPABILITY_TABLE[gender]
    return row.young_mask if age < row.threshold else row.adult_mask


def permitted_animals(gender: Gender, age: int) -> list[AnimalType]:
    """Decode :func:`permitted_mask` into animal types, in declaration order."""
    mask = permitted_mask(gender, age)
    return [animal for animal in AnimalType if mask & animal.bit]


def is_eligible(age: int, gender: Gender, animal: AnimalType) -> bool:
    return bool(permitted_mask(gender, age) & animal.bit)


def validate(age: int, gender: Gender, animal: AnimalType) -> None:
    """Raise :class:`IneligibleAnimalError` unless *animal* is permitted.

    Pure check; no side effects.
    """
    if not is_eligible(age, gender, animal):
        raise IneligibleAnimalError(
            INELIGIBLE_MESSAGES[gender],
            age=age,
            gender=str(gender),
            animal=str(animal),
        )
