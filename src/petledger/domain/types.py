"""Animal types, genders, and the per-identity profile.

``AnimalType.NONE`` is the "no animal" sentinel: it is what an idle
identity's loan record holds and is never a valid stock or loan target.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

MAX_AGE = 255

# Largest count an inventory row may reach (SQLite INTEGER is signed 64-bit).
MAX_STOCK = 2**63 - 1


class AnimalType(StrEnum):
    """Closed set of animal types tracked by the ledger."""

    NONE = "none"
    FISH = "fish"
    CAT = "cat"
    DOG = "dog"
    RABBIT = "rabbit"
    PARROT = "parrot"

    @property
    def bit(self) -> int:
        """Single-bit flag for this type within an eligibility mask."""
        return 1 << _ORDINALS[self]

    @property
    def is_sentinel(self) -> bool:
        return self is AnimalType.NONE


# Declaration order fixes the bit position: none=0, fish=1, ..., parrot=5.
_ORDINALS: dict[AnimalType, int] = {animal: i for i, animal in enumerate(AnimalType)}

STOCKABLE_ANIMALS: tuple[AnimalType, ...] = tuple(a for a in AnimalType if not a.is_sentinel)


class Gender(StrEnum):
    """Borrower gender, bound with the age on first borrow."""

    MALE = "male"
    FEMALE = "female"


class UserProfile(NamedTuple):
    """Immutable (age, gender) pair bound to an identity."""

    age: int
    gender: Gender


def mask_of(*animals: AnimalType) -> int:
    """OR together the bits of *animals*."""
    mask = 0
    for animal in animals:
        mask |= animal.bit
    return mask
