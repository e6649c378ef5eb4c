"""Tests for the eligibility capability table."""

from __future__ import annotations

import pytest

from petledger.domain.capabilities import (
    CAPABILITY_TABLE,
    is_eligible,
    permitted_animals,
    permitted_mask,
    validate,
)
from petledger.domain.errors import IneligibleAnimalError
from petledger.domain.types import MAX_AGE, AnimalType, Gender

ALL_AGES = range(1, MAX_AGE + 1)


class TestCapabilityTable:
    def test_every_gender_has_a_row(self) -> None:
        assert set(CAPABILITY_TABLE) == set(Gender)

    @pytest.mark.parametrize("gender", list(Gender))
    def test_none_bit_never_set(self, gender: Gender) -> None:
        for age in ALL_AGES:
            assert not permitted_mask(gender, age) & AnimalType.NONE.bit

    def test_female_threshold_is_40(self) -> None:
        assert CAPABILITY_TABLE[Gender.FEMALE].threshold == 40


class TestMaleEligibility:
    def test_only_fish_and_dog_at_every_age(self) -> None:
        for age in ALL_AGES:
            assert permitted_animals(Gender.MALE, age) == [AnimalType.FISH, AnimalType.DOG]

    @pytest.mark.parametrize("animal", [AnimalType.CAT, AnimalType.RABBIT, AnimalType.PARROT])
    def test_rejected_animals(self, animal: AnimalType) -> None:
        assert not is_eligible(30, Gender.MALE, animal)
        assert not is_eligible(MAX_AGE, Gender.MALE, animal)


class TestFemaleEligibility:
    def test_under_40_excludes_cat(self) -> None:
        for age in range(1, 40):
            animals = permitted_animals(Gender.FEMALE, age)
            assert AnimalType.CAT not in animals
            assert animals == [
                AnimalType.FISH,
                AnimalType.DOG,
                AnimalType.RABBIT,
                AnimalType.PARROT,
            ]

    def test_40_and_over_allows_everything(self) -> None:
        for age in range(40, MAX_AGE + 1):
            assert permitted_animals(Gender.FEMALE, age) == [
                AnimalType.FISH,
                AnimalType.CAT,
                AnimalType.DOG,
                AnimalType.RABBIT,
                AnimalType.PARROT,
            ]

    def test_boundary(self) -> None:
        assert not is_eligible(39, Gender.FEMALE, AnimalType.CAT)
        assert is_eligible(40, Gender.FEMALE, AnimalType.CAT)


class TestValidate:
    def test_permitted_passes(self) -> None:
        validate(25, Gender.MALE, AnimalType.DOG)

    def test_male_message(self) -> None:
        with pytest.raises(IneligibleAnimalError, match="invalid animal for men") as exc_info:
            validate(25, Gender.MALE, AnimalType.CAT)
        assert exc_info.value.code == "INELIGIBLE_ANIMAL"
        assert exc_info.value.detail == {"age": 25, "gender": "male", "animal": "cat"}

    def test_female_message(self) -> None:
        with pytest.raises(IneligibleAnimalError, match="invalid animal for women under 40"):
            validate(30, Gender.FEMALE, AnimalType.CAT)

    def test_none_is_never_eligible(self) -> None:
        with pytest.raises(IneligibleAnimalError):
            validate(50, Gender.FEMALE, AnimalType.NONE)
