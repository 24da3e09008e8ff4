from __future__ import annotations

from enum import Enum


class Species(str, Enum):
    CATTLE = "cattle"
    SHEEP = "sheep"
    GOAT = "goat"
    BUFFALO = "buffalo"
    HORSE = "horse"
    OTHER = "other"


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


# Average gestation length in days
GESTATION_DAYS: dict[Species, int] = {
    Species.CATTLE: 283,
    Species.SHEEP: 150,
    Species.GOAT: 150,
    Species.BUFFALO: 310,
    Species.HORSE: 340,
    Species.OTHER: 200,
}


def parse_species(value: str | Species | None) -> Species:
    """Unknown or missing species fall back to OTHER."""
    if isinstance(value, Species):
        return value
    try:
        return Species(value)
    except ValueError:
        return Species.OTHER


def gestation_days(species: str | Species | None) -> int:
    return GESTATION_DAYS[parse_species(species)]
