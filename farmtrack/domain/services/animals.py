from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from farmtrack.domain.services.calendar import whole_months_between
from farmtrack.domain.value_objects.species import Gender, Species

CALF_MAX_MONTHS = 12
YOUNG_MAX_MONTHS = 18


@dataclass(frozen=True, slots=True)
class AnimalCategory:
    key: str
    label: str
    color: str


CATEGORIES: dict[str, AnimalCategory] = {
    "calf": AnimalCategory("calf", "Calf", "blue"),
    "young_male": AnimalCategory("young_male", "Young male", "cyan"),
    "young_female": AnimalCategory("young_female", "Young female", "pink"),
    "bull": AnimalCategory("bull", "Bull", "orange"),
    "heifer": AnimalCategory("heifer", "Heifer", "purple"),
    "male": AnimalCategory("male", "Male", "slate"),
    "female": AnimalCategory("female", "Female", "rose"),
}


def age_in_months(birth_date: date, today: date) -> int:
    return whole_months_between(birth_date, today)


def classify_animal(species: str, gender: str, age_months: int) -> AnimalCategory:
    is_male = gender == Gender.MALE.value
    if species != Species.CATTLE.value:
        return CATEGORIES["male" if is_male else "female"]
    if age_months < CALF_MAX_MONTHS:
        return CATEGORIES["calf"]
    if age_months < YOUNG_MAX_MONTHS:
        return CATEGORIES["young_male" if is_male else "young_female"]
    return CATEGORIES["bull" if is_male else "heifer"]


def format_age(birth_date: date, today: date) -> str:
    months = age_in_months(birth_date, today)
    years, rest = divmod(months, 12)
    month_word = "month" if rest == 1 else "months"
    if years == 0:
        return f"{rest} {month_word}"
    year_word = "year" if years == 1 else "years"
    return f"{years} {year_word} {rest} {month_word}"
