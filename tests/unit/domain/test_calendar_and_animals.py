from __future__ import annotations

from datetime import date

from farmtrack.domain.services.animals import age_in_months, classify_animal, format_age
from farmtrack.domain.services.calendar import (
    add_months,
    last_n_month_starts,
    month_bounds,
    whole_months_between,
)


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 3, 10), -3) == date(2023, 12, 10)


def test_whole_months_between_counts_complete_months_only():
    assert whole_months_between(date(2024, 1, 1), date(2024, 7, 1)) == 6
    assert whole_months_between(date(2024, 1, 15), date(2024, 7, 14)) == 5
    assert whole_months_between(date(2024, 7, 1), date(2024, 1, 1)) == 0


def test_month_bounds_and_recent_month_starts():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert last_n_month_starts(date(2024, 2, 10), 3) == [
        date(2023, 12, 1),
        date(2024, 1, 1),
        date(2024, 2, 1),
    ]


def test_cattle_categories_follow_age_and_gender():
    assert classify_animal("cattle", "female", 6).key == "calf"
    assert classify_animal("cattle", "male", 11).key == "calf"
    assert classify_animal("cattle", "male", 12).key == "young_male"
    assert classify_animal("cattle", "female", 17).key == "young_female"
    assert classify_animal("cattle", "male", 18).key == "bull"
    assert classify_animal("cattle", "female", 40).key == "heifer"


def test_non_cattle_species_are_classified_by_gender_only():
    assert classify_animal("sheep", "female", 3).key == "female"
    assert classify_animal("goat", "male", 30).key == "male"


def test_format_age_uses_years_and_months():
    today = date(2024, 7, 15)
    assert age_in_months(date(2022, 5, 15), today) == 26
    assert format_age(date(2022, 5, 15), today) == "2 years 2 months"
    assert format_age(date(2023, 6, 1), today) == "1 year 1 month"
    assert format_age(date(2024, 3, 20), today) == "3 months"
