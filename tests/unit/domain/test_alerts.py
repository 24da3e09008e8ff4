from __future__ import annotations

from datetime import date
from uuid import uuid4

from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.alerts import HIGH, MEDIUM, alert_feed
from farmtrack.domain.services.gestation import expected_birth_date

TODAY = date(2024, 7, 15)
ACCOUNT = uuid4()


def _vaccination(next_date: date) -> Vaccination:
    return Vaccination.create(
        account_id=ACCOUNT, animal_id=uuid4(), name="ibr", date=date(2024, 1, 1), next_date=next_date
    )


def test_alert_feed_orders_by_priority_then_due_date():
    birth = Insemination.create(
        account_id=ACCOUNT,
        animal_id=uuid4(),
        date=date(2023, 10, 10),
        method="natural",
        expected_birth_date=expected_birth_date(date(2023, 10, 10), "cattle"),  # 2024-07-19
    )
    later_vaccine = _vaccination(date(2024, 7, 25))
    overdue_vaccine = _vaccination(date(2024, 7, 10))

    alerts = alert_feed([birth], [later_vaccine, overdue_vaccine], TODAY, {birth.animal_id: "TR-9"})

    assert [a.kind for a in alerts] == ["vaccination", "birth", "vaccination"]
    assert [a.priority for a in alerts] == [HIGH, HIGH, MEDIUM]
    assert alerts[0].title == "Overdue vaccination"
    assert alerts[0].message == "ibr is 5 days late"
    assert alerts[1].ear_tag == "TR-9"
    assert alerts[1].message == "4 days until birth"
    assert alerts[2].is_read is True


def test_alert_feed_ignores_items_outside_windows():
    far_vaccine = _vaccination(date(2024, 8, 30))
    ancient = _vaccination(date(2024, 5, 1))
    done = Insemination.create(
        account_id=ACCOUNT, animal_id=uuid4(), date=date(2023, 10, 10), method="natural",
        expected_birth_date=expected_birth_date(date(2023, 10, 10), "cattle"),
    )
    done.complete_birth(date(2024, 7, 14))
    assert alert_feed([done], [far_vaccine, ancient], TODAY) == []
