from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from farmtrack.application.errors import (
    ConflictError,
    NotFound,
    NotificationDeliveryError,
    ValidationError,
)
from farmtrack.application.use_cases.animals import lifecycle
from farmtrack.application.use_cases.breeding import complete_birth, record_insemination
from farmtrack.application.use_cases.notifications import daily_summary, send_email
from farmtrack.config.settings import Settings
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.models.profile import Profile
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer

ACCOUNT = uuid4()
TODAY = date(2024, 7, 15)


class AnimalsRepo:
    def __init__(self, *animals: Animal) -> None:
        self.items = {a.id: a for a in animals}
        self.saved: list[Animal] = []

    async def get(self, account_id, animal_id):
        return self.items.get(animal_id)

    async def get_many(self, account_id, animal_ids):
        return [self.items[i] for i in animal_ids if i in self.items]

    async def list(self, account_id, *, status=None, **_):
        return [a for a in self.items.values() if status is None or a.status == status]

    async def save(self, animal):
        self.saved.append(animal)
        return animal


class ListRepo:
    def __init__(self, items=()) -> None:
        self.items = list(items)
        self.added: list = []

    async def add(self, item):
        self.added.append(item)
        return item

    async def get(self, account_id, item_id):
        return next((i for i in self.items if i.id == item_id), None)

    async def update(self, item):
        return item

    async def list(self, account_id, **filters):
        if "is_pregnant" in filters:
            return [i for i in self.items if i.is_pregnant == filters["is_pregnant"]]
        return list(self.items)


class ProfilesRepo:
    def __init__(self, *profiles: Profile) -> None:
        self.items = {p.account_id: p for p in profiles}

    async def get(self, account_id):
        return self.items.get(account_id)

    async def list_email_enabled(self):
        return [p for p in self.items.values() if p.email_notifications_enabled]


class RecordingEmail:
    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.sent: list = []

    async def send(self, message):
        if set(message.to) & self.fail_for:
            raise NotificationDeliveryError("rejected", provider_error={"statusCode": 500})
        self.sent.append(message)
        return f"id-{len(self.sent)}"


def make_uow(**repos):
    state = SimpleNamespace(commits=0, rollbacks=0)

    async def commit():
        state.commits += 1

    async def rollback():
        state.rollbacks += 1

    defaults = dict(
        animals=AnimalsRepo(),
        transactions=ListRepo(),
        inseminations=ListRepo(),
        pregnancy_reminders=ListRepo(),
        vaccinations=ListRepo(),
        notification_logs=ListRepo(),
        profiles=ProfilesRepo(),
    )
    defaults.update(repos)
    return SimpleNamespace(commit=commit, rollback=rollback, state=state, **defaults)


def make_settings() -> Settings:
    return Settings.model_validate(
        {"database_url": "sqlite+aiosqlite:///:memory:", "jwt_secret_key": "x"}
    )


def cow(ear_tag: str = "TR-1", gender: str = "female") -> Animal:
    return Animal.create(
        account_id=ACCOUNT,
        ear_tag=ear_tag,
        species="cattle",
        breed="Holstein",
        gender=gender,
        birth_date=date(2020, 3, 1),
    )


@pytest.mark.asyncio
async def test_sell_records_income_when_requested():
    animal = cow()
    uow = make_uow(animals=AnimalsRepo(animal))
    sold = await lifecycle.sell(
        uow,
        ACCOUNT,
        animal.id,
        lifecycle.SaleInput(
            sold_to="Mehmet", sold_date=TODAY, sold_price=Decimal("25000"), record_income=True
        ),
    )
    assert sold.status == "sold"
    assert sold.version == 2
    [income] = uow.transactions.added
    assert (income.type, income.category, income.amount) == ("income", "hayvan-satis", Decimal("25000"))
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_terminal_status_is_never_left():
    animal = cow()
    animal.mark_deceased(TODAY, "illness")
    uow = make_uow(animals=AnimalsRepo(animal))
    with pytest.raises(ConflictError):
        await lifecycle.sell(
            uow,
            ACCOUNT,
            animal.id,
            lifecycle.SaleInput(sold_to="Mehmet", sold_date=TODAY, sold_price=Decimal("1")),
        )
    assert uow.animals.saved == []
    assert uow.state.commits == 0


@pytest.mark.asyncio
async def test_batch_death_is_all_or_nothing():
    alive = cow("TR-1")
    sold = cow("TR-2")
    sold.sell("Ali", TODAY, Decimal("100"))
    uow = make_uow(animals=AnimalsRepo(alive, sold))
    with pytest.raises(ConflictError):
        await lifecycle.batch_mark_deceased(
            uow, ACCOUNT, [alive.id, sold.id], lifecycle.DeathInput(death_date=TODAY)
        )
    assert alive.is_active
    assert uow.animals.saved == []


@pytest.mark.asyncio
async def test_batch_sale_splits_total_across_animals():
    herd = [cow("TR-1"), cow("TR-2"), cow("TR-3")]
    uow = make_uow(animals=AnimalsRepo(*herd))
    sold = await lifecycle.batch_sell(
        uow,
        ACCOUNT,
        [a.id for a in herd],
        lifecycle.SaleInput(
            sold_to="Mehmet", sold_date=TODAY, sold_price=Decimal("100"), record_income=True
        ),
    )
    assert [a.sold_price for a in sold] == [Decimal("33.33"), Decimal("33.33"), Decimal("33.34")]
    incomes = uow.transactions.added
    assert [tx.animal_id for tx in incomes] == [a.id for a in herd]
    assert sum(tx.amount for tx in incomes) == Decimal("100")
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_batch_with_unknown_animal_is_not_found():
    uow = make_uow(animals=AnimalsRepo(cow()))
    with pytest.raises(NotFound):
        await lifecycle.batch_mark_deceased(
            uow, ACCOUNT, [uuid4()], lifecycle.DeathInput(death_date=TODAY)
        )


@pytest.mark.asyncio
async def test_record_insemination_creates_two_reminders():
    animal = cow()
    uow = make_uow(animals=AnimalsRepo(animal))
    result = await record_insemination.execute(
        uow,
        ACCOUNT,
        record_insemination.RecordInseminationInput(animal_id=animal.id, date=date(2024, 1, 1)),
    )
    assert result.insemination.expected_birth_date == date(2024, 10, 10)
    assert [r.reminder_date for r in result.reminders] == [date(2024, 7, 1), date(2024, 8, 1)]
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_record_insemination_rejects_males():
    bull = cow(gender="male")
    uow = make_uow(animals=AnimalsRepo(bull))
    with pytest.raises(ValidationError):
        await record_insemination.execute(
            uow,
            ACCOUNT,
            record_insemination.RecordInseminationInput(animal_id=bull.id, date=TODAY),
        )


@pytest.mark.asyncio
async def test_second_birth_completion_conflicts():
    item = Insemination.create(
        account_id=ACCOUNT, animal_id=uuid4(), date=date(2023, 10, 1), method="natural",
        expected_birth_date=date(2024, 7, 8),
    )
    uow = make_uow(inseminations=ListRepo([item]))
    first = await complete_birth.execute(uow, ACCOUNT, item.id, TODAY)
    assert first.actual_birth_date == TODAY
    assert not first.is_pregnant
    with pytest.raises(ConflictError):
        await complete_birth.execute(uow, ACCOUNT, item.id, TODAY, date(2024, 7, 16))
    assert item.actual_birth_date == TODAY


@pytest.mark.asyncio
async def test_send_email_disabled_channel_makes_no_outbound_call():
    profile = Profile(
        account_id=ACCOUNT, notification_email="farm@example.com", email_notifications_enabled=False
    )
    uow = make_uow(profiles=ProfilesRepo(profile))
    email = RecordingEmail()
    result = await send_email.execute(
        uow,
        ACCOUNT,
        send_email.SendEmailInput(notification_type="birth_reminder", message="hello"),
        email_service=email,
        renderer=EmailTemplateRenderer.create_default(),
        settings=make_settings(),
    )
    assert result.success is False
    assert result.message == "Email notifications disabled for this user"
    assert email.sent == []
    assert uow.notification_logs.added == []


@pytest.mark.asyncio
async def test_send_email_failure_is_logged_then_raised():
    profile = Profile(
        account_id=ACCOUNT, notification_email="farm@example.com", email_notifications_enabled=True
    )
    uow = make_uow(profiles=ProfilesRepo(profile))
    with pytest.raises(NotificationDeliveryError):
        await send_email.execute(
            uow,
            ACCOUNT,
            send_email.SendEmailInput(notification_type="test", message="hello"),
            email_service=RecordingEmail(fail_for={"farm@example.com"}),
            renderer=EmailTemplateRenderer.create_default(),
            settings=make_settings(),
        )
    [entry] = uow.notification_logs.added
    assert entry.status == "failed"
    assert '"statusCode": 500' in entry.error_message
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_daily_summary_skips_and_continues_past_failures():
    animal = cow()
    vaccination = Vaccination.create(
        account_id=ACCOUNT,
        animal_id=animal.id,
        name="ibr",
        date=date(2024, 1, 1),
        next_date=date(2024, 7, 10),
    )
    failing = Profile(
        account_id=uuid4(), notification_email="bad@example.com", email_notifications_enabled=True
    )
    opted_out = Profile(
        account_id=uuid4(),
        notification_email="quiet@example.com",
        email_notifications_enabled=True,
        notification_preferences={"daily_summary": False},
    )
    happy = Profile(
        account_id=uuid4(),
        full_name="Ayşe",
        notification_email="good@example.com",
        email_notifications_enabled=True,
    )
    uow = make_uow(
        animals=AnimalsRepo(animal),
        vaccinations=ListRepo([vaccination]),
        profiles=ProfilesRepo(failing, opted_out, happy),
    )
    email = RecordingEmail(fail_for={"bad@example.com"})

    result = await daily_summary.execute(
        uow,
        TODAY,
        email_service=email,
        renderer=EmailTemplateRenderer.create_default(),
        settings=make_settings(),
    )

    assert result.total_users == 3
    assert result.sent == 1
    assert [r.status for r in result.results] == ["failed", "skipped", "sent"]
    assert result.results[1].reason == "daily_summary disabled"
    [message] = email.sent
    assert message.to == ["good@example.com"]
    assert "TR-1: ibr - 5 days late!" in message.text
    assert [e.status for e in uow.notification_logs.added] == ["failed", "sent"]
