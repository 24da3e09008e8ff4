"""Status transitions for animals.

An animal leaves the herd exactly once: ``active -> sold`` or
``active -> deceased``. Terminal states are never left again, so every
transition checks the current status first and raises ``ConflictError``
otherwise. Batch variants validate the whole selection before touching any
record, which keeps them all-or-nothing within one unit of work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import ConflictError, NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.models.transaction import ANIMAL_SALE_CATEGORY, Transaction, TransactionType
from farmtrack.domain.services.finance import split_total

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SaleInput:
    sold_to: str
    sold_date: date
    sold_price: Decimal
    record_income: bool = False


@dataclass(slots=True)
class DeathInput:
    death_date: date
    death_reason: str | None = None


def ensure_active(animal: Animal) -> None:
    if not animal.is_active:
        raise ConflictError(
            f"Animal {animal.ear_tag} is already {animal.status}",
            details={"animal_id": str(animal.id), "status": animal.status},
        )


def _validate_sale(payload: SaleInput) -> None:
    if payload.sold_price < 0:
        raise ValidationError("Sale price cannot be negative")
    if not payload.sold_to.strip():
        raise ValidationError("Buyer is required")


async def _load_active(uow: UnitOfWork, account_id: UUID, animal_ids: list[UUID]) -> list[Animal]:
    unique_ids = list(dict.fromkeys(animal_ids))
    if not unique_ids:
        raise ValidationError("Select at least one animal")
    animals = await uow.animals.get_many(account_id, unique_ids)
    found = {a.id for a in animals}
    missing = [str(i) for i in unique_ids if i not in found]
    if missing:
        raise NotFound("Animal not found", details={"animal_ids": missing})
    for animal in animals:
        ensure_active(animal)
    # Selection order decides who carries a batch rounding remainder
    position = {animal_id: i for i, animal_id in enumerate(unique_ids)}
    return sorted(animals, key=lambda a: position[a.id])


async def _apply_sale(
    uow: UnitOfWork, animal: Animal, payload: SaleInput, price: Decimal
) -> Animal:
    animal.sell(payload.sold_to.strip(), payload.sold_date, price)
    saved = await uow.animals.save(animal)
    if payload.record_income and price > 0:
        await uow.transactions.add(
            Transaction.create(
                account_id=animal.account_id,
                type=TransactionType.INCOME.value,
                category=ANIMAL_SALE_CATEGORY,
                amount=price,
                date=payload.sold_date,
                animal_id=animal.id,
                description=f"Animal sale - {animal.ear_tag} to {payload.sold_to.strip()}",
            )
        )
    return saved


async def sell(uow: UnitOfWork, account_id: UUID, animal_id: UUID, payload: SaleInput) -> Animal:
    _validate_sale(payload)
    animal = await uow.animals.get(account_id, animal_id)
    if not animal:
        raise NotFound("Animal not found")
    ensure_active(animal)
    saved = await _apply_sale(uow, animal, payload, payload.sold_price)
    await uow.commit()
    logger.info("Animal %s sold to %s", animal.ear_tag, payload.sold_to)
    return saved


async def mark_deceased(
    uow: UnitOfWork, account_id: UUID, animal_id: UUID, payload: DeathInput
) -> Animal:
    animal = await uow.animals.get(account_id, animal_id)
    if not animal:
        raise NotFound("Animal not found")
    ensure_active(animal)
    animal.mark_deceased(payload.death_date, payload.death_reason)
    saved = await uow.animals.save(animal)
    await uow.commit()
    logger.info("Animal %s marked deceased", animal.ear_tag)
    return saved


async def batch_sell(
    uow: UnitOfWork, account_id: UUID, animal_ids: list[UUID], payload: SaleInput
) -> list[Animal]:
    """Sell every selected animal, or none of them.

    ``payload.sold_price`` is the total for the batch; each animal is sold for
    its share of it (see ``split_total``).
    """
    _validate_sale(payload)
    animals = await _load_active(uow, account_id, animal_ids)
    shares = split_total(payload.sold_price, len(animals))
    saved = [
        await _apply_sale(uow, animal, payload, share)
        for animal, share in zip(animals, shares)
    ]
    await uow.commit()
    logger.info("Batch sale of %d animals to %s", len(saved), payload.sold_to)
    return saved


async def batch_mark_deceased(
    uow: UnitOfWork, account_id: UUID, animal_ids: list[UUID], payload: DeathInput
) -> list[Animal]:
    animals = await _load_active(uow, account_id, animal_ids)
    saved: list[Animal] = []
    for animal in animals:
        animal.mark_deceased(payload.death_date, payload.death_reason)
        saved.append(await uow.animals.save(animal))
    await uow.commit()
    logger.info("Batch death record for %d animals", len(saved))
    return saved
