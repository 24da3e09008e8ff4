from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Vaccination:
    id: UUID
    account_id: UUID
    animal_id: UUID
    name: str
    date: date
    next_date: date | None = None
    completed: bool = False
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        account_id: UUID,
        animal_id: UUID,
        name: str,
        date: date,
        next_date: date | None = None,
        completed: bool = False,
        notes: str | None = None,
    ) -> Vaccination:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            animal_id=animal_id,
            name=name,
            date=date,
            next_date=next_date,
            completed=completed,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)


# Predefined vaccine names offered in pick lists; free text is still accepted
VACCINE_CATALOG: list[dict[str, str]] = [
    {"value": "foot_and_mouth", "label": "Foot-and-mouth disease"},
    {"value": "brucella", "label": "Brucellosis"},
    {"value": "anthrax", "label": "Anthrax"},
    {"value": "clostridial", "label": "Clostridial (enterotoxaemia etc.)"},
    {"value": "pasteurella", "label": "Pasteurella (respiratory)"},
    {"value": "leptospirosis", "label": "Leptospirosis"},
    {"value": "ibr", "label": "IBR (infectious bovine rhinotracheitis)"},
    {"value": "bvd", "label": "BVD (bovine viral diarrhoea)"},
    {"value": "rotavirus", "label": "Rotavirus (calf scours)"},
    {"value": "coronavirus", "label": "Coronavirus (calf scours)"},
    {"value": "rabies", "label": "Rabies"},
    {"value": "ppd", "label": "PPD (tuberculin) test"},
    {"value": "theileriosis", "label": "Theileriosis"},
    {"value": "ecthyma", "label": "Contagious ecthyma (orf)"},
    {"value": "pox", "label": "Sheep/goat pox"},
    {"value": "enterotoxaemia", "label": "Enterotoxaemia"},
    {"value": "blackleg", "label": "Blackleg (Clostridium chauvoei)"},
    {"value": "agalactia", "label": "Contagious agalactia"},
    {"value": "mastitis", "label": "Mastitis"},
    {"value": "other", "label": "Other"},
]
