from __future__ import annotations

from dataclasses import dataclass, field

MAX_VACCINATION_LINES = 5


@dataclass(slots=True)
class BirthLine:
    ear_tag: str
    days: int


@dataclass(slots=True)
class VaccinationLine:
    ear_tag: str
    name: str
    days: int


@dataclass(slots=True)
class DigestInput:
    recipient_name: str | None
    active_animals: int
    upcoming_births: list[BirthLine] = field(default_factory=list)
    overdue_vaccinations: list[VaccinationLine] = field(default_factory=list)
    upcoming_vaccinations: list[VaccinationLine] = field(default_factory=list)

    @property
    def has_news(self) -> bool:
        return bool(
            self.upcoming_births or self.overdue_vaccinations or self.upcoming_vaccinations
        )


def _capped(lines: list[str], total: int) -> list[str]:
    shown = lines[:MAX_VACCINATION_LINES]
    if total > MAX_VACCINATION_LINES:
        shown.append(f"... and {total - MAX_VACCINATION_LINES} more")
    return shown


def _birth_text(line: BirthLine) -> str:
    if line.days == 0:
        return f"• {line.ear_tag}: birth expected today"
    return f"• {line.ear_tag}: {line.days} days until birth"


def _upcoming_text(line: VaccinationLine) -> str:
    if line.days == 0:
        return f"• {line.ear_tag}: {line.name} - due today"
    return f"• {line.ear_tag}: {line.name} - in {line.days} days"


def build_daily_digest(data: DigestInput) -> str | None:
    """Plain-text daily summary, or None when there is nothing to report."""
    if not data.has_news:
        return None

    greeting = f"Good morning, {data.recipient_name}!" if data.recipient_name else "Good morning!"
    parts: list[str] = [greeting, "", f"🐄 Active animals: {data.active_animals}"]

    if data.upcoming_births:
        parts += ["", f"🍼 UPCOMING BIRTHS ({len(data.upcoming_births)}):"]
        parts += [_birth_text(b) for b in data.upcoming_births]

    if data.overdue_vaccinations:
        parts += ["", f"⚠️ OVERDUE VACCINES ({len(data.overdue_vaccinations)}):"]
        parts += _capped(
            [
                f"• {v.ear_tag}: {v.name} - {abs(v.days)} days late!"
                for v in data.overdue_vaccinations
            ],
            len(data.overdue_vaccinations),
        )

    if data.upcoming_vaccinations:
        parts += ["", f"💉 UPCOMING VACCINES ({len(data.upcoming_vaccinations)}):"]
        parts += _capped(
            [_upcoming_text(v) for v in data.upcoming_vaccinations],
            len(data.upcoming_vaccinations),
        )

    parts += ["", "Have a productive day on the farm! 🌾"]
    return "\n".join(parts)
