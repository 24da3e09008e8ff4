from __future__ import annotations

import logging
from collections import Counter
from decimal import Decimal

from farmtrack.application.use_cases.dashboard.report_data import (
    FullReportData,
    HealthExpenseReportData,
    MilkReportData,
)
from farmtrack.domain.models.transaction import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from farmtrack.domain.services.animals import age_in_months, classify_animal
from farmtrack.infrastructure.reports.pdf_generator import PDFGenerator
from farmtrack.utils.datetime_tz import format_day, format_month

logger = logging.getLogger(__name__)


def _category_label(key: str) -> str:
    return INCOME_CATEGORIES.get(key) or EXPENSE_CATEGORIES.get(key) or key


def _range_label(data: HealthExpenseReportData) -> str:
    start = data.date_range.start
    end = data.date_range.end
    if start is None and end is None:
        return "All time"
    return f"{format_day(start)} to {format_day(end)}"


class ReportService:
    """Turns report datasets into PDF documents."""

    def __init__(self, pdf_generator: PDFGenerator):
        self.pdf_generator = pdf_generator

    def _milk_elements(self, data: MilkReportData) -> list:
        gen = self.pdf_generator
        summary = data.summary
        elements = gen.create_kpi_section(
            "Summary",
            {
                "Total production (L)": summary.total_this_month,
                "Average per day (L)": summary.average_daily,
                "Days with production": summary.days_with_production,
                "Price per liter": summary.price_per_liter,
                "Potential income": summary.potential_income,
                "Recorded milk sales": data.total_income,
            },
        )
        daily = {
            f"{day.day:02d}": total
            for day, total in sorted(summary.daily_totals.items())
        }
        elements += gen.create_chart_section("Daily production (L)", daily, chart_type="line")
        rows = [
            [
                r.date,
                data.ear_tags.get(r.animal_id, "-"),
                r.morning_amount,
                r.evening_amount,
                r.total_amount,
                r.quality or "-",
            ]
            for r in data.records
        ]
        morning = sum((r.morning_amount for r in data.records), Decimal("0"))
        evening = sum((r.evening_amount for r in data.records), Decimal("0"))
        elements += gen.create_table_section(
            "Records",
            rows,
            ["Date", "Ear tag", "Morning (L)", "Evening (L)", "Total (L)", "Quality"],
            footer=["Total", "", morning, evening, morning + evening, ""] if rows else None,
        )
        return elements

    def _health_elements(self, data: HealthExpenseReportData) -> list:
        gen = self.pdf_generator
        expenses = data.expenses
        elements = gen.create_kpi_section(
            "Summary",
            {"Total cost": expenses.total, "Records with cost": expenses.count},
        )
        elements += gen.create_chart_section("Cost by record type", dict(expenses.by_type))
        rows = [
            [
                r.date,
                data.ear_tags.get(r.animal_id, "-"),
                r.record_type,
                r.title,
                r.vet_name or "-",
                r.cost,
            ]
            for r in data.records
        ]
        elements += gen.create_table_section(
            "Records",
            rows,
            ["Date", "Ear tag", "Type", "Title", "Veterinarian", "Cost"],
            footer=["Total", "", "", "", "", expenses.total] if rows else None,
        )
        return elements

    def build_milk_report(self, data: MilkReportData) -> bytes:
        gen = self.pdf_generator
        elements = gen.create_header("Milk production report", format_month(data.month))
        elements += self._milk_elements(data)
        logger.info("Built milk report for %s (%d records)", data.month, len(data.records))
        return gen.generate_pdf(elements)

    def build_health_expense_report(self, data: HealthExpenseReportData) -> bytes:
        gen = self.pdf_generator
        elements = gen.create_header("Health expenses report", _range_label(data))
        elements += self._health_elements(data)
        logger.info("Built health expense report (%d records)", len(data.records))
        return gen.generate_pdf(elements)

    def build_full_report(self, data: FullReportData) -> bytes:
        gen = self.pdf_generator
        activity = data.activity
        finance = data.finance
        elements = gen.create_header("Farm report", format_day(data.today))
        elements += gen.create_kpi_section(
            "Herd",
            {
                "Total animals": activity.total_animals,
                "Pregnant": activity.pregnant_count,
                "Vaccinations recorded": data.vaccination_count,
                "Vaccination completion (%)": activity.vaccination_completion_rate,
            },
        )
        categories = Counter(
            classify_animal(a.species, a.gender, age_in_months(a.birth_date, data.today)).label
            for a in data.animals
            if a.is_active
        )
        elements += gen.create_chart_section("Active animals by category", dict(categories))
        elements += gen.create_chart_section(
            "Species distribution", dict(activity.species_distribution)
        )
        elements += gen.create_table_section(
            "Monthly activity",
            [
                [m.label, m.animals_added, m.vaccinations, m.births_expected]
                for m in activity.months
            ],
            ["Month", "Animals added", "Vaccinations", "Births expected"],
        )
        elements += gen.create_kpi_section(
            "Finance",
            {
                "Total income": finance.total_income,
                "Total expense": finance.total_expense,
                "Balance": finance.balance,
            },
        )
        breakdown = [
            ["Income", _category_label(key), amount]
            for key, amount in sorted(finance.income_by_category.items())
        ] + [
            ["Expense", _category_label(key), amount]
            for key, amount in sorted(finance.expense_by_category.items())
        ]
        elements += gen.create_table_section(
            "By category", breakdown, ["Type", "Category", "Amount"]
        )
        elements += gen.create_header("Milk production", format_month(data.milk.month))
        elements += self._milk_elements(data.milk)
        elements += gen.create_header("Health expenses", _range_label(data.health))
        elements += self._health_elements(data.health)
        logger.info("Built full report for %s", data.today)
        return gen.generate_pdf(elements)
