from __future__ import annotations

import io
import math
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from xml.sax.saxutils import escape

from reportlab.graphics.charts.barcharts import VerticalBarChart
from reportlab.graphics.charts.linecharts import HorizontalLineChart
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from farmtrack.utils.datetime_tz import format_day

BRAND_GREEN = colors.HexColor("#16a34a")
BRAND_DARK = colors.HexColor("#14532d")
ROW_TINT = colors.HexColor("#f0fdf4")


class PDFGenerator:
    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    @staticmethod
    def _thin_labels(labels: list[str], max_labels: int = 10) -> list[str]:
        """Keep roughly ``max_labels`` axis labels visible and blank the rest."""
        if len(labels) <= max_labels:
            return labels
        stride = max(1, math.ceil(len(labels) / max_labels))
        return [
            lbl if (i % stride == 0 or i == len(labels) - 1) else "" for i, lbl in enumerate(labels)
        ]

    @staticmethod
    def format_value(value: Any) -> str:
        if value is None:
            return "-"
        if isinstance(value, Decimal):
            return f"{value:,.2f}"
        if isinstance(value, float):
            return f"{value:,.1f}"
        if isinstance(value, (date, datetime)):
            return format_day(value if isinstance(value, date) else value.date())
        return str(value)

    def _setup_custom_styles(self):
        self.styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=self.styles["Heading1"],
                fontSize=18,
                spaceAfter=24,
                textColor=BRAND_DARK,
                alignment=1,  # Center
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SectionHeading",
                parent=self.styles["Heading2"],
                fontSize=14,
                spaceAfter=12,
                textColor=BRAND_DARK,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="ReportSubtitle",
                parent=self.styles["Heading3"],
                fontSize=12,
                spaceAfter=6,
                textColor=BRAND_GREEN,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="CellText",
                parent=self.styles["Normal"],
                fontSize=8,
                leading=10,
            )
        )

    def create_header(self, title: str, subtitle: str | None = None) -> list:
        elements = [Paragraph(escape(title), self.styles["ReportTitle"])]
        if subtitle:
            elements.append(Paragraph(escape(subtitle), self.styles["ReportSubtitle"]))
        generated = datetime.now(timezone.utc).strftime("%d/%m/%Y %H:%M UTC")
        elements.append(Paragraph(f"Generated on: {generated}", self.styles["Normal"]))
        elements.append(Spacer(1, 20))
        return elements

    def create_kpi_section(self, title: str, kpis: dict[str, Any]) -> list:
        """Two-column label/value table used for headline figures."""
        elements = [Paragraph(escape(title), self.styles["SectionHeading"])]
        data = [[label, self.format_value(value)] for label, value in kpis.items()]
        if data:
            table = Table(data, colWidths=[3 * inch, 2 * inch])
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, -1), ROW_TINT),
                        ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
                        ("ALIGN", (0, 0), (0, -1), "LEFT"),
                        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
                        ("FONTNAME", (1, 0), (1, -1), "Helvetica-Bold"),
                        ("FONTSIZE", (0, 0), (-1, -1), 10),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
                        ("TOPPADDING", (0, 0), (-1, -1), 8),
                        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ]
                )
            )
            elements.append(table)
        elements.append(Spacer(1, 20))
        return elements

    def create_table_section(
        self,
        title: str,
        rows: list[list[Any]],
        columns: list[str],
        *,
        footer: list[Any] | None = None,
    ) -> list:
        elements = [Paragraph(escape(title), self.styles["SectionHeading"])]
        if not rows:
            elements.append(Paragraph("No data available", self.styles["Normal"]))
            elements.append(Spacer(1, 20))
            return elements

        table_data: list[list[Any]] = [columns]
        for row in rows:
            cells = []
            for value in row:
                if isinstance(value, str):
                    # Wrap free text so long notes do not overflow the cell
                    cells.append(Paragraph(escape(value), self.styles["CellText"]))
                else:
                    cells.append(self.format_value(value))
            table_data.append(cells)
        if footer is not None:
            table_data.append([self.format_value(v) if v != "" else "" for v in footer])

        col_width = 6.5 * inch / len(columns)
        table = Table(table_data, colWidths=[col_width] * len(columns), repeatRows=1)
        commands = [
            ("BACKGROUND", (0, 0), (-1, 0), BRAND_GREEN),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 9),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, ROW_TINT]),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 1), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        if footer is not None:
            commands += [
                ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                ("BACKGROUND", (0, -1), (-1, -1), colors.lightgrey),
            ]
        table.setStyle(TableStyle(commands))
        elements.append(table)
        elements.append(Spacer(1, 20))
        return elements

    def create_chart_section(
        self, title: str, chart_data: dict[str, Any], chart_type: str = "bar"
    ) -> list:
        elements = [Paragraph(escape(title), self.styles["SectionHeading"])]
        if not chart_data:
            elements.append(Paragraph("No data available", self.styles["Normal"]))
        elif chart_type == "line":
            elements.append(self._create_line_chart(chart_data))
        else:
            elements.append(self._create_bar_chart(chart_data))
        elements.append(Spacer(1, 20))
        return elements

    def _apply_value_axis_padding(self, chart, values: list[float], padding: float = 10.0):
        """Give the value axis headroom so small or all-zero series stay visible."""
        if not values:
            return
        vmin = min(values)
        vmax = max(values)
        if vmin == 0 and vmax == 0:
            chart.valueAxis.valueMin = 0
            chart.valueAxis.valueMax = padding
            return
        chart.valueAxis.valueMin = max(0.0, math.floor(vmin - padding))
        chart.valueAxis.valueMax = math.ceil(vmax + padding)

    def _create_bar_chart(self, data: dict[str, Any]) -> Drawing:
        drawing = Drawing(400, 200)
        chart = VerticalBarChart()
        chart.x = 50
        chart.y = 50
        chart.height = 125
        chart.width = 300

        labels = list(data.keys())[:12]
        values = [float(data[label]) for label in labels]

        chart.data = [values]
        chart.categoryAxis.categoryNames = labels
        chart.bars[0].fillColor = BRAND_GREEN
        self._apply_value_axis_padding(chart, values)

        drawing.add(chart)
        return drawing

    def _create_line_chart(self, data: dict[str, Any]) -> Drawing:
        drawing = Drawing(400, 200)
        chart = HorizontalLineChart()
        chart.x = 50
        chart.y = 50
        chart.height = 125
        chart.width = 300

        labels = list(data.keys())
        values = [float(data[label]) for label in labels]

        chart.data = [values]
        chart.categoryAxis.categoryNames = self._thin_labels(labels, 10)
        chart.categoryAxis.labels.angle = 45
        chart.lines[0].strokeColor = BRAND_GREEN
        self._apply_value_axis_padding(chart, values)

        drawing.add(chart)
        return drawing

    def generate_pdf(self, elements: list) -> bytes:
        """Render the flowables into an A4 document and return the raw bytes."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=A4, rightMargin=72, leftMargin=72, topMargin=72, bottomMargin=18
        )
        doc.build(elements)
        pdf_data = buffer.getvalue()
        buffer.close()
        return pdf_data
