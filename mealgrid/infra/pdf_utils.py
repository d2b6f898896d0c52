import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealgrid.utilities.constants import SIDES_LABEL


def _week_table(week):
    data = [[""] + list(week.days)]
    for row in week.rows:
        data.append([row.meal_type] + list(row.meals))
        data.append([SIDES_LABEL] + list(row.sides))

    style = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(week.light_color)),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("BOX", (0, 0), (-1, -1), 1, colors.HexColor(week.color)),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    for i in range(len(week.rows)):
        meal_line, side_line = 1 + 2 * i, 2 + 2 * i
        style += [
            ("BACKGROUND", (0, meal_line), (0, meal_line), colors.HexColor(week.light_color)),
            ("BACKGROUND", (1, meal_line), (-1, meal_line), colors.HexColor(week.side_cell_color)),
            ("BACKGROUND", (0, side_line), (0, side_line), colors.HexColor(week.side_label_color)),
        ]
    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(style))
    return table


def generate_pdf_for_calendar(weeks):
    """Generate a PDF with one table per week block: meal type rows and side rows by day."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Meal Plan – 4 Week Calendar", styles["Title"]),
        Spacer(1, 12),
    ]
    for week in weeks:
        elements.append(Paragraph(week.label, styles["Heading2"]))
        elements.append(_week_table(week))
        elements.append(Spacer(1, 16))

    doc.build(elements)
    return buf.getvalue()
