"""
PDF writer for claim content plans (reportlab platypus).
"""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from writway.claims.content_plan import Block


MARGIN = 50


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ClaimTitle",
            parent=base["Heading1"],
            fontSize=16,
            alignment=TA_CENTER,
            spaceAfter=4,
        ),
        "subtitle": ParagraphStyle(
            "ClaimSubtitle",
            parent=base["Normal"],
            fontSize=11,
            alignment=TA_CENTER,
            spaceAfter=8,
        ),
        "heading": ParagraphStyle(
            "ClaimHeading",
            parent=base["Heading2"],
            fontSize=13,
            spaceBefore=12,
            spaceAfter=6,
        ),
        "subheading": ParagraphStyle(
            "ClaimSubheading",
            parent=base["Heading3"],
            fontSize=11,
            spaceBefore=6,
            spaceAfter=4,
        ),
        "line": ParagraphStyle("ClaimLine", parent=base["Normal"], fontSize=11, leading=15),
        "paragraph": ParagraphStyle(
            "ClaimParagraph",
            parent=base["Normal"],
            fontSize=11,
            leading=15,
            spaceAfter=8,
        ),
        "footer": ParagraphStyle(
            "ClaimFooter",
            parent=base["Normal"],
            fontSize=9,
            alignment=TA_CENTER,
            textColor=colors.grey,
            spaceBefore=24,
        ),
    }


def _amount_table(rows: tuple[tuple[str, str], ...]) -> Table:
    table = Table([list(row) for row in rows], colWidths=[2.5 * inch, 3.5 * inch])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (0, -1), colors.lightgrey),
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    return table


def render_pdf(blocks: list[Block]) -> bytes:
    """Render a content plan to PDF bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=LETTER,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        title="Plaintiff's Claim",
        author="WritWay",
    )
    styles = _styles()
    story = []

    for block in blocks:
        if block.kind == "table":
            story.append(_amount_table(block.rows))
            story.append(Spacer(1, 0.1 * inch))
        elif block.kind == "bullets":
            for item in block.items:
                story.append(Paragraph(escape(item), styles["line"], bulletText="•"))
        elif block.kind == "page_break":
            story.append(PageBreak())
        elif block.kind == "paragraph":
            for chunk in block.text.split("\n\n"):
                text = escape(chunk.strip()).replace("\n", "<br/>")
                story.append(Paragraph(text, styles["paragraph"]))
        else:
            story.append(Paragraph(escape(block.text), styles[block.kind]))

    doc.build(story)
    return buffer.getvalue()
