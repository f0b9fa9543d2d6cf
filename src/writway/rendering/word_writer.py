"""
Word (.docx) writer for claim content plans (python-docx).
"""

from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from writway.claims.content_plan import Block


def render_word(blocks: list[Block]) -> bytes:
    """Render a content plan to .docx bytes."""
    doc = Document()
    doc.core_properties.title = "Plaintiff's Claim"
    doc.core_properties.author = "WritWay"

    normal = doc.styles["Normal"]
    normal.font.size = Pt(11)

    for block in blocks:
        if block.kind == "title":
            heading = doc.add_heading(block.text, level=1)
            heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
        elif block.kind == "subtitle":
            p = doc.add_paragraph(block.text)
            p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        elif block.kind == "heading":
            doc.add_heading(block.text, level=2)
        elif block.kind == "subheading":
            doc.add_heading(block.text, level=3)
        elif block.kind == "paragraph":
            for chunk in block.text.split("\n\n"):
                doc.add_paragraph(chunk.strip())
        elif block.kind == "table":
            table = doc.add_table(rows=0, cols=2)
            table.style = "Table Grid"
            for label, value in block.rows:
                cells = table.add_row().cells
                cells[0].text = label
                cells[1].text = value
                for run in cells[0].paragraphs[0].runs:
                    run.bold = True
        elif block.kind == "bullets":
            for item in block.items:
                doc.add_paragraph(item, style="List Bullet")
        elif block.kind == "page_break":
            doc.add_page_break()
        elif block.kind == "footer":
            doc.add_paragraph()
            p = doc.add_paragraph()
            p.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = p.add_run(block.text)
            run.font.size = Pt(9)
        else:
            doc.add_paragraph(block.text)

    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()
