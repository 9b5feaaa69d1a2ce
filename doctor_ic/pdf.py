"""
Printable documents (reportlab).

- selection_pdf: the one-page sheet for up to two selected doctors
- roster_pdf: every doctor with its total IC, two blank columns for notes
"""
from __future__ import annotations

import io
import logging
from typing import Any, List, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    FrameBreak,
    KeepInFrame,
    PageTemplate,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from doctor_ic.aggregate import format_amount, total_charge
from doctor_ic.config import CURRENCY, PAGE_MARGIN, PAGE_SIZE, TWO_UP_GAP
from doctor_ic.layout import (
    PREPARED_BY,
    RECEIVER_SIGN,
    SUMMARY_NOTE,
    TABLE_HEADERS,
    DoctorBlock,
    print_block,
)
from doctor_ic.models import DoctorSummary

logger = logging.getLogger(__name__)

NO_SELECTION_TEXT = "No doctors selected."
ROSTER_TITLE = "Doctor IC Summary"


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "normal": base["Normal"],
        "heading": ParagraphStyle("IcHeading", parent=base["Normal"], fontSize=11, leading=14),
        "note": ParagraphStyle("IcNote", parent=base["Normal"], fontName="Helvetica-Oblique"),
        "total": ParagraphStyle("IcTotal", parent=base["Normal"], fontName="Helvetica-Bold", alignment=TA_RIGHT),
        "center": ParagraphStyle("IcCenter", parent=base["Normal"], fontSize=14, alignment=TA_CENTER),
        "title": base["Heading1"],
    }


def _content_size() -> tuple[float, float]:
    page_w, page_h = PAGE_SIZE
    return page_w - 2 * PAGE_MARGIN, page_h - 2 * PAGE_MARGIN


def _patient_table_style() -> TableStyle:
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E0E0E0")),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("ALIGN", (3, 0), (3, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("LEFTPADDING", (0, 0), (-1, -1), 4),
            ("RIGHTPADDING", (0, 0), (-1, -1), 4),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def block_flowables(block: DoctorBlock, width: float, styles: dict[str, ParagraphStyle]) -> List[Any]:
    """Flowables for one doctor: heading, table or summary, total, signatures."""
    story: List[Any] = [
        Paragraph(f"<b>{escape(block.heading)}</b>", styles["heading"]),
        Spacer(1, 8),
    ]

    if block.show_table:
        data = [list(TABLE_HEADERS)] + [line.as_row() for line in block.lines]
        unit = width / 7
        table = Table(data, colWidths=[2 * unit, 2 * unit, 2 * unit, unit], repeatRows=1)
        table.setStyle(_patient_table_style())
        story.append(table)
    else:
        story.append(Paragraph(escape(SUMMARY_NOTE), styles["note"]))
        story.append(Spacer(1, 8))
        for line in block.summary_lines():
            story.append(Paragraph(escape(line), styles["normal"]))

    story.append(Spacer(1, 16))
    story.append(Paragraph(escape(block.total_line), styles["total"]))
    story.append(Spacer(1, 16))

    signatures = Table([[PREPARED_BY, RECEIVER_SIGN]], colWidths=[width / 2, width / 2])
    signatures.setStyle(
        TableStyle(
            [
                ("ALIGN", (0, 0), (0, 0), "LEFT"),
                ("ALIGN", (1, 0), (1, 0), "RIGHT"),
                ("LEFTPADDING", (0, 0), (-1, -1), 0),
                ("RIGHTPADDING", (0, 0), (-1, -1), 0),
            ]
        )
    )
    story.append(signatures)
    return story


def _frame(x: float, y: float, w: float, h: float, frame_id: str) -> Frame:
    return Frame(x, y, w, h, id=frame_id, leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0)


def _selection_template(halves: bool) -> PageTemplate:
    width, height = _content_size()
    if not halves:
        return PageTemplate(id="full", frames=[_frame(PAGE_MARGIN, PAGE_MARGIN, width, height, "full")])

    half = (height - TWO_UP_GAP) / 2
    top = _frame(PAGE_MARGIN, PAGE_MARGIN + half + TWO_UP_GAP, width, half, "top")
    bottom = _frame(PAGE_MARGIN, PAGE_MARGIN, width, half, "bottom")
    return PageTemplate(id="two_up", frames=[top, bottom])


def selection_story(selected: Sequence[DoctorSummary]) -> List[Any]:
    styles = _styles()
    width, height = _content_size()

    if not selected:
        return [Spacer(1, height / 2 - 20), Paragraph(NO_SELECTION_TEXT, styles["center"])]

    if len(selected) == 1:
        return block_flowables(print_block(selected[0], 1), width, styles)

    half = (height - TWO_UP_GAP) / 2
    first, second = selected[0], selected[1]
    return [
        KeepInFrame(width, half, block_flowables(print_block(first, 2), width, styles), mode="shrink"),
        FrameBreak(),
        KeepInFrame(width, half, block_flowables(print_block(second, 2), width, styles), mode="shrink"),
    ]


def selection_pdf(selected: Sequence[DoctorSummary]) -> bytes:
    """
    Render the sheet for the selected doctors (at most the first two).

    None selected gives a placeholder page; one doctor gets the full page;
    two doctors share the page top and bottom.
    """
    selected = list(selected)[:2]
    with io.BytesIO() as buffer:
        doc = BaseDocTemplate(
            buffer,
            pagesize=PAGE_SIZE,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title="IC Sheet",
        )
        doc.addPageTemplates([_selection_template(halves=len(selected) == 2)])
        doc.build(selection_story(selected))
        pdf_bytes = buffer.getvalue()

    logger.info("Selection PDF built for %d doctor(s), %d bytes", len(selected), len(pdf_bytes))
    return pdf_bytes


def roster_rows(doctors: Sequence[DoctorSummary]) -> list[list[str]]:
    return [[d.doctor_name, format_amount(total_charge(d)), "", ""] for d in doctors]


def roster_pdf(doctors: Sequence[DoctorSummary]) -> bytes:
    """Whole-roster table, one row per doctor in the given order; pages as needed."""
    styles = _styles()
    width, _ = _content_size()

    data: list[list[Any]] = [["Doctor", f"Total IC ({CURRENCY})", "", ""]]
    for name, total, blank_a, blank_b in roster_rows(doctors):
        data.append([Paragraph(escape(name), styles["normal"]), total, blank_a, blank_b])

    table = Table(data, colWidths=[width * 0.4, width * 0.2, width * 0.2, width * 0.2], repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E0E0E0")),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("TOPPADDING", (0, 1), (-1, -1), 8),
                ("BOTTOMPADDING", (0, 1), (-1, -1), 8),
            ]
        )
    )

    with io.BytesIO() as buffer:
        doc = SimpleDocTemplate(
            buffer,
            pagesize=PAGE_SIZE,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=ROSTER_TITLE,
        )
        doc.build([Paragraph(ROSTER_TITLE, styles["title"]), Spacer(1, 12), table])
        pdf_bytes = buffer.getvalue()

    logger.info("Roster PDF built for %d doctor(s), %d bytes", len(doctors), len(pdf_bytes))
    return pdf_bytes
