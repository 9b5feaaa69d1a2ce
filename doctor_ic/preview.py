"""On-screen preview of the selected doctors (Streamlit)."""
from __future__ import annotations

import re
from typing import Any

import pandas as pd

from doctor_ic.layout import PREPARED_BY, RECEIVER_SIGN, SUMMARY_NOTE, TABLE_HEADERS, DoctorBlock, preview_block
from doctor_ic.state import AppState

PANE_HEIGHT = 520
IC_COLUMN = TABLE_HEADERS[-1]

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$])")


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIALS.sub(r"\\\1", text)


def patient_table(block: DoctorBlock):
    df = pd.DataFrame([line.as_row() for line in block.lines], columns=list(TABLE_HEADERS))
    return df.style.set_properties(subset=[IC_COLUMN], **{"text-align": "right"})


def render_block(pane: Any, block: DoctorBlock) -> None:
    pane.markdown(f"**{escape_markdown(block.heading)}**")

    if block.show_table:
        pane.dataframe(patient_table(block), hide_index=True, width="stretch")
    else:
        pane.markdown(f"_{SUMMARY_NOTE}_")
        for line in block.summary_lines():
            pane.write(line)

    pane.markdown(
        f"<div style='text-align: right'><b>{block.total_line}</b></div>",
        unsafe_allow_html=True,
    )
    left, right = pane.columns(2)
    left.write(PREPARED_BY)
    right.markdown(f"<div style='text-align: right'>{RECEIVER_SIGN}</div>", unsafe_allow_html=True)


def render_preview(parent: Any, state: AppState) -> list[DoctorBlock]:
    """Side-by-side scrollable panes, one per selected doctor; nothing when none is selected."""
    blocks = [preview_block(d) for d in state.selected()]
    if not blocks:
        return blocks

    columns = parent.columns(len(blocks), gap="medium")
    for col, block in zip(columns, blocks):
        render_block(col.container(height=PANE_HEIGHT, border=True), block)
    return blocks
