"""Roster export to Excel: an "All" sheet plus one sheet per doctor."""
from __future__ import annotations

import logging
from io import BytesIO
from typing import Sequence

import pandas as pd

from doctor_ic.config import CURRENCY, DISPLAY_DATE_FORMAT
from doctor_ic.models import DoctorSummary

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def safe_sheet_name(name: str, used: set[str]) -> str:
    # Excel rejects names that start or end with an apostrophe
    safe = str(name).strip("'")[:31].strip("'")
    for ch in ['\\', '/', '*', '?', ':', '[', ']']:
        safe = safe.replace(ch, '-')
    safe = safe or "Unknown"

    # Excel compares sheet names case-insensitively
    candidate = safe
    n = 2
    while candidate.lower() in used:
        suffix = f" ({n})"
        candidate = safe[:31 - len(suffix)] + suffix
        n += 1
    used.add(candidate.lower())
    return candidate


def roster_frame(doctors: Sequence[DoctorSummary]) -> pd.DataFrame:
    rows = []
    for d in doctors:
        for p in d.patients:
            rows.append({
                "Doctor": d.doctor_name,
                "Patient Name": p.patient_name,
                "Department": p.department,
                "Bill Date": p.bill_date.strftime(DISPLAY_DATE_FORMAT),
                f"IC ({CURRENCY})": float(p.ic),
            })
    return pd.DataFrame(rows, columns=["Doctor", "Patient Name", "Department", "Bill Date", f"IC ({CURRENCY})"])


def roster_workbook(doctors: Sequence[DoctorSummary]) -> bytes:
    all_df = roster_frame(doctors)
    used = {"all"}

    output = BytesIO()
    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        all_df.to_excel(writer, sheet_name="All", index=False)
        for d in doctors:
            doc_df = all_df[all_df["Doctor"] == d.doctor_name]
            doc_df.to_excel(writer, sheet_name=safe_sheet_name(d.doctor_name, used), index=False)

    data = output.getvalue()
    output.close()
    logger.info("Roster workbook built: %d doctors, %d rows", len(doctors), len(all_df))
    return data
