"""
Spreadsheet ingestion: billing export bytes -> DoctorSummary list.

Only the first sheet is read and its first row is always dropped as the
header. Rows missing any required cell are skipped; bad IC values become
0 and bad bill dates fall back to the clock.
"""
from __future__ import annotations

import datetime as dt
import io
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterator

import pandas as pd
import pytz

from doctor_ic.aggregate import group_by_doctor
from doctor_ic.config import (
    CLINIC_TIMEZONE,
    COL_BILL_DATE,
    COL_DEPARTMENT,
    COL_DOCTOR,
    COL_IC,
    COL_PATIENT,
    DATE_FORMATS,
)
from doctor_ic.models import DoctorSummary, PatientRecord

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.date]


def clinic_today() -> dt.date:
    """Today's date in the clinic time zone."""
    return dt.datetime.now(pytz.timezone(CLINIC_TIMEZONE)).date()


def is_missing(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, float) and pd.isna(v):
        return True
    return v is pd.NaT


def cell_text(v: Any) -> str:
    return str(v).strip()


def parse_ic(v: Any) -> Decimal:
    """IC amount as Decimal; anything unparsable (or NaN/inf, or "1_000") is 0."""
    text = cell_text(v)
    if "_" in text:
        logger.debug("IC value %r is not a number, using 0", v)
        return Decimal("0")
    try:
        value = Decimal(text)
    except InvalidOperation:
        logger.debug("IC value %r is not a number, using 0", v)
        return Decimal("0")
    if not value.is_finite():
        logger.debug("IC value %r is not finite, using 0", v)
        return Decimal("0")
    return value


def parse_bill_date(v: Any, clock: Clock = clinic_today) -> dt.date:
    """
    Bill date from a cell.

    Date cells are used as they are. Text is tried as dd/mm/yy, then
    dd/mm/yyyy; if both fail the clock's date is used.
    """
    if isinstance(v, dt.datetime):
        return v.date()
    if isinstance(v, dt.date):
        return v

    raw = cell_text(v)
    for fmt in DATE_FORMATS:
        try:
            return dt.datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    logger.debug("Bill date %r not recognised, using today", raw)
    return clock()


def _cell(row: tuple, idx: int) -> Any:
    return row[idx] if idx < len(row) else None


def iter_patient_rows(frame: pd.DataFrame, clock: Clock = clinic_today) -> Iterator[tuple[str, PatientRecord]]:
    """Yield (doctor_name, PatientRecord) for every usable data row."""
    skipped = 0
    parsed = 0
    # row 0 is the header, never inspected
    for row in frame.iloc[1:].itertuples(index=False, name=None):
        doctor = _cell(row, COL_DOCTOR)
        patient = _cell(row, COL_PATIENT)
        department = _cell(row, COL_DEPARTMENT)
        ic = _cell(row, COL_IC)
        bill_date = _cell(row, COL_BILL_DATE)

        if any(is_missing(v) for v in (doctor, patient, department, ic, bill_date)):
            skipped += 1
            continue

        parsed += 1
        yield cell_text(doctor), PatientRecord(
            patient_name=cell_text(patient),
            department=cell_text(department),
            ic=parse_ic(ic),
            bill_date=parse_bill_date(bill_date, clock),
        )

    logger.info("Spreadsheet rows parsed: %d, skipped: %d", parsed, skipped)


def read_first_sheet(data: bytes) -> pd.DataFrame:
    with io.BytesIO(data) as buffer:
        return pd.read_excel(buffer, sheet_name=0, header=None, dtype=object)


def parse_spreadsheet(data: bytes, clock: Clock = clinic_today) -> list[DoctorSummary]:
    """
    Parse billing export bytes into DoctorSummary objects.

    Doctors come back in first-seen order; sorting for display is up to
    the caller. A corrupt file raises whatever the Excel reader raises.
    """
    frame = read_first_sheet(data)
    doctors = group_by_doctor(iter_patient_rows(frame, clock))
    logger.info("Roster built: %d doctors", len(doctors))
    return doctors
