"""
Per-doctor block layout shared by the PDF and the on-screen preview.

Both backends render a DoctorBlock and nothing else, so the table/summary
choice and every displayed value are decided here once.
"""
from __future__ import annotations

from dataclasses import dataclass

from doctor_ic.aggregate import ct_count, format_amount, mri_count, total_charge
from doctor_ic.config import (
    CURRENCY,
    DISPLAY_DATE_FORMAT,
    NAME_KEEP_CHARS,
    NAME_MAX_CHARS,
    PATIENT_ROW_BUDGET,
)
from doctor_ic.models import DoctorSummary, PatientRecord

TABLE_HEADERS = ("Patient Name", "Department", "Bill Date", "IC")
SUMMARY_NOTE = f"Patient List Exceeds {PATIENT_ROW_BUDGET}. Showing Summary Only:"
PREPARED_BY = "Prepared by"
RECEIVER_SIGN = "Receiver's Sign"


@dataclass(frozen=True)
class PatientLine:
    name: str
    department: str
    bill_date: str
    ic: str

    def as_row(self) -> list[str]:
        return [self.name, self.department, self.bill_date, self.ic]


@dataclass(frozen=True)
class DoctorBlock:
    doctor_name: str
    show_table: bool
    lines: tuple[PatientLine, ...]
    patient_count: int
    mri_count: int
    ct_count: int
    total: str

    @property
    def heading(self) -> str:
        return f"Doctor: {self.doctor_name}"

    @property
    def total_line(self) -> str:
        return f"TOTAL ({CURRENCY}) {self.total}"

    def summary_lines(self) -> list[str]:
        return [
            f"Total Patients: {self.patient_count}",
            f"MRI Count: {self.mri_count}",
            f"CT Count: {self.ct_count}",
            f"Total IC: {self.total}",
        ]


def display_name(name: str) -> str:
    if len(name) > NAME_MAX_CHARS:
        return name[:NAME_KEEP_CHARS] + "..."
    return name


def patient_line(p: PatientRecord) -> PatientLine:
    return PatientLine(
        name=display_name(p.patient_name),
        department=p.department,
        bill_date=p.bill_date.strftime(DISPLAY_DATE_FORMAT),
        ic=format_amount(p.ic),
    )


def build_block(summary: DoctorSummary, show_table: bool) -> DoctorBlock:
    return DoctorBlock(
        doctor_name=summary.doctor_name,
        show_table=show_table,
        lines=tuple(patient_line(p) for p in summary.patients) if show_table else (),
        patient_count=summary.patient_count,
        mri_count=mri_count(summary),
        ct_count=ct_count(summary),
        total=format_amount(total_charge(summary)),
    )


def fits_row_budget(summary: DoctorSummary) -> bool:
    return summary.patient_count <= PATIENT_ROW_BUDGET


def print_block(summary: DoctorSummary, doctors_on_page: int) -> DoctorBlock:
    """Printed block: a lone doctor owns the whole page and always gets the table."""
    return build_block(summary, fits_row_budget(summary) or doctors_on_page == 1)


def preview_block(summary: DoctorSummary) -> DoctorBlock:
    """On-screen block: row budget only, no single-doctor exemption."""
    return build_block(summary, fits_row_budget(summary))
