"""
Doctor grouping and per-doctor totals.

Totals are recomputed on every call; the preview and the print path both
go through these helpers.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from doctor_ic.config import DEPT_CT, DEPT_MRI
from doctor_ic.models import DoctorSummary, PatientRecord


def group_by_doctor(rows: Iterable[tuple[str, PatientRecord]]) -> list[DoctorSummary]:
    """
    Group (doctor_name, patient) pairs into DoctorSummary objects.

    Doctors keep the order they were first seen in; patients keep row order.
    """
    doctor_map: dict[str, list[PatientRecord]] = {}
    for doctor_name, patient in rows:
        doctor_map.setdefault(doctor_name, []).append(patient)
    return [DoctorSummary(doctor_name=name, patients=tuple(patients)) for name, patients in doctor_map.items()]


def sort_roster(doctors: Iterable[DoctorSummary]) -> tuple[DoctorSummary, ...]:
    return tuple(sorted(doctors, key=lambda d: d.doctor_name))


def total_charge(summary: DoctorSummary) -> Decimal:
    return sum((p.ic for p in summary.patients), Decimal("0"))


def count_by_department(summary: DoctorSummary, name: str) -> int:
    # exact match, "mri" is not "MRI"
    return sum(1 for p in summary.patients if p.department == name)


def mri_count(summary: DoctorSummary) -> int:
    return count_by_department(summary, DEPT_MRI)


def ct_count(summary: DoctorSummary) -> int:
    return count_by_department(summary, DEPT_CT)


def format_amount(value: Decimal) -> str:
    return f"{value:.2f}"
