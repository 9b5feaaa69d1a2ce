"""Roster data: one DoctorSummary per attending doctor, owning its patients."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PatientRecord:
    patient_name: str
    department: str
    ic: Decimal
    bill_date: dt.date


@dataclass(frozen=True)
class DoctorSummary:
    doctor_name: str
    patients: tuple[PatientRecord, ...] = field(default_factory=tuple)

    @property
    def patient_count(self) -> int:
        return len(self.patients)
