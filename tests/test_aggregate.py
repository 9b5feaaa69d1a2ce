import datetime as dt
from decimal import Decimal

from doctor_ic.aggregate import (
    count_by_department,
    format_amount,
    group_by_doctor,
    sort_roster,
    total_charge,
)
from doctor_ic.models import DoctorSummary, PatientRecord
from helpers import make_doctor


def rec(name, dept="MRI", ic="0"):
    return PatientRecord(name, dept, Decimal(ic), dt.date(2024, 3, 5))


def test_group_keeps_first_seen_order():
    rows = [("B", rec("1")), ("A", rec("2")), ("B", rec("3"))]
    doctors = group_by_doctor(rows)
    assert [d.doctor_name for d in doctors] == ["B", "A"]
    assert [p.patient_name for p in doctors[0].patients] == ["1", "3"]


def test_sort_roster_by_name():
    roster = sort_roster([make_doctor("Dr. Smith", 1), make_doctor("Dr. Lee", 1)])
    assert [d.doctor_name for d in roster] == ["Dr. Lee", "Dr. Smith"]


def test_total_charge_is_exact():
    smith = DoctorSummary("Dr. Smith", (rec("a", ic="100.00"), rec("b", ic="200.50"), rec("c", ic="50.25")))
    assert total_charge(smith) == Decimal("350.75")
    assert total_charge(smith) == total_charge(smith)
    assert format_amount(total_charge(smith)) == "350.75"


def test_total_charge_avoids_float_drift():
    doctor = DoctorSummary("Dr. X", tuple(rec(str(i), ic="0.1") for i in range(3)))
    assert total_charge(doctor) == Decimal("0.3")


def test_total_of_empty_doctor():
    assert format_amount(total_charge(DoctorSummary("Dr. Empty"))) == "0.00"


def test_count_by_department_is_case_sensitive():
    doctor = DoctorSummary("Dr. X", (rec("a", "MRI"), rec("b", "mri"), rec("c", "CT"), rec("d", "MRI")))
    assert count_by_department(doctor, "MRI") == 2
    assert count_by_department(doctor, "mri") == 1
    assert count_by_department(doctor, "CT") == 1
    assert count_by_department(doctor, "X-Ray") == 0
