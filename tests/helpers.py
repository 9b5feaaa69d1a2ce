import datetime as dt
import io
from decimal import Decimal

from openpyxl import Workbook

from doctor_ic.models import DoctorSummary, PatientRecord

HEADER = ["S.No", "Doctor", "Patient Name", "Department", "Service Name",
          "Price", "Discount", "Total", "IC", "Bill Date"]

FIXED_TODAY = dt.date(2030, 1, 2)


def fixed_clock() -> dt.date:
    return FIXED_TODAY


def xlsx_bytes(rows, header=HEADER, extra_sheet=None) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.append(header)
    for r in rows:
        ws.append(list(r))
    if extra_sheet is not None:
        other = wb.create_sheet("Other")
        for r in extra_sheet:
            other.append(list(r))
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def bill_row(n, doctor, patient, dept, ic, bill_date):
    return [n, doctor, patient, dept, "Scan", 0, 0, 0, ic, bill_date]


def make_doctor(name, n_patients, dept="MRI", ic="10.00") -> DoctorSummary:
    return DoctorSummary(
        doctor_name=name,
        patients=tuple(
            PatientRecord(f"Patient {i}", dept, Decimal(ic), dt.date(2024, 3, 5))
            for i in range(n_patients)
        ),
    )
