"""
Global config for the IC generator.

Values that a clinic deployment may need to change are read from the
environment; layout constants are fixed.
"""
import logging
import os

from reportlab.lib.pagesizes import A4

# =========================
# Environment
# =========================

LOG_LEVEL = os.getenv("IC_LOG_LEVEL", "INFO").strip().upper()
CLINIC_TIMEZONE = os.getenv("IC_CLINIC_TIMEZONE", "Asia/Kolkata").strip()
CURRENCY = os.getenv("IC_CURRENCY", "INR").strip()

# =========================
# Spreadsheet layout (0-indexed)
# 0 S.No, 4 Service Name, 5 Price, 6 Discount, 7 Total are not read
# =========================

COL_DOCTOR = 1
COL_PATIENT = 2
COL_DEPARTMENT = 3
COL_IC = 8
COL_BILL_DATE = 9

DATE_FORMATS = ("%d/%m/%y", "%d/%m/%Y")
DISPLAY_DATE_FORMAT = "%d/%m/%y"

# =========================
# Layout
# =========================

PATIENT_ROW_BUDGET = 9
DEPT_MRI = "MRI"
DEPT_CT = "CT"

NAME_MAX_CHARS = 14
NAME_KEEP_CHARS = 11

PAGE_SIZE = A4
PAGE_MARGIN = 24
TWO_UP_GAP = 10


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
