import datetime as dt

import pytest

from helpers import bill_row, xlsx_bytes


@pytest.fixture
def smith_lee_bytes() -> bytes:
    return xlsx_bytes([
        bill_row(1, "Dr. Smith", "Asha Rao", "MRI", 100.00, "05/03/24"),
        bill_row(2, "Dr. Lee", "Ravi Kumar", "CT", 75.00, "06/03/24"),
        bill_row(3, "Dr. Smith", "Meena Das", "CT", "200.50", "07/03/2024"),
        bill_row(4, "Dr. Smith", "John Paul", "X-Ray", 50.25, dt.datetime(2024, 3, 8)),
    ])
