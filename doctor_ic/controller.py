"""
Actions behind the UI: upload, print and export.

Each action awaits its work before returning and the page runs one action
per script run, so decode and render never overlap.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from doctor_ic.ingest import Clock, clinic_today, parse_spreadsheet
from doctor_ic.pdf import roster_pdf, selection_pdf
from doctor_ic.state import AppState
from doctor_ic.workbook import roster_workbook

logger = logging.getLogger(__name__)


class IcController:
    def __init__(self, state: Optional[AppState] = None, clock: Clock = clinic_today):
        self.state = state or AppState()
        self.clock = clock

    async def upload(self, data: Optional[bytes]) -> AppState:
        """Replace the roster with the parsed file; no bytes leaves the state alone."""
        if not data:
            logger.debug("Upload without data ignored")
            return self.state
        doctors = await asyncio.to_thread(parse_spreadsheet, data, self.clock)
        self.state = self.state.with_roster(doctors)
        return self.state

    def select_a(self, name: Optional[str]) -> AppState:
        self.state = self.state.select_a(name)
        return self.state

    def select_b(self, name: Optional[str]) -> AppState:
        self.state = self.state.select_b(name)
        return self.state

    async def print_selection(self) -> Optional[bytes]:
        if not self.state.can_print:
            return None
        return await asyncio.to_thread(selection_pdf, self.state.selected())

    async def print_roster(self) -> Optional[bytes]:
        if not self.state.has_roster:
            return None
        return await asyncio.to_thread(roster_pdf, self.state.roster)

    async def export_workbook(self) -> Optional[bytes]:
        if not self.state.has_roster:
            return None
        return await asyncio.to_thread(roster_workbook, self.state.roster)
