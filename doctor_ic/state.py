"""
Session snapshot: the current roster plus the Doctor A / Doctor B picks.

Snapshots are never changed in place; each transition returns a new one.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from doctor_ic.aggregate import sort_roster
from doctor_ic.models import DoctorSummary


@dataclass(frozen=True)
class AppState:
    roster: tuple[DoctorSummary, ...] = ()
    doctor_a: Optional[str] = None
    doctor_b: Optional[str] = None

    def with_roster(self, doctors: Iterable[DoctorSummary]) -> "AppState":
        return AppState(roster=sort_roster(doctors))

    def find(self, name: Optional[str]) -> Optional[DoctorSummary]:
        if name is None:
            return None
        for d in self.roster:
            if d.doctor_name == name:
                return d
        return None

    def doctor_names(self) -> list[str]:
        return [d.doctor_name for d in self.roster]

    def doctor_b_options(self) -> list[str]:
        return [n for n in self.doctor_names() if n != self.doctor_a]

    def select_a(self, name: Optional[str]) -> "AppState":
        if name is not None and self.find(name) is None:
            raise KeyError(name)
        doctor_b = None if self.doctor_b == name else self.doctor_b
        return replace(self, doctor_a=name, doctor_b=doctor_b)

    def select_b(self, name: Optional[str]) -> "AppState":
        if name is not None and (self.find(name) is None or name == self.doctor_a):
            raise KeyError(name)
        return replace(self, doctor_b=name)

    def selected(self) -> list[DoctorSummary]:
        return [d for d in (self.find(self.doctor_a), self.find(self.doctor_b)) if d is not None]

    @property
    def has_roster(self) -> bool:
        return bool(self.roster)

    @property
    def can_print(self) -> bool:
        return bool(self.selected())
