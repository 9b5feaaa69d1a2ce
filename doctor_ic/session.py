"""
Streamlit session glue: one controller per browser session, one ingest
per uploaded file, and selectbox defaults taken from the controller state.

`session` is `st.session_state` in the app and a plain dict in tests.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, MutableMapping, Optional

from doctor_ic.controller import IcController
from doctor_ic.state import AppState

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "ic_controller"
LAST_UPLOAD_KEY = "ic_last_upload"
DOCTOR_A_KEY = "ic_doctor_a"
DOCTOR_B_KEY = "ic_doctor_b"


def get_controller(session: MutableMapping[str, Any]) -> IcController:
    if CONTROLLER_KEY not in session:
        session[CONTROLLER_KEY] = IcController()
    return session[CONTROLLER_KEY]


def upload_id(uploaded: Any) -> str:
    file_id = getattr(uploaded, "file_id", None)
    return file_id or f"{uploaded.name}:{uploaded.size}"


def ingest_upload(ctrl: IcController, session: MutableMapping[str, Any], uploaded: Any) -> Optional[AppState]:
    """
    Parse a newly uploaded file into the controller.

    Returns the new state, or None when there is no file or the file was
    already ingested (the script re-runs on every click).
    """
    if uploaded is None:
        return None
    uid = upload_id(uploaded)
    if session.get(LAST_UPLOAD_KEY) == uid:
        return None

    state = asyncio.run(ctrl.upload(uploaded.getvalue()))
    session[LAST_UPLOAD_KEY] = uid
    session.pop(DOCTOR_A_KEY, None)
    session.pop(DOCTOR_B_KEY, None)
    logger.info("Loaded %s: %d doctors", uploaded.name, len(state.roster))
    return state


def option_index(options: list[str], name: Optional[str]) -> Optional[int]:
    """Selectbox index for the current pick, so a recreated widget keeps it."""
    if name is None or name not in options:
        return None
    return options.index(name)


def apply_doctor_a(ctrl: IcController, session: MutableMapping[str, Any], doctor_a: Optional[str]) -> AppState:
    if doctor_a == ctrl.state.doctor_a:
        return ctrl.state
    state = ctrl.select_a(doctor_a)
    # B was cleared because it matched the new A
    if state.doctor_b is None:
        session.pop(DOCTOR_B_KEY, None)
    return state


def apply_doctor_b(ctrl: IcController, doctor_b: Optional[str]) -> AppState:
    if doctor_b == ctrl.state.doctor_b:
        return ctrl.state
    return ctrl.select_b(doctor_b)
