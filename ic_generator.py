import asyncio

import streamlit as st

from doctor_ic.config import configure_logging
from doctor_ic.pdf import roster_rows
from doctor_ic.preview import render_preview
from doctor_ic.session import (
    DOCTOR_A_KEY,
    DOCTOR_B_KEY,
    apply_doctor_a,
    apply_doctor_b,
    get_controller,
    ingest_upload,
    option_index,
)
from doctor_ic.workbook import XLSX_MIME

# =========================
# Global Config
# =========================
st.set_page_config(page_title="IC Generator – Doctor IC Sheets", layout="wide")
configure_logging()

st.title("🧾 IC Generator")
st.markdown("Upload the billing export, pick up to two doctors and print their IC sheet.")

# =========================
# Common Helpers
# =========================

def upload_section(ctrl, label: str):
    uploaded = st.file_uploader(label, type=["xlsx", "xls"], key="ic_uploader")
    state = ingest_upload(ctrl, st.session_state, uploaded)
    if state is None:
        return

    if state.has_roster:
        st.success(f"Loaded {len(state.roster)} doctors")
    else:
        st.warning("No usable rows found in this file")


# =========================
# PAGE 1 – Two-Doctor Sheet
# =========================

def page_two_doctor_sheet():
    st.header("👨‍⚕️ Two-Doctor IC Sheet")
    ctrl = get_controller(st.session_state)

    upload_section(ctrl, "Select Excel File" if not ctrl.state.has_roster else "Upload New Excel File")

    state = ctrl.state
    if not state.has_roster:
        st.info("⬆️ Upload an Excel file above")
        return

    names = state.doctor_names()
    doctor_a = st.selectbox(
        "Select Doctor A:",
        names,
        index=option_index(names, state.doctor_a),
        placeholder="Choose Doctor A",
        key=DOCTOR_A_KEY,
    )
    state = apply_doctor_a(ctrl, st.session_state, doctor_a)

    b_options = state.doctor_b_options()
    doctor_b = st.selectbox(
        "Select Doctor B:",
        b_options,
        index=option_index(b_options, state.doctor_b),
        placeholder="Choose Doctor B",
        key=DOCTOR_B_KEY,
    )
    state = apply_doctor_b(ctrl, doctor_b)

    pdf_bytes = asyncio.run(ctrl.print_selection())
    st.download_button(
        label="🖨️ Print/Save PDF",
        data=pdf_bytes or b"",
        file_name="ic_sheet.pdf",
        mime="application/pdf",
        disabled=pdf_bytes is None,
        key="dl_ic_sheet_pdf",
    )

    st.subheader("👀 Preview")
    render_preview(st, state)


# =========================
# PAGE 2 – Roster Summary
# =========================

def page_roster_summary():
    st.header("📋 Roster Summary – All Doctors")
    ctrl = get_controller(st.session_state)

    upload_section(ctrl, "Upload Excel File")

    state = ctrl.state
    if not state.has_roster:
        st.info("⬆️ Upload an Excel file above")
        return

    st.dataframe(
        [{"Doctor": name, "Total IC": total} for name, total, _, _ in roster_rows(state.roster)],
        hide_index=True,
        width="stretch",
    )

    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            label="⬇ Download Roster Summary PDF",
            data=asyncio.run(ctrl.print_roster()),
            file_name="ic_roster_summary.pdf",
            mime="application/pdf",
            key="dl_roster_pdf",
        )
    with c2:
        st.download_button(
            label="⬇ Download Roster Excel (All + one sheet per doctor)",
            data=asyncio.run(ctrl.export_workbook()),
            file_name="ic_roster.xlsx",
            mime=XLSX_MIME,
            key="dl_roster_excel",
        )


# =========================
# SIDEBAR NAVIGATION
# =========================

st.sidebar.title("🧭 Menu")
page = st.sidebar.radio(
    "Choose a tool",
    ["Two-Doctor Sheet", "Roster Summary"]
)

if page == "Two-Doctor Sheet":
    page_two_doctor_sheet()
elif page == "Roster Summary":
    page_roster_summary()
