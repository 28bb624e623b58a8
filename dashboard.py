#!/usr/bin/env python3
"""
Customer Table - Streamlit Dashboard

Lists customers from the remote API and adds new ones through a modal form.
The API is the only data store: this page never writes anywhere else.
Run: streamlit run dashboard.py
"""

import logging
from datetime import date

import streamlit as st

from config import Settings
from core.api_client import CustomerApiClient
from core.controller import CustomerTableController
from core.errors import ValidationError
from core.models import CustomerDraft, UIStatus
from core.state import ui_status
from core.table import to_dataframe
from main import setup_logging

SESSION_KEY = "customer_table"

LOADING_MESSAGE = "Loading customer data... ⏳"
EMPTY_MESSAGE = "No customer records found."
REQUIRED_MESSAGE = "Name, Surname and CI are required fields."

# Draft field -> form label. "estado" keeps its default and is not shown.
FORM_LABELS = {
    "nombre": "Name",
    "apellidos": "Surname",
    "ci": "National ID (CI)",
    "nit": "Tax ID (NIT)",
    "direccion": "Address",
    "telefono": "Phone",
    "email": "Email",
}
# Order of the inputs in the form
FORM_FIELDS = ["nombre", "apellidos", "fecha_nacimiento", "ci", "nit", "direccion", "telefono", "email"]

settings = Settings.from_env()
setup_logging(settings.log_level == "DEBUG", settings.log_file)
logger = logging.getLogger("dashboard")


def get_controller() -> CustomerTableController:
    """Return this session's controller, loading the table on first use."""
    if SESSION_KEY not in st.session_state:
        controller = CustomerTableController(CustomerApiClient.from_settings(settings))
        with st.spinner(LOADING_MESSAGE):
            controller.load()
        st.session_state[SESSION_KEY] = controller
    return st.session_state[SESSION_KEY]


def _parse_date(value: str):
    try:
        return date.fromisoformat(value) if value else None
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Page config & global styles
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Customers", layout="wide", page_icon="👥")

st.markdown("""
<style>
[data-testid="block-container"] { padding: 2rem 2.5rem 3rem; }
h1 { font-weight: 700; font-size: 1.75rem; margin-bottom: 0; letter-spacing: -0.02em; }
.stButton > button { border-radius: 8px !important; font-weight: 500 !important; }
[data-testid="stAlert"] { border-radius: 10px !important; font-size: 0.875rem !important; }
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Create form (modal)
# ---------------------------------------------------------------------------
def _widget_key(name: str) -> str:
    return f"draft_{name}"


def seed_form(draft: CustomerDraft, overwrite: bool = True):
    """Copy the draft into the form's widget state.

    Must run before the form widgets are created in the current run.
    """
    for name in FORM_FIELDS:
        key = _widget_key(name)
        if overwrite or key not in st.session_state:
            value = getattr(draft, name)
            st.session_state[key] = _parse_date(value) if name == "fecha_nacimiento" else value


def read_form() -> dict:
    """Collect the submitted form values as draft fields."""
    values = {}
    for name in FORM_FIELDS:
        value = st.session_state.get(_widget_key(name))
        if name == "fecha_nacimiento":
            value = value.isoformat() if value else ""
        values[name] = "" if value is None else value
    return values


@st.dialog("Add New Customer", width="medium", dismissible=False)
def customer_form(controller: CustomerTableController):
    seed_form(controller.state.draft, overwrite=False)

    with st.form("new_customer", border=False):
        for name in ("nombre", "apellidos"):
            st.text_input(FORM_LABELS[name], key=_widget_key(name))
        st.date_input(
            "Birth date", key=_widget_key("fecha_nacimiento"),
            min_value=date(1900, 1, 1), max_value=date.today(), format="YYYY-MM-DD",
        )
        for name in ("ci", "nit", "direccion", "telefono", "email"):
            st.text_input(FORM_LABELS[name], key=_widget_key(name))

        col_cancel, col_save = st.columns(2)
        with col_cancel:
            cancelled = st.form_submit_button("Cancel", key="form_cancel", width="stretch")
        with col_save:
            saved = st.form_submit_button("Save Customer", key="form_save", type="primary", width="stretch")

    if cancelled or saved:
        for name, value in read_form().items():
            controller.update_field(name, value)

    if cancelled:
        controller.close_form()
        st.rerun()

    if saved:
        try:
            state = controller.submit()
        except ValidationError as e:
            logger.warning(str(e))
            st.warning(REQUIRED_MESSAGE)
            return
        if not state.modal_open:
            st.rerun()

    if controller.state.modal_open and controller.state.error:
        st.error(controller.state.error)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
controller = get_controller()

col_title, col_add = st.columns([8, 2])
with col_title:
    st.markdown("<h1>Customer List</h1>", unsafe_allow_html=True)
with col_add:
    st.markdown("<div style='padding-top:0.6rem'>", unsafe_allow_html=True)
    if st.button("Add Customer", key="add_customer", type="primary", width="stretch"):
        controller.open_form()
        seed_form(controller.state.draft)
    st.markdown("</div>", unsafe_allow_html=True)

if controller.state.notice:
    st.toast(controller.state.notice, icon="✅")
    controller.dismiss_notice()

if controller.state.modal_open:
    customer_form(controller)

# ---------------------------------------------------------------------------
# Table: exactly one of loading / error / empty / table
# ---------------------------------------------------------------------------
state = controller.state
status = ui_status(state)

if status is UIStatus.LOADING:
    st.info(LOADING_MESSAGE)
elif status is UIStatus.ERROR:
    st.error(f"Error: {state.error}")
elif status is UIStatus.EMPTY:
    st.markdown(f'<p style="color:#94A3B8; font-size:0.875rem;">{EMPTY_MESSAGE}</p>', unsafe_allow_html=True)
else:
    df = to_dataframe(state.records)
    row_height = 35
    st.dataframe(
        df,
        width="stretch",
        hide_index=True,
        height=min(len(df) * row_height + 60, 700),
    )
