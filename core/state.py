"""
Immutable view state for the customer page and the transitions between states.

Every function here is pure: it takes a ViewState and returns a new one.
The controller owns the current value and the Streamlit page only reads it.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from core.models import Collection, CustomerDraft, UIStatus

LOAD_ERROR_MESSAGE = "Could not load the data. Check the API server connection."


@dataclass(frozen=True)
class ViewState:
    records: Collection = ()
    loading: bool = True
    error: Optional[str] = None
    modal_open: bool = False
    draft: CustomerDraft = field(default_factory=CustomerDraft)
    notice: Optional[str] = None   # last confirmation message from the API
    generation: int = 0            # id of the most recently started load


def ui_status(state: ViewState) -> UIStatus:
    if state.loading:
        return UIStatus.LOADING
    if state.error:
        return UIStatus.ERROR
    if not state.records:
        return UIStatus.EMPTY
    return UIStatus.READY


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def start_load(state: ViewState) -> ViewState:
    return replace(state, loading=True, error=None, generation=state.generation + 1)


def load_succeeded(state: ViewState, generation: int, records: Collection) -> ViewState:
    """Store fetched records unless a newer load has started since."""
    if generation != state.generation:
        return state
    return replace(state, records=tuple(records), loading=False)


def load_failed(state: ViewState, generation: int, message: str = LOAD_ERROR_MESSAGE) -> ViewState:
    """Record a load failure, keeping the current records."""
    if generation != state.generation:
        return state
    return replace(state, error=message, loading=False)


# ---------------------------------------------------------------------------
# Create form
# ---------------------------------------------------------------------------

def open_form(state: ViewState) -> ViewState:
    return replace(state, modal_open=True)


def close_form(state: ViewState) -> ViewState:
    return replace(state, modal_open=False)


def update_field(state: ViewState, name: str, value: Any) -> ViewState:
    return replace(state, draft=state.draft.with_field(name, value))


def submission_succeeded(state: ViewState, message: str) -> ViewState:
    return replace(state, modal_open=False, draft=CustomerDraft(), notice=message)


def submission_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, error=f"Error sending data: {message}")


def dismiss_notice(state: ViewState) -> ViewState:
    return replace(state, notice=None)
