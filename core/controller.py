"""
Controller for the customer page.

Composes the loader, the table state and the create form on top of the
pure transitions in core.state. Holds the single current ViewState and
swaps it for a new one on every operation.
"""

import logging
from typing import Any, Optional

from core.api_client import CustomerApiClient
from core.errors import CustomerTableError, SubmissionError, ValidationError
from core import state as transitions
from core.state import ViewState

logger = logging.getLogger(__name__)


class CustomerTableController:
    """Loads customers, tracks the form, and submits new customers."""

    def __init__(self, client: CustomerApiClient, state: Optional[ViewState] = None):
        self.client = client
        self.state = state or ViewState()

    # ------------------------------------------------------------------
    # Loader
    # ------------------------------------------------------------------

    def load(self) -> ViewState:
        """Fetch the customer list and replace the collection.

        On failure the previous collection is kept and an error message is
        shown instead of the table. A result that arrives after a newer load
        has started is dropped.
        """
        self.state = transitions.start_load(self.state)
        generation = self.state.generation
        try:
            records = self.client.fetch_records()
        except CustomerTableError as e:
            logger.error(f"Error loading customers: {e}")
            self.state = transitions.load_failed(self.state, generation)
            return self.state
        except Exception as e:
            logger.exception(f"Unexpected error loading customers: {e}")
            self.state = transitions.load_failed(self.state, generation)
            return self.state

        self.state = transitions.load_succeeded(self.state, generation, records)
        return self.state

    # ------------------------------------------------------------------
    # Create form
    # ------------------------------------------------------------------

    def open_form(self) -> ViewState:
        self.state = transitions.open_form(self.state)
        return self.state

    def close_form(self) -> ViewState:
        self.state = transitions.close_form(self.state)
        return self.state

    def update_field(self, name: str, value: Any) -> ViewState:
        self.state = transitions.update_field(self.state, name, value)
        return self.state

    def submit(self) -> ViewState:
        """Send the draft to the API.

        Raises ValidationError, without touching state or the network, when
        a required field is empty. A rejected submission keeps the form open
        with the draft intact; a confirmed one closes the form, resets the
        draft and reloads the table.
        """
        missing = self.state.draft.missing_required()
        if missing:
            raise ValidationError(missing)

        try:
            message = self.client.create_record(self.state.draft)
        except SubmissionError as e:
            logger.error(f"Error sending customer: {e}")
            self.state = transitions.submission_failed(self.state, str(e))
            return self.state

        logger.info(f"Customer added: {message}")
        self.state = transitions.submission_succeeded(self.state, message)
        return self.load()

    def dismiss_notice(self) -> ViewState:
        self.state = transitions.dismiss_notice(self.state)
        return self.state
