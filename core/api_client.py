"""
HTTP client for the customers API.

Two endpoints: a GET returning every customer as a JSON array, and a POST
accepting one new customer as a JSON object. The API answers writes with
``{"mensaje": ...}`` on success and ``{"error": ...}`` on failure.
"""

import logging
from typing import Optional

import requests

from config import Settings
from core.errors import NetworkError, ParseError, SubmissionError
from core.models import Collection, CustomerDraft, parse_records

logger = logging.getLogger(__name__)

CONFIRMATION_FIELD = "mensaje"
ERROR_FIELD = "error"
UNKNOWN_SUBMIT_ERROR = "Unknown error while adding the customer."


class CustomerApiClient:
    """Reads and creates customers through the remote API."""

    def __init__(self, read_url: str, write_url: str, timeout: Optional[float] = None):
        self.read_url = read_url
        self.write_url = write_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "CustomerApiClient":
        return cls(settings.read_url, settings.write_url, timeout=settings.timeout)

    def fetch_records(self) -> Collection:
        """GET the full customer list.

        Raises:
            NetworkError: transport failure or a non-2xx response.
            ParseError: the body is not a JSON array of flat objects.
        """
        logger.info(f"Fetching customers from {self.read_url}")
        try:
            resp = requests.get(self.read_url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {e}") from e

        if not resp.ok:
            raise NetworkError(f"Network error: {resp.reason}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise ParseError(f"Response is not valid JSON: {e}") from e

        records = parse_records(payload)
        logger.info(f"Fetched {len(records)} customers")
        return records

    def create_record(self, draft: CustomerDraft) -> str:
        """POST a new customer and return the API's confirmation message.

        Raises SubmissionError carrying the API's error text, or a generic
        message when the API gives none.
        """
        logger.info(f"Submitting new customer to {self.write_url}")
        try:
            resp = requests.post(self.write_url, json=draft.to_payload(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SubmissionError(str(e)) from e

        try:
            body = resp.json()
        except ValueError:
            logger.warning(f"Non-JSON reply from write endpoint (HTTP {resp.status_code})")
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = body.get(CONFIRMATION_FIELD)
        if resp.ok and message:
            return str(message)

        raise SubmissionError(str(body.get(ERROR_FIELD) or UNKNOWN_SUBMIT_ERROR))
