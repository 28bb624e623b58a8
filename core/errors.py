"""
Error types raised while loading and adding customers.
"""

from typing import List


class CustomerTableError(Exception):
    """Base class for every failure the customer table can surface."""


class NetworkError(CustomerTableError):
    """The read endpoint answered with a non-2xx status or was unreachable."""


class ParseError(CustomerTableError):
    """The read endpoint answered with a body that is not a list of records."""


class ValidationError(CustomerTableError):
    """Required draft fields are empty. Raised before any request is sent."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            "Required fields are missing: " + ", ".join(self.missing)
        )


class SubmissionError(CustomerTableError):
    """The write endpoint rejected the draft or did not confirm it."""
