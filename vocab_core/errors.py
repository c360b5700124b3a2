"""
Error types raised at the store boundary.
"""


class VocabTrainerError(Exception):
    """Base class for trainer errors."""


class FetchFailure(VocabTrainerError):
    """Reading eligible items from the store failed."""


class PersistFailure(VocabTrainerError):
    """Writing a practice outcome back to the store failed."""

    def __init__(self, message: str, item_id: str | None = None):
        super().__init__(message)
        self.item_id = item_id
