"""
Application-level exceptions.

The resolver itself never raises; these are raised by strict helpers and
caught where a documented default applies.
"""


class BalanceViewError(Exception):
    """Base class for Balance View errors."""


class InvalidAmountError(BalanceViewError, ValueError):
    """A ledger amount could not be read as a signed integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid ledger amount: {value!r}")
        self.value = value
