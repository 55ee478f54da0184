"""
Core utilities shared across the ledger package.
"""

from balance_view.core.exceptions import BalanceViewError, InvalidAmountError

__all__ = ["BalanceViewError", "InvalidAmountError"]
