"""
Sui ledger balance changes.

Parses transaction block responses into records and resolves them into the
balance view shown to a user: fee-adjusted per-account changes, the change
relevant to the viewer, and the coin type to label it with.
"""

from balance_view.ledger.models import (
    SUI_TYPE_ARG,
    AddressOwner,
    ImmutableOwner,
    NormalizedBalanceChange,
    ObjectOwner,
    RawBalanceChange,
    ResolvedBalanceView,
    TransactionRecord,
    UnrecognizedOwner,
    parse_owner,
)
from balance_view.ledger.parser import parse, parse_batch, resolve_response
from balance_view.ledger.resolver import resolve

__all__ = [
    "SUI_TYPE_ARG",
    "AddressOwner",
    "ImmutableOwner",
    "NormalizedBalanceChange",
    "ObjectOwner",
    "RawBalanceChange",
    "ResolvedBalanceView",
    "TransactionRecord",
    "UnrecognizedOwner",
    "parse",
    "parse_batch",
    "parse_owner",
    "resolve",
    "resolve_response",
]
