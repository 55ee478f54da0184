"""
Data models for transaction balance changes.

Input side mirrors the Sui JSON-RPC `SuiTransactionBlockResponse` fields the
resolver reads (balanceChanges, gas used, sender); output side is the
normalized view handed to presentation code. All models are frozen so a
resolved view compares and hashes by value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from balance_view.core.exceptions import InvalidAmountError

# Coin type of the native asset; used when no balance change is selected.
SUI_TYPE_ARG = "0x2::sui::SUI"
# Resolved address reported for balances with no controlling account.
IMMUTABLE_ADDRESS = "Immutable"
# CPython 3.11+ refuses int() on strings over 4300 digits by default.
DIGIT_CHUNK = 4000


@dataclass(frozen=True)
class ImmutableOwner:
    """No controlling account."""


@dataclass(frozen=True)
class AddressOwner:
    address: str


@dataclass(frozen=True)
class ObjectOwner:
    """Owned by another object; address is that object's id."""

    address: str


@dataclass(frozen=True)
class UnrecognizedOwner:
    """
    Any owner shape other than the three above (e.g. Shared, or garbage).

    Kept rather than rejected so resolution stays total; `raw` is excluded
    from equality and hashing since it may be an unhashable dict.
    """

    raw: Any = field(default=None, compare=False)


Owner = Union[ImmutableOwner, AddressOwner, ObjectOwner, UnrecognizedOwner]


def parse_owner(raw: Any) -> Owner:
    """
    Map an RPC owner value to an Owner variant. Never raises.

    "Immutable" -> ImmutableOwner; {"AddressOwner": a} -> AddressOwner(a);
    {"ObjectOwner": a} -> ObjectOwner(a); anything else -> UnrecognizedOwner.
    """
    if isinstance(raw, (ImmutableOwner, AddressOwner, ObjectOwner, UnrecognizedOwner)):
        return raw
    if raw == IMMUTABLE_ADDRESS:
        return ImmutableOwner()
    if isinstance(raw, dict):
        if isinstance(raw.get("AddressOwner"), str):
            return AddressOwner(raw["AddressOwner"])
        if isinstance(raw.get("ObjectOwner"), str):
            return ObjectOwner(raw["ObjectOwner"])
    return UnrecognizedOwner(raw)


def _digits_to_int(digits: str) -> int:
    """Convert a run of ASCII digits, piecewise past the interpreter's str-to-int digit cap."""
    if len(digits) <= DIGIT_CHUNK:
        return int(digits)
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start:start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_amount(value: Any) -> int:
    """
    Read a signed ledger amount as an arbitrary-precision int.

    Accepts ints and decimal strings of any length (optional sign, surrounding
    whitespace). Raises InvalidAmountError for anything else, including bools
    and floats.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        sign, digits = (text[0], text[1:]) if text[:1] in ("-", "+") else ("", text)
        if digits.isascii() and digits.isdigit():
            try:
                magnitude = _digits_to_int(digits)
            except ValueError as exc:
                raise InvalidAmountError(value) from exc
            return -magnitude if sign == "-" else magnitude
    raise InvalidAmountError(value)


@dataclass(frozen=True)
class RawBalanceChange:
    """One per-owner, per-coin-type signed delta as recorded by the ledger."""

    coin_type: str
    amount: int | str
    """Signed delta; int or decimal string as received. Negative = left the owner."""
    owner: Owner

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "RawBalanceChange":
        """Build from a single balanceChanges entry of a transaction block response."""
        amount = item.get("amount")
        return cls(
            coin_type=str(item.get("coinType") or ""),
            amount=amount if isinstance(amount, (int, str)) else "",
            owner=parse_owner(item.get("owner")),
        )


@dataclass(frozen=True)
class TransactionRecord:
    """
    The parts of a finalized transaction the resolver reads.

    balance_changes keeps ledger order; None means the response carried no
    balanceChanges field at all (not requested), which resolves like empty.
    """

    balance_changes: tuple[RawBalanceChange, ...] | None = None
    total_gas_used: int | None = None
    """Fee paid in MIST; None when unknown (treated as 0)."""
    sender: str | None = None
    digest: str | None = None


@dataclass(frozen=True)
class NormalizedBalanceChange:
    coin_type: str
    address: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "coin_type": self.coin_type,
            "address": self.address,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class ResolvedBalanceView:
    """
    Balance changes as presented to a user.

    balance_changes is the single viewer match when one was found, otherwise
    the full normalized list. gas is always the transaction fee, whatever
    was selected.
    """

    balance_changes: tuple[NormalizedBalanceChange, ...]
    coin_type: str
    gas: int
    sender: str | None
    amount: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict."""
        return {
            "balance_changes": [c.to_dict() for c in self.balance_changes],
            "coin_type": self.coin_type,
            "gas": self.gas,
            "sender": self.sender,
            "amount": self.amount,
        }
