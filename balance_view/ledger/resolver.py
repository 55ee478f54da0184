"""
Balance-change resolver — transaction record to a user-facing balance view.

Resolves each raw change's owner to an address, folds the transaction fee
into outgoing amounts, and picks the change relevant to the viewer. Pure and
total: every malformed field degrades to a default instead of raising.
"""

from __future__ import annotations

from typing import Sequence

from balance_view.core.exceptions import InvalidAmountError
from balance_view.ledger.models import (
    IMMUTABLE_ADDRESS,
    SUI_TYPE_ARG,
    AddressOwner,
    ImmutableOwner,
    NormalizedBalanceChange,
    ObjectOwner,
    Owner,
    RawBalanceChange,
    ResolvedBalanceView,
    TransactionRecord,
    parse_amount,
    parse_owner,
)
from balance_view.view_logging import bind_transaction, get_logger

logger = get_logger(__name__)


def resolve_owner_address(owner: Owner) -> str:
    """Immutable -> "Immutable"; AddressOwner/ObjectOwner -> owning address; else ""."""
    if isinstance(owner, ImmutableOwner):
        return IMMUTABLE_ADDRESS
    if isinstance(owner, AddressOwner):
        return owner.address
    if isinstance(owner, ObjectOwner):
        return owner.address
    return ""


def normalize_amount(amount: int, gas: int) -> int:
    """
    Outgoing amounts include the fee: -(|amount| + gas). Incoming are unchanged.

    The fee is folded into every negative entry, not only the gas payer's;
    the record carries nothing that says which entry paid it.
    """
    if amount < 0:
        return -(-amount + gas)
    return amount


def parse_gas(value: int | str | None) -> int:
    """Fee as an int; None -> 0. Raises InvalidAmountError for malformed values."""
    if value is None:
        return 0
    return parse_amount(value)


def _gas_of(record: TransactionRecord) -> int:
    try:
        return parse_gas(record.total_gas_used)
    except InvalidAmountError:
        bind_transaction(record.digest).warning(
            "transaction_gas_invalid", total_gas_used=record.total_gas_used
        )
        return 0


def normalize_balance_changes(
    changes: Sequence[RawBalanceChange] | None,
    gas: int,
    *,
    digest: str | None = None,
) -> tuple[NormalizedBalanceChange, ...]:
    """Resolve owners and fee-adjust amounts, keeping ledger order."""
    out: list[NormalizedBalanceChange] = []
    for change in changes or ():
        owner = parse_owner(change.owner)
        address = resolve_owner_address(owner)
        if not address and not isinstance(owner, ImmutableOwner):
            logger.debug(
                "balance_change_owner_unrecognized",
                digest=digest,
                coin_type=change.coin_type,
            )
        try:
            amount = parse_amount(change.amount)
        except InvalidAmountError:
            bind_transaction(digest).warning(
                "balance_change_amount_invalid",
                coin_type=change.coin_type,
                amount=change.amount,
            )
            amount = 0
        out.append(
            NormalizedBalanceChange(
                coin_type=change.coin_type,
                address=address,
                amount=normalize_amount(amount, gas),
            )
        )
    return tuple(out)


def select_change(
    changes: Sequence[NormalizedBalanceChange],
    viewer_address: str | None = None,
) -> NormalizedBalanceChange | None:
    """
    Pick the change to headline.

    With a viewer: first entry whose address equals it exactly (case-sensitive).
    Without: the first entry. Taking the first entry is a heuristic and can pick
    an unrelated change when a transaction moves several balances.
    """
    if viewer_address:
        for change in changes:
            if change.address == viewer_address:
                return change
        return None
    return changes[0] if changes else None


def resolve(
    record: TransactionRecord,
    viewer_address: str | None = None,
) -> ResolvedBalanceView:
    """
    Resolve a transaction record into the balance view for viewer_address.

    Output balance_changes is [match] only when a viewer was given and matched;
    otherwise the full normalized list. coin_type falls back to SUI_TYPE_ARG and
    amount to 0 when nothing is selected. gas is always the transaction fee.
    """
    gas = _gas_of(record)
    changes = normalize_balance_changes(record.balance_changes, gas, digest=record.digest)
    change = select_change(changes, viewer_address)

    return ResolvedBalanceView(
        balance_changes=(change,) if viewer_address and change is not None else changes,
        coin_type=change.coin_type if change is not None and change.coin_type else SUI_TYPE_ARG,
        gas=gas,
        sender=record.sender,
        amount=change.amount if change is not None else 0,
    )
