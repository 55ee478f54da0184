"""
Sui transaction parser — JSON-RPC payloads to TransactionRecord.

Reads the fields of a `SuiTransactionBlockResponse` (as returned by
sui_getTransactionBlock with showBalanceChanges / showEffects / showInput)
that balance resolution needs: balanceChanges, the gas summary and the
sender. Purely structural; missing or malformed pieces become None.
"""

from __future__ import annotations

from typing import Any

from balance_view.core.exceptions import InvalidAmountError
from balance_view.ledger.models import (
    RawBalanceChange,
    ResolvedBalanceView,
    TransactionRecord,
    parse_amount,
)
from balance_view.ledger.resolver import resolve
from balance_view.view_logging import get_logger

logger = get_logger(__name__)

GAS_COST_FIELDS = ("computationCost", "storageCost", "storageRebate")


def total_gas_used(raw: dict[str, Any]) -> int | None:
    """
    Total fee from effects.gasUsed: computationCost + storageCost - storageRebate.
    None if the summary is missing or any of the three costs is unreadable.
    """
    effects = raw.get("effects")
    if not isinstance(effects, dict):
        return None
    gas_used = effects.get("gasUsed")
    if not isinstance(gas_used, dict):
        return None
    try:
        computation, storage, rebate = (parse_amount(gas_used.get(k)) for k in GAS_COST_FIELDS)
    except InvalidAmountError:
        logger.debug("gas_summary_unreadable", digest=raw.get("digest"), gas_used=gas_used)
        return None
    return computation + storage - rebate


def transaction_sender(raw: dict[str, Any]) -> str | None:
    """Sender from transaction.data.sender; None if absent."""
    tx = raw.get("transaction")
    if not isinstance(tx, dict):
        return None
    data = tx.get("data")
    if not isinstance(data, dict):
        return None
    sender = data.get("sender")
    return sender if isinstance(sender, str) else None


def parse_balance_change(item: Any) -> RawBalanceChange | None:
    """Build a RawBalanceChange from one balanceChanges entry; None if it is not an object."""
    if not isinstance(item, dict):
        return None
    return RawBalanceChange.from_rpc_item(item)


def _parse_balance_changes(raw: dict[str, Any]) -> tuple[RawBalanceChange, ...] | None:
    items = raw.get("balanceChanges")
    if items is None:
        return None
    if not isinstance(items, list):
        logger.debug("balance_changes_not_a_list", digest=raw.get("digest"))
        return ()
    out: list[RawBalanceChange] = []
    for item in items:
        change = parse_balance_change(item)
        if change is None:
            logger.debug("balance_change_skipped", digest=raw.get("digest"), item=repr(item))
            continue
        out.append(change)
    return tuple(out)


def parse(raw: dict[str, Any]) -> TransactionRecord | None:
    """
    Parse a single transaction block response into a TransactionRecord.

    Returns None if the payload is not a JSON object. Every field inside it is
    optional; absent ones come back as None.
    """
    if not isinstance(raw, dict):
        return None
    digest = raw.get("digest")
    return TransactionRecord(
        balance_changes=_parse_balance_changes(raw),
        total_gas_used=total_gas_used(raw),
        sender=transaction_sender(raw),
        digest=digest if isinstance(digest, str) else None,
    )


def parse_batch(raw_list: list[dict[str, Any]]) -> list[TransactionRecord]:
    """
    Parse a list of transaction block responses.

    Skips unparseable items; returned list may be shorter than input.
    """
    records: list[TransactionRecord] = []
    for raw in raw_list:
        record = parse(raw)
        if record is not None:
            records.append(record)
    return records


def resolve_response(
    raw: dict[str, Any],
    viewer_address: str | None = None,
) -> ResolvedBalanceView:
    """Parse and resolve in one step; an unparseable payload resolves as an empty record."""
    record = parse(raw)
    return resolve(record if record is not None else TransactionRecord(), viewer_address)
