"""
Pytest fixtures for Balance View tests. Builds Sui transaction block payloads
and captures structlog events.
"""

from __future__ import annotations

import os
from typing import Any

import pytest
import structlog

# Module loggers fix their level filter at import; debug events are asserted on.
os.environ["LOG_LEVEL"] = "DEBUG"

SENDER = "0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e"
RECIPIENT = "0xc0f620f28826593835606e174e6e9912c342101920519a1e376957691178e345"
SUI = "0x2::sui::SUI"
USDC = "0x5d4b302506645c37ff133b98c4b50a5ae14841659738d6d733d59d0d217a93bf::coin::COIN"


def balance_change(owner: Any, amount: str, coin_type: str = SUI) -> dict[str, Any]:
    """Build a balanceChanges entry as returned by sui_getTransactionBlock."""
    return {"owner": owner, "coinType": coin_type, "amount": amount}


def tx_response(
    balance_changes: list[dict[str, Any]] | None,
    *,
    computation: str = "1000000",
    storage: str = "2964000",
    rebate: str = "978120",
    sender: str | None = SENDER,
    digest: str = "5Yfm1hPe6SJbv6Xs8Wnu7aJ1yZqHquWX3qGMTm5nyXwV",
) -> dict[str, Any]:
    """Build a SuiTransactionBlockResponse-shaped dict."""
    raw: dict[str, Any] = {
        "digest": digest,
        "effects": {
            "status": {"status": "success"},
            "gasUsed": {
                "computationCost": computation,
                "storageCost": storage,
                "storageRebate": rebate,
                "nonRefundableStorageFee": "9880",
            },
        },
    }
    if sender is not None:
        raw["transaction"] = {"data": {"sender": sender, "gasData": {"owner": sender}}}
    if balance_changes is not None:
        raw["balanceChanges"] = balance_changes
    return raw


@pytest.fixture
def transfer_response() -> dict[str, Any]:
    """SUI transfer from SENDER to RECIPIENT; total gas 2985880."""
    return tx_response(
        [
            balance_change({"AddressOwner": SENDER}, "-1002985880"),
            balance_change({"AddressOwner": RECIPIENT}, "1000000000"),
        ]
    )


@pytest.fixture
def make_response():
    """Builder for transaction block payloads; see tx_response for keyword arguments."""
    return tx_response


@pytest.fixture
def make_change():
    """Builder for balanceChanges entries."""
    return balance_change


@pytest.fixture
def log_events():
    """structlog events emitted during the test, as event dicts."""
    with structlog.testing.capture_logs() as events:
        yield events
