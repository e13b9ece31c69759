"""Declared dashd procedures: wire name, parameter list, result shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from darkcoin.definitions import (
    AddressBalance,
    AddressValidation,
    GovernanceInfo,
    GovernanceObject,
    MasternodeInfo,
    SmartFeeEstimate,
    WalletInfo,
)
from darkcoin.rpc.params import Signature, optional, required

T = TypeVar("T")


@dataclass(frozen=True)
class Procedure(Generic[T]):
    """
    One remote procedure.

    ``fixed`` holds leading arguments that select a sub-command, e.g.
    ``gobject list``; they are sent before the caller's arguments.
    """
    method: str
    signature: Signature = field(default_factory=Signature)
    fixed: tuple[Any, ...] = ()

    def build_params(self, *args: Any) -> list[Any]:
        return [*self.fixed, *self.signature.bind(*args)]


# Wallet
GET_WALLET_INFO: Procedure[WalletInfo] = Procedure("getwalletinfo")
GET_NEW_ADDRESS: Procedure[str] = Procedure("getnewaddress", Signature(*optional("account")))
SEND_TO_ADDRESS: Procedure[str] = Procedure(
    "sendtoaddress",
    Signature(
        *required("address", "amount"),
        *optional("comment", "comment_to", "subtract_fee_from_amount", "use_is", "use_ps"),
    ),
)
SET_TX_FEE: Procedure[bool] = Procedure("settxfee", Signature(*required("amount")))
GET_BALANCE: Procedure[float] = Procedure(
    "getbalance",
    Signature(*optional("account", "minconf", "add_locked", "include_watchonly")),
)
SIGN_MESSAGE: Procedure[str] = Procedure("signmessage", Signature(*required("address", "message")))
VERIFY_MESSAGE: Procedure[bool] = Procedure(
    "verifymessage",
    Signature(*required("address", "signature", "message")),
)
DUMP_WALLET: Procedure[Any] = Procedure("dumpwallet", Signature(*required("filename")))
IMPORT_WALLET: Procedure[None] = Procedure("importwallet", Signature(*required("filename")))

# Address index
GET_ADDRESS_BALANCE: Procedure[AddressBalance] = Procedure(
    "getaddressbalance",
    Signature(*required("addresses")),
)

# Fees
ESTIMATE_FEE: Procedure[float] = Procedure("estimatefee", Signature(*required("nblocks")))
ESTIMATE_SMART_FEE: Procedure[SmartFeeEstimate] = Procedure(
    "estimatesmartfee",
    Signature(*required("nblocks")),
)

# Governance and masternodes
GET_GOVERNANCE_INFO: Procedure[GovernanceInfo] = Procedure("getgovernanceinfo")
GOBJECT_LIST: Procedure[dict[str, GovernanceObject]] = Procedure(
    "gobject",
    Signature(*optional("signal", "type")),
    fixed=("list",),
)
MASTERNODE_LIST: Procedure[dict[str, MasternodeInfo]] = Procedure(
    "masternodelist",
    Signature(*optional("mode", "filter")),
)

# Chain and utility
GET_BLOCK_COUNT: Procedure[int] = Procedure("getblockcount")
GET_BLOCK_HASH: Procedure[str] = Procedure("getblockhash", Signature(*required("height")))
VALIDATE_ADDRESS: Procedure[AddressValidation] = Procedure(
    "validateaddress",
    Signature(*required("address")),
)
HELP: Procedure[str] = Procedure("help", Signature(*optional("command")))

PROCEDURES: dict[str, Procedure[Any]] = {
    proc.method if not proc.fixed else f"{proc.method} {' '.join(map(str, proc.fixed))}": proc
    for proc in (
        GET_WALLET_INFO,
        GET_NEW_ADDRESS,
        SEND_TO_ADDRESS,
        SET_TX_FEE,
        GET_BALANCE,
        SIGN_MESSAGE,
        VERIFY_MESSAGE,
        DUMP_WALLET,
        IMPORT_WALLET,
        GET_ADDRESS_BALANCE,
        ESTIMATE_FEE,
        ESTIMATE_SMART_FEE,
        GET_GOVERNANCE_INFO,
        GOBJECT_LIST,
        MASTERNODE_LIST,
        GET_BLOCK_COUNT,
        GET_BLOCK_HASH,
        VALIDATE_ADDRESS,
        HELP,
    )
}
