"""
dashd client

Typed wrappers over the procedure catalog. Each wrapper binds its
arguments through the procedure's declared parameter list, so a call that
leaves out an optional argument in the middle fails with
``ArgumentOrderError`` before anything is sent.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence, TypeVar

import httpx
from loguru import logger

from darkcoin import catalog
from darkcoin.catalog import Procedure
from darkcoin.config.schema import DashdConfig
from darkcoin.definitions import (
    AddressBalance,
    AddressValidation,
    GovernanceInfo,
    GovernanceObject,
    MasternodeInfo,
    SmartFeeEstimate,
    WalletInfo,
)
from darkcoin.rpc.envelope import CallResult
from darkcoin.rpc.params import ABSENT
from darkcoin.rpc.transport import CorrelationIds, RpcTransport

T = TypeVar("T")

DUFFS_PER_DASH = 100_000_000

Amount = float | Decimal


class DarkcoinClient:
    """Client instance for doing RPC calls on dashd."""

    def __init__(
        self,
        config: DashdConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        ids: CorrelationIds | None = None,
    ):
        self.config = config
        self._rpc = RpcTransport(config, transport=transport, ids=ids)

    async def aclose(self) -> None:
        await self._rpc.aclose()

    async def __aenter__(self) -> "DarkcoinClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @staticmethod
    def convert_dash_to_duffs(amount: Amount | str) -> int:
        """Exact DASH -> duffs conversion (1 DASH = 100 000 000 duffs)."""
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        return int((value * DUFFS_PER_DASH).to_integral_value())

    async def call_rpc_method(
        self,
        method: str,
        params: Sequence[Any],
        call_id: int | None = None,
    ) -> CallResult[Any]:
        """
        Call any dashd procedure directly. Call it with 'help' for the full list.

        Args:
            method: Name of the method, e.g. ``getblockhash``
            params: Positional params, e.g. ``[height]`` for ``getblockhash``
            call_id: Id to associate with the call
        """
        return await self._rpc.invoke(method, params, call_id)

    async def call(self, procedure: Procedure[T], *args: Any, call_id: int | None = None) -> CallResult[T]:
        """Bind ``args`` to a catalog procedure and invoke it."""
        params = procedure.build_params(*args)
        logger.debug(f"{procedure.method}: {len(args)} args -> {len(params)} params")
        return await self._rpc.invoke(procedure.method, params, call_id)

    # Wallet

    async def get_wallet_info(self) -> CallResult[WalletInfo]:
        """Returns an object containing various wallet state info."""
        return await self.call(catalog.GET_WALLET_INFO)

    async def get_new_address(self, account: str = ABSENT) -> CallResult[str]:
        """Returns a new Dash address for receiving payments."""
        return await self.call(catalog.GET_NEW_ADDRESS, account)

    async def send_to_address(
        self,
        address: str,
        amount: Amount,
        comment: str = ABSENT,
        comment_to: str = ABSENT,
        subtract_fee_from_amount: bool = ABSENT,
        use_is: bool = ABSENT,
        use_ps: bool = ABSENT,
    ) -> CallResult[str]:
        """
        Send an amount to a given address. Returns the transaction id.

        Optional arguments can only be left out from the end: passing
        ``use_is`` without ``subtract_fee_from_amount`` raises
        ``ArgumentOrderError``.
        """
        return await self.call(
            catalog.SEND_TO_ADDRESS,
            address,
            amount,
            comment,
            comment_to,
            subtract_fee_from_amount,
            use_is,
            use_ps,
        )

    async def set_tx_fee(self, amount: Amount) -> CallResult[bool]:
        """Set the transaction fee per kB (DASH/kB)."""
        return await self.call(catalog.SET_TX_FEE, amount)

    async def get_balance(
        self,
        account: str = ABSENT,
        minconf: int = ABSENT,
        add_locked: bool = ABSENT,
        include_watchonly: bool = ABSENT,
    ) -> CallResult[float]:
        return await self.call(catalog.GET_BALANCE, account, minconf, add_locked, include_watchonly)

    async def sign_message(self, address: str, message: str) -> CallResult[str]:
        """Sign a message with the private key of an address (base64 signature)."""
        return await self.call(catalog.SIGN_MESSAGE, address, message)

    async def verify_message(self, address: str, signature: str, message: str) -> CallResult[bool]:
        return await self.call(catalog.VERIFY_MESSAGE, address, signature, message)

    async def dump_wallet(self, filename: str) -> CallResult[Any]:
        """Dump all wallet keys to a server-side file."""
        return await self.call(catalog.DUMP_WALLET, filename)

    async def import_wallet(self, filename: str) -> CallResult[None]:
        """Import keys from a wallet dump file on the server."""
        return await self.call(catalog.IMPORT_WALLET, filename)

    # Address index

    async def get_address_balance(self, addresses: Sequence[str]) -> CallResult[AddressBalance]:
        """Balance of a set of addresses, in duffs. Requires -addressindex."""
        return await self.call(catalog.GET_ADDRESS_BALANCE, {"addresses": list(addresses)})

    # Fees

    async def estimate_fee(self, nblocks: int) -> CallResult[float]:
        return await self.call(catalog.ESTIMATE_FEE, nblocks)

    async def estimate_smart_fee(self, nblocks: int) -> CallResult[SmartFeeEstimate]:
        return await self.call(catalog.ESTIMATE_SMART_FEE, nblocks)

    # Governance and masternodes

    async def get_governance_info(self) -> CallResult[GovernanceInfo]:
        """Returns an object containing governance parameters."""
        return await self.call(catalog.GET_GOVERNANCE_INFO)

    async def list_governance_objects(
        self,
        signal: str = ABSENT,
        object_type: str = ABSENT,
    ) -> CallResult[dict[str, GovernanceObject]]:
        """Governance objects keyed by object hash (``gobject list``)."""
        return await self.call(catalog.GOBJECT_LIST, signal, object_type)

    async def list_masternodes(
        self,
        mode: str = "json",
        filter: str = ABSENT,
    ) -> CallResult[dict[str, MasternodeInfo]]:
        """Masternodes keyed by collateral outpoint. The result shape assumes ``mode="json"``."""
        return await self.call(catalog.MASTERNODE_LIST, mode, filter)

    # Chain and utility

    async def get_block_count(self) -> CallResult[int]:
        return await self.call(catalog.GET_BLOCK_COUNT)

    async def get_block_hash(self, height: int) -> CallResult[str]:
        return await self.call(catalog.GET_BLOCK_HASH, height)

    async def validate_address(self, address: str) -> CallResult[AddressValidation]:
        return await self.call(catalog.VALIDATE_ADDRESS, address)

    async def help(self, command: str = ABSENT) -> CallResult[str]:
        return await self.call(catalog.HELP, command)
