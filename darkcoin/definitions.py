"""Result shapes returned by dashd procedures.

These describe what the daemon sends back; they are never validated at
runtime. dashd versions add and drop fields freely, so anything a version
may omit is declared on a ``total=False`` base.
"""

from __future__ import annotations

from typing import TypedDict


class _WalletInfoOptional(TypedDict, total=False):
    # Only present when the wallet keeps a separate internal keypool.
    keypoolsize_hd_internal: int
    unlocked_until: int
    hdchainid: str


class WalletInfo(_WalletInfoOptional):
    """``getwalletinfo``"""
    walletversion: int
    # total confirmed balance in DASH
    balance: float
    # anonymized (PrivateSend) balance in DASH
    privatesend_balance: float
    unconfirmed_balance: float
    immature_balance: float
    txcount: int
    # timestamp (seconds since epoch) of the oldest pre-generated key
    keypoololdest: int
    # external keys only
    keypoolsize: int
    # keys left since last automatic backup
    keys_left: int
    # DASH/kB
    paytxfee: float


class AddressBalance(TypedDict):
    """``getaddressbalance``, amounts in duffs."""
    balance: int
    received: int


class SmartFeeEstimate(TypedDict, total=False):
    """``estimatesmartfee``"""
    feerate: float
    blocks: int


class GovernanceInfo(TypedDict, total=False):
    """``getgovernanceinfo``"""
    governanceminquorum: int
    masternodewatchdogmaxseconds: int
    sentinelpingmaxseconds: int
    proposalfee: float
    superblockcycle: int
    lastsuperblock: int
    nextsuperblock: int
    maxgovobjdatasize: int


class GovernanceObject(TypedDict, total=False):
    """One entry of ``gobject list``, keyed by object hash."""
    DataHex: str
    DataString: str
    Hash: str
    CollateralHash: str
    ObjectType: int
    CreationTime: int
    AbsoluteYesCount: int
    YesCount: int
    NoCount: int
    AbstainCount: int
    fBlockchainValidity: bool
    IsValidReason: str
    fCachedValid: bool
    fCachedFunding: bool
    fCachedDelete: bool
    fCachedEndorsed: bool


class MasternodeInfo(TypedDict, total=False):
    """One entry of ``masternodelist json``, keyed by collateral outpoint."""
    address: str
    payee: str
    status: str
    protocol: int
    daemonversion: str
    sentinelversion: str
    sentinelstate: str
    lastseen: int
    activeseconds: int
    lastpaidtime: int
    lastpaidblock: int
    owneraddress: str
    votingaddress: str
    collateraladdress: str
    pubkeyoperator: str


class AddressValidation(TypedDict, total=False):
    """``validateaddress``"""
    isvalid: bool
    address: str
    scriptPubKey: str
    ismine: bool
    iswatchonly: bool
    isscript: bool
    pubkey: str
    iscompressed: bool
    account: str
    hdkeypath: str
    hdchainid: str
