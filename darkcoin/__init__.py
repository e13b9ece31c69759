"""
darkcoin - asynchronous JSON-RPC client for dashd
"""

__version__ = "0.1.0"
__logo__ = "◈"

from darkcoin.client import DarkcoinClient
from darkcoin.config.schema import DashdConfig
from darkcoin.rpc import ABSENT, CallResult, normalize_params
from darkcoin.utils.exceptions import (
    ArgumentOrderError,
    DarkcoinError,
    ParameterError,
    RpcApplicationError,
    TransportError,
)

__all__ = [
    "ABSENT",
    "ArgumentOrderError",
    "CallResult",
    "DarkcoinClient",
    "DarkcoinError",
    "DashdConfig",
    "ParameterError",
    "RpcApplicationError",
    "TransportError",
    "normalize_params",
]
