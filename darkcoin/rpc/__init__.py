"""JSON-RPC invocation core: envelopes, parameter normalization, HTTP transport."""

from darkcoin.rpc.envelope import CallResult, build_request
from darkcoin.rpc.params import ABSENT, Param, Signature, is_absent, normalize_params
from darkcoin.rpc.transport import CorrelationIds, RpcTransport

__all__ = [
    "ABSENT",
    "CallResult",
    "CorrelationIds",
    "Param",
    "RpcTransport",
    "Signature",
    "build_request",
    "is_absent",
    "normalize_params",
]
