"""Request and response envelopes exchanged with dashd."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from darkcoin.utils.exceptions import RpcApplicationError

T = TypeVar("T")


def build_request(method: str, params: Sequence[Any], call_id: int) -> dict[str, Any]:
    """Invocation envelope for one call."""
    return {"method": method, "params": list(params), "id": call_id}


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """
    Response envelope of a single call.

    ``error`` is authoritative: a populated ``error`` means the daemon
    rejected the call even if ``result`` is also set. ``id`` echoes the
    request id; checking the echo is left to the caller.
    """
    result: T | None = None
    error: Any = None
    id: int | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CallResult[Any]":
        """Build from a decoded response body. Unknown members are ignored."""
        return cls(
            result=payload.get("result"),
            error=payload.get("error"),
            id=payload.get("id"),
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return ``result`` or raise ``RpcApplicationError`` for a populated ``error``."""
        if self.error is not None:
            raise RpcApplicationError(self.error, call_id=self.id)
        return self.result  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.result, "error": self.error, "id": self.id}
