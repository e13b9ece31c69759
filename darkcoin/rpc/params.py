"""Positional parameter handling for procedures with optional trailing arguments.

JSON-RPC calls to dashd are positional: there is no way to address a
parameter by name, so a caller may leave out a suffix of the optional
parameters but never one in the middle. ``ABSENT`` marks a parameter the
caller did not provide; ``normalize_params`` turns a list of values and
markers into the array placed in the request envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from darkcoin.utils.exceptions import ArgumentOrderError, ParameterError


class _Absent:
    """Marker type for an omitted argument. Use the ``ABSENT`` singleton."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Any = _Absent()


def is_absent(value: Any) -> bool:
    return value is ABSENT


def normalize_params(declared_count: int, args: Sequence[Any]) -> list[Any]:
    """
    Build the positional parameter array for a call.

    Args:
        declared_count: Number of parameter slots the procedure declares.
        args: Values aligned to those slots; ``ABSENT`` marks an omitted one.

    Returns:
        The arguments up to (not including) the first ``ABSENT`` marker.

    Raises:
        ArgumentOrderError: A present value follows an ``ABSENT`` marker.
        ParameterError: More arguments than declared slots.
    """
    if len(args) > declared_count:
        raise ParameterError(
            f"Got {len(args)} arguments for {declared_count} declared parameters",
            details={"declared_count": declared_count, "given": len(args)},
        )
    first_absent = next((i for i, value in enumerate(args) if value is ABSENT), None)
    if first_absent is None:
        return list(args)
    for i in range(first_absent + 1, len(args)):
        if args[i] is not ABSENT:
            raise ArgumentOrderError(first_absent, i)
    return list(args[:first_absent])


@dataclass(frozen=True)
class Param:
    """One declared parameter slot."""
    name: str
    required: bool = True


class Signature:
    """Declared parameter list of a procedure: required slots, then optional ones."""

    def __init__(self, *params: Param):
        seen_optional: str | None = None
        for param in params:
            if not param.required:
                seen_optional = param.name
            elif seen_optional is not None:
                raise ValueError(
                    f"Required parameter '{param.name}' follows optional parameter '{seen_optional}'"
                )
        self.params: tuple[Param, ...] = tuple(params)

    def __len__(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        inner = ", ".join(p.name if p.required else f"[{p.name}]" for p in self.params)
        return f"Signature({inner})"

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.params if p.required)

    def bind(self, *args: Any) -> list[Any]:
        """Align ``args`` to the declared slots and normalize them."""
        if len(args) > len(self.params):
            raise ParameterError(
                f"Got {len(args)} arguments for {len(self.params)} declared parameters",
                details={"declared_count": len(self.params), "given": len(args)},
            )
        padded = list(args) + [ABSENT] * (len(self.params) - len(args))
        for param, value in zip(self.params, padded):
            if param.required and value is ABSENT:
                raise ParameterError(
                    f"Missing required argument '{param.name}'",
                    details={"parameter": param.name},
                )
        return normalize_params(len(self.params), padded)


def required(*names: str) -> list[Param]:
    return [Param(name) for name in names]


def optional(*names: str) -> list[Param]:
    return [Param(name, required=False) for name in names]
