"""Detection of the error payload the service returns in place of a result."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

from ..config import ERROR_KEY
from ..exceptions import RemoteFault
from ..log_config import debug_verbose
from ..models.items.error import Error
from ..models.json_types import WireValue

if TYPE_CHECKING:  # pragma: no cover
    from .registry import CodecRegistry


def fault_from_error(error: Error) -> RemoteFault:
    """Build a fault for ``error``, chaining one fault per inner error."""

    cause = fault_from_error(error.inner_error) if error.inner_error is not None else None
    return RemoteFault(
        error.message,
        code=error.code,
        name=error.name,
        cause=cause,
        error=error,
    )


class ErrorDetector:
    """Looks for the reserved ``error`` key in a decoded map.

    Successful responses carry ``"error": null``, so only a non-null value
    counts as a fault.
    """

    def __init__(self, registry: "CodecRegistry") -> None:
        self.registry = registry

    def check(self, wire: Mapping[str, WireValue]) -> Optional[RemoteFault]:
        payload = wire.get(ERROR_KEY)
        if payload is None:
            return None
        if isinstance(payload, Mapping):
            error = self.registry.resolve(Error).decode(payload)
        elif isinstance(payload, str):
            error = Error(message=payload)
        else:
            # any other value still marks the response as failed
            error = Error(message=str(payload))
        fault = fault_from_error(error)
        debug_verbose(
            "remote_fault",
            {"code": fault.code, "name": fault.name, "message": fault.message},
        )
        return fault


__all__ = ["ErrorDetector", "fault_from_error"]
