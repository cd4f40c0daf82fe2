"""Exceptions raised while decoding or encoding media API payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .models.items.error import Error


def describe_type(type_key: Any) -> str:
    name = getattr(type_key, "__name__", None)
    if isinstance(type_key, type) and name:
        return name
    return repr(type_key)


class SerializationError(Exception):
    """Base class for every codec failure."""


class RemoteFault(SerializationError):
    """Raised when the service answered with an error envelope."""

    def __init__(
        self,
        message: Optional[str],
        *,
        code: Optional[int] = None,
        name: Optional[str] = None,
        cause: Optional["RemoteFault"] = None,
        error: Optional["Error"] = None,
    ) -> None:
        super().__init__(message or name or "Remote service returned an error")
        self.message = message
        self.code = code
        self.name = name
        self.cause = cause
        self.error = error
        self.__cause__ = cause

    def chain(self) -> list["RemoteFault"]:
        """Return this fault followed by each nested cause."""

        faults: list[RemoteFault] = []
        current: Optional[RemoteFault] = self
        while current is not None:
            faults.append(current)
            current = current.cause
        return faults

    def __str__(self) -> str:
        label = self.name or "RemoteFault"
        if self.code is not None:
            return f"{label} ({self.code}): {self.message}"
        return f"{label}: {self.message}"


class DecodeTypeMismatch(SerializationError, TypeError):
    """Raised when a wire value cannot be coerced to the declared type."""

    def __init__(self, key: Optional[str], expected: str, value: Any = None) -> None:
        location = key if key is not None else "<root>"
        super().__init__(f"'{location}' expected {expected}, got {value!r}")
        self.key = key
        self.expected = expected
        self.value = value

    def with_key(self, key: str) -> "DecodeTypeMismatch":
        if self.key is not None:
            return self
        return DecodeTypeMismatch(key, self.expected, self.value)


class UnknownEnumToken(SerializationError, ValueError):
    """Raised for a value outside an enum's closed wire vocabulary."""

    def __init__(self, enum_type: type, token: Any) -> None:
        super().__init__(f"{token!r} is not a valid {enum_type.__name__} token")
        self.enum_type = enum_type
        self.token = token


class CodecNotFound(SerializationError, LookupError):
    """Raised when a type was never registered with the codec registry."""

    def __init__(self, type_key: Any) -> None:
        super().__init__(f"No codec registered for {describe_type(type_key)}")
        self.type_key = type_key


__all__ = [
    "SerializationError",
    "RemoteFault",
    "DecodeTypeMismatch",
    "UnknownEnumToken",
    "CodecNotFound",
    "describe_type",
]
