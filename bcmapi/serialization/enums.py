"""Two-way tables between enum members and their wire tokens."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, Mapping, Optional, TypeVar

from ..exceptions import UnknownEnumToken

E = TypeVar("E", bound=Enum)

_NAME_MAPS: dict[type[Enum], "EnumNameMap"] = {}


class EnumNameMap(Generic[E]):
    """Lookup table built once per enum.

    The wire token of a member is its name unless ``overrides`` says
    otherwise. The ``unset`` member, when given, is not part of the closed
    set: it is never written to or read from the wire.
    """

    def __init__(
        self,
        enum_cls: type[E],
        overrides: Optional[Mapping[E, str]] = None,
        *,
        unset: Optional[E] = None,
    ) -> None:
        self.enum_cls = enum_cls
        self.unset = unset
        overrides = dict(overrides or {})
        for member in overrides:
            if not isinstance(member, enum_cls):
                raise TypeError(f"{member!r} is not a {enum_cls.__name__} member")
        to_wire: dict[E, str] = {}
        from_wire: dict[str, E] = {}
        for member in enum_cls:
            if member is unset:
                continue
            token = overrides.get(member, member.name)
            if token in from_wire:
                raise ValueError(
                    f"{enum_cls.__name__} maps both {from_wire[token].name} "
                    f"and {member.name} to {token!r}"
                )
            to_wire[member] = token
            from_wire[token] = member
        self._to_wire = to_wire
        self._from_wire = from_wire

    def to_wire_name(self, member: E) -> str:
        # str-mixin members hash like their values, so check the type first
        if not isinstance(member, self.enum_cls) or member not in self._to_wire:
            raise UnknownEnumToken(self.enum_cls, member)
        return self._to_wire[member]

    def from_wire_name(self, token: str) -> E:
        try:
            return self._from_wire[token]
        except (KeyError, TypeError):
            raise UnknownEnumToken(self.enum_cls, token) from None

    def members(self) -> list[E]:
        return list(self._to_wire)

    def tokens(self) -> list[str]:
        return list(self._from_wire)

    def __contains__(self, member: object) -> bool:
        return isinstance(member, self.enum_cls) and member in self._to_wire

    def __repr__(self) -> str:
        return f"EnumNameMap({self.enum_cls.__name__}, {len(self._to_wire)} tokens)"


def register_name_map(
    enum_cls: type[E],
    overrides: Optional[Mapping[E, str]] = None,
    *,
    unset: Optional[E] = None,
) -> EnumNameMap[E]:
    if enum_cls in _NAME_MAPS:
        raise ValueError(f"{enum_cls.__name__} already has a name map")
    name_map = EnumNameMap(enum_cls, overrides, unset=unset)
    _NAME_MAPS[enum_cls] = name_map
    return name_map


def name_map_for(enum_cls: type[E]) -> EnumNameMap[E]:
    try:
        return _NAME_MAPS[enum_cls]
    except KeyError:
        raise LookupError(f"{enum_cls.__name__} has no registered name map") from None


def registered_enums() -> Iterable[type[Enum]]:
    return tuple(_NAME_MAPS)


__all__ = ["EnumNameMap", "register_name_map", "name_map_for", "registered_enums"]
