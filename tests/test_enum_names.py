from __future__ import annotations

import pytest

from bcmapi import UnknownEnumToken
from bcmapi.models.enums import (
    PLAYLIST_TYPE_NAMES,
    TAG_INCLUSION_RULE_NAMES,
    ItemState,
    PlaylistType,
    TagInclusionRule,
)
from bcmapi.serialization.enums import EnumNameMap, name_map_for, registered_enums


@pytest.mark.parametrize("enum_cls", list(registered_enums()))
def test_every_member_round_trips_through_its_token(enum_cls: type) -> None:
    name_map = name_map_for(enum_cls)

    for member in name_map.members():
        assert name_map.from_wire_name(name_map.to_wire_name(member)) is member


def test_override_replaces_mechanical_token() -> None:
    assert PLAYLIST_TYPE_NAMES.to_wire_name(PlaylistType.PLAYS_TOTAL) == "PLAYSTOTAL"
    assert (
        PLAYLIST_TYPE_NAMES.to_wire_name(PlaylistType.PLAYS_TRAILING_WEEK)
        == "PLAYS_TRAILING_WEEK"
    )
    with pytest.raises(UnknownEnumToken):
        PLAYLIST_TYPE_NAMES.from_wire_name("PLAYS_TOTAL")


def test_unknown_token_is_rejected_with_details() -> None:
    with pytest.raises(UnknownEnumToken) as excinfo:
        PLAYLIST_TYPE_NAMES.from_wire_name("RANDOM")

    assert excinfo.value.enum_type is PlaylistType
    assert excinfo.value.token == "RANDOM"


def test_tokens_are_case_sensitive() -> None:
    with pytest.raises(UnknownEnumToken):
        PLAYLIST_TYPE_NAMES.from_wire_name("explicit")


def test_unset_member_is_outside_the_closed_set() -> None:
    assert TagInclusionRule.NONE not in TAG_INCLUSION_RULE_NAMES
    assert TAG_INCLUSION_RULE_NAMES.members() == [
        TagInclusionRule.AND,
        TagInclusionRule.OR,
    ]
    with pytest.raises(UnknownEnumToken):
        TAG_INCLUSION_RULE_NAMES.to_wire_name(TagInclusionRule.NONE)
    with pytest.raises(UnknownEnumToken):
        TAG_INCLUSION_RULE_NAMES.from_wire_name("NONE")


def test_raw_string_value_is_not_a_member() -> None:
    with pytest.raises(UnknownEnumToken):
        PLAYLIST_TYPE_NAMES.to_wire_name("explicit")  # type: ignore[arg-type]


def test_colliding_overrides_are_refused() -> None:
    with pytest.raises(ValueError):
        EnumNameMap(ItemState, {ItemState.ACTIVE: "INACTIVE"})


def test_unregistered_enum_has_no_name_map() -> None:
    with pytest.raises(LookupError):
        name_map_for(EnumNameMap)  # type: ignore[arg-type]
