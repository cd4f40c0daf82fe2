from __future__ import annotations

import json

import pytest

from bcmapi import (
    BrightcoveSerializer,
    CodecNotFound,
    DecodeTypeMismatch,
    ItemCollection,
    Playlist,
    PlaylistType,
    RemoteFault,
    ResultEnvelope,
    Video,
    get_serializer,
)


def test_deserialize_parses_and_decodes() -> None:
    body = json.dumps({"id": 3, "name": "Top", "playlistType": "ALPHABETICAL"})

    playlist = BrightcoveSerializer().deserialize(body, Playlist)

    assert playlist == Playlist(id=3, name="Top", playlist_type=PlaylistType.ALPHABETICAL)


def test_deserialize_accepts_bytes() -> None:
    body = b'{"result": 42, "error": null, "id": null}'

    assert BrightcoveSerializer().deserialize(body, ResultEnvelope[int]).unwrap() == 42


def test_deserialize_surfaces_remote_faults() -> None:
    body = '{"result": null, "error": {"message": "no write token", "code": 210}}'

    with pytest.raises(RemoteFault):
        BrightcoveSerializer().deserialize(body, ResultEnvelope[Video])


def test_invalid_json_is_a_type_mismatch() -> None:
    with pytest.raises(DecodeTypeMismatch) as excinfo:
        BrightcoveSerializer().deserialize("{not json", Playlist)

    assert excinfo.value.expected == "JSON document"


def test_serialize_infers_entity_type() -> None:
    serializer = BrightcoveSerializer()
    playlist = Playlist(name="Mix", video_ids=[2, 1])

    rendered = serializer.serialize(playlist)

    assert json.loads(rendered) == serializer.to_wire(playlist)
    assert json.loads(rendered)["videoIds"] == [2, 1]


def test_generic_containers_need_an_explicit_type() -> None:
    serializer = BrightcoveSerializer()
    collection = ItemCollection(items=[Video(id=1), Video(id=2)])

    with pytest.raises(CodecNotFound):
        serializer.serialize(collection)

    rendered = json.loads(serializer.serialize(collection, ItemCollection[Video]))
    assert [item["id"] for item in rendered["items"]] == [1, 2]


def test_convert_to_type_works_on_parsed_trees() -> None:
    video = BrightcoveSerializer().convert_to_type({"id": 8, "tags": ["a"]}, Video)

    assert video == Video(id=8, tags=["a"])


def test_indent_controls_rendering() -> None:
    rendered = BrightcoveSerializer(indent=2).serialize(Playlist(name="Pretty"))

    assert "\n  " in rendered


def test_process_serializer_is_shared() -> None:
    assert get_serializer() is get_serializer()
