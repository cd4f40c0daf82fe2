from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from bcmapi import DecodeTypeMismatch, UnknownEnumToken, Video, get_registry
from bcmapi.models import (
    CuePoint,
    CuePointType,
    Economics,
    Image,
    ImageType,
    ItemState,
    LogoOverlay,
    Rendition,
    VideoCodec,
)

CREATED_MS = 1330523743000
PUBLISHED_MS = 1330523800123


def _codec():
    return get_registry().resolve(Video)


def _video_payload() -> Dict[str, Any]:
    return {
        "id": 4200,
        "accountId": 12,
        "name": "Launch keynote",
        "referenceId": "keynote-2012",
        "shortDescription": "Opening talk",
        "longDescription": None,
        "FLVURL": "https://cdn.example.test/keynote.flv",
        "creationDate": str(CREATED_MS),
        "publishedDate": PUBLISHED_MS,
        "lastModifiedDate": None,
        "itemState": "ACTIVE",
        "linkURL": "https://example.test/keynote",
        "linkText": "More",
        "tags": ["launch", "keynote"],
        "videoStillURL": "https://cdn.example.test/still.jpg",
        "thumbnailURL": "https://cdn.example.test/thumb.jpg",
        "length": 3600000,
        "economics": "AD_SUPPORTED",
        "playsTotal": 1500,
        "playsTrailingWeek": None,
        "customFields": {"speaker": "Jane"},
        "renditions": [
            {
                "id": 1,
                "displayName": "low",
                "encodingRate": 400000,
                "frameWidth": 480,
                "frameHeight": 270,
                "videoCodec": "H264",
                "videoContainer": "MP4",
                "controllerType": "AKAMAI_HD",
                "audioOnly": False,
                "url": "https://cdn.example.test/low.mp4",
            },
            {"id": 2, "displayName": "high", "encodingRate": 1800000},
        ],
        "videoFullLength": {"id": 3, "displayName": "master"},
        "cuePoints": [
            {"id": 77, "videoId": 4200, "name": "mid-roll", "time": 60000, "type": "AD"},
            {"name": "intro", "time": 0, "type": "CHAPTER", "forceStop": True},
        ],
        "videoStill": {"id": 90, "type": "VIDEO_STILL", "remoteUrl": None},
        "logoOverlay": None,
    }


def test_decode_builds_nested_entities() -> None:
    video = _codec().decode(_video_payload())

    assert video.id == 4200
    assert video.account_id == 12
    assert video.flv_url == "https://cdn.example.test/keynote.flv"
    assert video.item_state is ItemState.ACTIVE
    assert video.economics is Economics.AD_SUPPORTED
    assert video.tags == ["launch", "keynote"]
    assert video.custom_fields == {"speaker": "Jane"}
    assert video.plays_total == 1500
    assert video.plays_trailing_week is None
    assert [rendition.display_name for rendition in video.renditions] == ["low", "high"]
    assert isinstance(video.renditions[0], Rendition)
    assert video.renditions[0].video_codec is VideoCodec.H264
    assert video.video_full_length == Rendition(id=3, display_name="master")
    assert video.cue_points[0] == CuePoint(
        id=77, video_id=4200, name="mid-roll", time=60000, type=CuePointType.AD
    )
    assert video.cue_points[1].force_stop is True
    assert video.video_still == Image(id=90, type=ImageType.VIDEO_STILL)
    assert video.logo_overlay is None


def test_dates_decode_from_strings_or_numbers_as_utc() -> None:
    video = _codec().decode(_video_payload())

    assert video.creation_date == datetime(2012, 2, 29, 13, 55, 43, tzinfo=timezone.utc)
    assert video.published_date is not None
    assert video.published_date.tzinfo is not None
    assert video.published_date.microsecond == 123000
    assert video.last_modified_date is None


def test_encode_sends_only_writable_fields() -> None:
    video = _codec().decode(_video_payload())

    wire = _codec().encode(video)

    assert wire["id"] == 4200
    assert wire["name"] == "Launch keynote"
    assert wire["itemState"] == "ACTIVE"
    assert wire["economics"] == "AD_SUPPORTED"
    assert wire["linkURL"] == "https://example.test/keynote"
    assert wire["customFields"] == {"speaker": "Jane"}
    assert [point["name"] for point in wire["cuePoints"]] == ["mid-roll", "intro"]
    for read_only in (
        "accountId",
        "FLVURL",
        "renditions",
        "creationDate",
        "publishedDate",
        "thumbnailURL",
        "length",
        "playsTotal",
    ):
        assert read_only not in wire
    for unset in ("startDate", "endDate", "logoOverlay"):
        assert unset not in wire


def test_new_video_omits_id_and_state() -> None:
    wire = _codec().encode(Video(name="Upload"))

    assert "id" not in wire
    assert "itemState" not in wire
    assert wire["economics"] == "FREE"


def test_schedule_dates_encode_as_epoch_milliseconds() -> None:
    start = datetime(2012, 2, 29, 13, 55, 43, tzinfo=timezone.utc)
    video = Video(name="Scheduled", start_date=start)

    wire = _codec().encode(video)

    assert wire["startDate"] == CREATED_MS
    assert _codec().decode(wire).start_date == start


def test_logo_overlay_encodes_nested_image() -> None:
    overlay = LogoOverlay(
        image=Image(type=ImageType.LOGO_OVERLAY, remote_url="https://cdn.example.test/logo.png"),
        tooltip="Visit us",
    )

    wire = _codec().encode(Video(name="Branded", logo_overlay=overlay))

    assert wire["logoOverlay"]["image"] == {
        "referenceId": None,
        "type": "LOGO_OVERLAY",
        "remoteUrl": "https://cdn.example.test/logo.png",
        "displayName": None,
    }
    assert wire["logoOverlay"]["alignment"] == "BOTTOM_RIGHT"
    assert _codec().decode(wire).logo_overlay == overlay


def test_nested_type_mismatch_reports_the_inner_key() -> None:
    payload = {"renditions": [{"id": 1, "encodingRate": "fast"}]}

    with pytest.raises(DecodeTypeMismatch) as excinfo:
        _codec().decode(payload)

    assert excinfo.value.key == "encodingRate"
    assert excinfo.value.expected == "integer"


def test_malformed_date_is_a_type_mismatch() -> None:
    with pytest.raises(DecodeTypeMismatch) as excinfo:
        _codec().decode({"creationDate": "yesterday"})

    assert excinfo.value.key == "creationDate"
    assert excinfo.value.expected == "epoch milliseconds"


def test_non_map_list_element_reports_the_list_key() -> None:
    with pytest.raises(DecodeTypeMismatch) as excinfo:
        _codec().decode({"cuePoints": ["mid-roll"]})

    assert excinfo.value.key == "cuePoints"
    assert excinfo.value.expected == "object"


def test_unknown_nested_enum_token_fails() -> None:
    with pytest.raises(UnknownEnumToken):
        _codec().decode({"renditions": [{"videoCodec": "VP9"}]})
