"""Tests for upstream response models."""

from datetime import datetime, timezone

import pytest

from app.models.media import Location, Media
from app.models.response import MediasResponse, Meta


def test_location_id_from_int_and_str():
    assert Location.model_validate({"id": 514276}).id == "514276"
    assert Location.model_validate({"id": "514276"}).id == "514276"
    assert Location.model_validate({"id": None}).id == ""
    assert Location.model_validate({"id": 1.5}).id == ""
    assert Location.model_validate({}).id == ""


def test_created_at_parses_unix_seconds():
    media = Media.model_validate({"id": "m1", "created_time": "1450000000"})
    assert media.created_at == datetime(2015, 12, 13, 9, 46, 40, tzinfo=timezone.utc)


def test_created_at_rejects_garbage():
    media = Media.model_validate({"id": "m1", "created_time": "yesterday"})
    with pytest.raises(ValueError):
        _ = media.created_at


def test_image_url_fallback_order():
    media = Media.model_validate({
        "id": "m1",
        "images": {
            "low_resolution": {"url": "low.jpg"},
            "thumbnail": {"url": "thumb.jpg"},
        },
    })
    assert media.image_url == "low.jpg"
    assert Media.model_validate({"id": "m2"}).image_url == ""


def test_comment_from_alias():
    media = Media.model_validate({
        "id": "m1",
        "caption": {"id": "c1", "text": "Spring tulips", "from": {"id": "9", "username": "mimoza"}},
    })
    assert media.caption_text == "Spring tulips"
    assert media.caption.from_.username == "mimoza"


def test_meta_ok():
    assert Meta(code=200).ok
    assert not Meta(code=400, error_message="bad").ok


def test_medias_response_ignores_unknown_fields():
    resp = MediasResponse.model_validate({
        "meta": {"code": 200},
        "pagination": {"next_url": "https://api.test/next"},
        "data": [{"id": "m1", "users_in_photo": [{"user": {"id": "3", "username": "a"}, "position": {"x": 0.5, "y": 0.2}}]}],
    })
    assert resp.data[0].users_in_photo[0].position.x == 0.5
