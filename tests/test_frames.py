"""Tests for the legacy and enhanced binary frame layouts."""

from __future__ import annotations

import struct
import time

import pytest

from pushgate.domain.entities import Device, Notification
from pushgate.domain.exceptions import ExceededMessageSizeError
from pushgate.infrastructure.gateway import (
    EnhancedFrame,
    LegacyFrame,
    MAX_FRAME_SIZE,
    build_enhanced_frame,
    build_frame,
    build_legacy_frame,
    encode_payload,
)

TOKEN_BYTES = bytes(range(32))
NOW = 1_700_000_000


def _notification(**overrides) -> Notification:
    values = {
        "id": 42,
        "device": Device(id=1, token=TOKEN_BYTES.hex()),
        "alert": "Hello!",
        "badge": 5,
        "sound": "my_sound.aiff",
    }
    values.update(overrides)
    return Notification(**values)


def test_legacy_frame_layout() -> None:
    notification = _notification()
    payload = encode_payload(notification)

    frame = build_legacy_frame(notification)

    assert frame == (
        b"\x00" + b"\x00\x20" + TOKEN_BYTES + b"\x00" + bytes([len(payload)]) + payload
    )


def test_enhanced_frame_header() -> None:
    notification = _notification()
    payload = encode_payload(notification)

    frame = build_enhanced_frame(notification, now=NOW)

    assert frame[0] == 0x01
    assert frame[1:5] == struct.pack("!I", 42)
    assert frame[5:9] == struct.pack("!I", NOW + 2_592_000)
    assert frame[9:11] == b"\x00\x20"
    assert frame[11:43] == TOKEN_BYTES
    assert frame[43:45] == b"\x00" + bytes([len(payload)])
    assert frame[45:] == payload


def test_enhanced_frame_expiry_defaults_to_current_time() -> None:
    before = int(time.time())
    frame = build_enhanced_frame(_notification(), 60)
    after = int(time.time())

    (expiry,) = struct.unpack("!I", frame[5:9])
    assert before + 60 <= expiry <= after + 60


def test_build_frame_dispatches_on_kind() -> None:
    notification = _notification()

    assert build_frame(notification, LegacyFrame()) == build_legacy_frame(notification)
    assert build_frame(notification, EnhancedFrame(identifier=42, expiry=NOW + 10)) == (
        build_enhanced_frame(notification, 10, now=NOW)
    )


def test_enhanced_frame_requires_identifier() -> None:
    with pytest.raises(ValueError):
        build_enhanced_frame(_notification(id=None))


@pytest.mark.parametrize("identifier", [-1, 2**32])
def test_enhanced_frame_rejects_identifier_outside_four_bytes(identifier) -> None:
    with pytest.raises(ValueError, match="4 unsigned bytes"):
        build_enhanced_frame(_notification(id=identifier), now=NOW)


def test_enhanced_frame_accepts_largest_identifier() -> None:
    frame = build_enhanced_frame(_notification(id=2**32 - 1), now=NOW)

    assert frame[1:5] == b"\xff\xff\xff\xff"


def test_frame_of_exactly_max_size_is_accepted() -> None:
    notification = _notification(
        alert="a" * 150, badge=None, sound=None, custom_properties={"k": "v" * 42}
    )
    assert len(encode_payload(notification)) == 219

    frame = build_legacy_frame(notification)

    assert len(frame) == MAX_FRAME_SIZE


@pytest.mark.parametrize("builder", [build_legacy_frame, build_enhanced_frame])
def test_oversized_frame_raises(builder) -> None:
    notification = _notification(
        alert="a" * 150, badge=None, sound=None, custom_properties={"k": "v" * 60}
    )
    assert len(encode_payload(notification)) <= 255

    with pytest.raises(ExceededMessageSizeError) as excinfo:
        builder(notification)

    assert excinfo.value.size > MAX_FRAME_SIZE
    assert len(excinfo.value.frame) == excinfo.value.size
    assert excinfo.value.notification_id == 42


def test_payload_longer_than_length_field_raises() -> None:
    notification = _notification(custom_properties={"data": "x" * 300})

    with pytest.raises(ExceededMessageSizeError) as excinfo:
        build_legacy_frame(notification)

    assert excinfo.value.frame.endswith(encode_payload(notification))
