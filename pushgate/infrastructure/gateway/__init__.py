"""Wire codec and transport for the binary push gateway."""

from .connection import GatewayConnection, open_for_delivery
from .frames import (
    EnhancedFrame,
    FrameKind,
    LegacyFrame,
    MAX_FRAME_SIZE,
    build_enhanced_frame,
    build_frame,
    build_legacy_frame,
)
from .payload import DEFAULT_SOUND, PayloadEncoder, build_payload, encode_payload
from .responses import ErrorResponse, decode_error_response, read_error

__all__ = [
    "DEFAULT_SOUND",
    "EnhancedFrame",
    "ErrorResponse",
    "FrameKind",
    "GatewayConnection",
    "LegacyFrame",
    "MAX_FRAME_SIZE",
    "PayloadEncoder",
    "build_enhanced_frame",
    "build_frame",
    "build_legacy_frame",
    "build_payload",
    "decode_error_response",
    "encode_payload",
    "open_for_delivery",
    "read_error",
]
