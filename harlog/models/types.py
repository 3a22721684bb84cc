"""Enums shared by the HAR value types and the codec."""

from __future__ import annotations

from enum import Enum

HAR_VERSION = "1.2"
CREATOR_NAME = "harlog"

# Wire value standing for "not available" in timings and sizes
NOT_AVAILABLE = -1


class TimingKind(str, Enum):
    TIMED = "timed"
    NOT_APPLICABLE = "not_applicable"


class CacheStateKind(str, Enum):
    ABSENT = "absent"
    PRESENT = "present"
    UNKNOWN = "unknown"


class DecodeErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_TIMING = "invalid_timing"
    INVALID_CACHE_STATE = "invalid_cache_state"
    MALFORMED_JSON = "malformed_json"
