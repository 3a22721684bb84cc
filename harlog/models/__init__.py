"""HAR 1.2 document model."""

from harlog.models.base import HARModel
from harlog.models.cache import Cache, CacheEntry, CacheState
from harlog.models.har import (
    Browser,
    Content,
    Cookie,
    Creator,
    Entry,
    Header,
    Log,
    Page,
    Param,
    PostData,
    QueryStringPair,
    Request,
    Response,
)
from harlog.models.timing import OptionalTiming, PageTimings, Timing
from harlog.models.types import CacheStateKind, TimingKind

__all__ = [
    "Browser",
    "Cache",
    "CacheEntry",
    "CacheState",
    "CacheStateKind",
    "Content",
    "Cookie",
    "Creator",
    "Entry",
    "HARModel",
    "Header",
    "Log",
    "OptionalTiming",
    "Page",
    "PageTimings",
    "Param",
    "PostData",
    "QueryStringPair",
    "Request",
    "Response",
    "Timing",
    "TimingKind",
]
