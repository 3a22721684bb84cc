"""Cache objects and the tri-state encoding of cache entries."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    SerializationInfo,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

from harlog.models.base import HARModel
from harlog.models.types import CacheStateKind


class CacheEntry(HARModel):
    """State of a browser cache entry."""

    expires: StrictStr | None = None
    last_access: StrictStr
    e_tag: StrictStr
    hit_count: Annotated[StrictInt, Field(ge=0)]
    comment: StrictStr | None = None


class CacheState(BaseModel):
    """Cache entry state around a request: absent, present or unknown.

    The three states map onto the wire as ``null``, a ``CacheEntry`` object,
    and a missing key respectively. Unlike other optional fields, a missing
    key and an explicit ``null`` mean different things here.
    """

    model_config = ConfigDict(frozen=True)

    kind: CacheStateKind
    entry: CacheEntry | None = None

    @model_validator(mode="after")
    def _entry_only_when_present(self) -> CacheState:
        if (self.kind is CacheStateKind.PRESENT) != (self.entry is not None):
            raise ValueError("a cache entry is carried by the present state only")
        return self

    @classmethod
    def absent(cls) -> CacheState:
        return cls(kind=CacheStateKind.ABSENT)

    @classmethod
    def present(cls, entry: CacheEntry) -> CacheState:
        return cls(kind=CacheStateKind.PRESENT, entry=entry)

    @classmethod
    def unknown(cls) -> CacheState:
        return cls(kind=CacheStateKind.UNKNOWN)

    @property
    def is_known(self) -> bool:
        return self.kind is not CacheStateKind.UNKNOWN

    @classmethod
    def from_wire(cls, value: Any) -> CacheState:
        """Decode a value found under a present ``beforeRequest``/``afterRequest`` key."""
        if value is None:
            return cls.absent()
        if not isinstance(value, dict):
            raise PydanticCustomError(
                "invalid_cache_state",
                "Cache state should be an object or null, got {type}",
                {"type": type(value).__name__},
            )
        try:
            entry = CacheEntry.model_validate(value, by_alias=True, by_name=False)
        except ValidationError as e:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors(include_url=False)
            )
            raise PydanticCustomError(
                "invalid_cache_state",
                "Malformed cache entry ({detail})",
                {"detail": detail},
            ) from e
        return cls.present(entry)

    def to_wire(self) -> dict[str, Any] | None:
        """Wire value for a known state; unknown states are dropped by ``Cache``."""
        if self.entry is None:
            return None
        return self.entry.model_dump(mode="json", by_alias=True)

    def __repr__(self) -> str:
        if self.entry is not None:
            return f"CacheState.present({self.entry!r})"
        return f"CacheState.{self.kind.value}()"


def _coerce_cache_state(value: Any) -> Any:
    if isinstance(value, CacheState):
        return value
    return CacheState.from_wire(value)


def _serialize_cache_state(state: CacheState, info: SerializationInfo) -> Any:
    if state.entry is None:
        return None
    return state.entry.model_dump(mode=info.mode, by_alias=bool(info.by_alias))


WireCacheState = Annotated[
    CacheState,
    BeforeValidator(_coerce_cache_state),
    PlainSerializer(_serialize_cache_state, return_type=Any),
]


class Cache(HARModel):
    """Cache usage of an entry. Both states default to unknown."""

    before_request: WireCacheState = Field(default_factory=CacheState.unknown)
    after_request: WireCacheState = Field(default_factory=CacheState.unknown)
    comment: StrictStr | None = None

    def _omits(self, name: str, wire_value: Any) -> bool:
        value = getattr(self, name)
        if isinstance(value, CacheState):
            return not value.is_known
        return wire_value is None
