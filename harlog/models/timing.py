"""Timing objects and the -1 sentinel encoding of optional timings."""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    StrictStr,
    model_validator,
)
from pydantic_core import PydanticCustomError

from harlog.models.base import Duration, HARModel, check_duration
from harlog.models.types import NOT_AVAILABLE, TimingKind


class OptionalTiming(BaseModel):
    """A timing phase that is either measured or does not apply.

    On the wire this is always a number: the duration itself, or ``-1`` when
    the phase does not apply (e.g. ``connect`` on a reused connection).
    """

    model_config = ConfigDict(frozen=True)

    kind: TimingKind
    duration: Duration = 0

    @model_validator(mode="after")
    def _no_duration_when_not_applicable(self) -> OptionalTiming:
        if self.kind is TimingKind.NOT_APPLICABLE and self.duration != 0:
            raise ValueError("a not-applicable timing carries no duration")
        return self

    @classmethod
    def timed(cls, duration: int | float) -> OptionalTiming:
        return cls(kind=TimingKind.TIMED, duration=duration)

    @classmethod
    def not_applicable(cls) -> OptionalTiming:
        return cls(kind=TimingKind.NOT_APPLICABLE)

    @property
    def is_applicable(self) -> bool:
        return self.kind is TimingKind.TIMED

    @classmethod
    def from_wire(cls, value: Any) -> OptionalTiming:
        """Decode a wire number; ``-1`` is the only negative value allowed."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if value == NOT_AVAILABLE:
                return cls.not_applicable()
            if value < 0:
                raise PydanticCustomError(
                    "invalid_timing",
                    "Timing {value} is negative and not the -1 sentinel",
                    {"value": value},
                )
        return cls.timed(check_duration(value))

    def to_wire(self) -> int | float:
        return self.duration if self.is_applicable else NOT_AVAILABLE

    def __repr__(self) -> str:
        if self.is_applicable:
            return f"OptionalTiming.timed({self.duration!r})"
        return "OptionalTiming.not_applicable()"


def _coerce_timing(value: Any) -> Any:
    if isinstance(value, OptionalTiming):
        return value
    return OptionalTiming.from_wire(value)


WireTiming = Annotated[
    OptionalTiming,
    BeforeValidator(_coerce_timing),
    PlainSerializer(OptionalTiming.to_wire, return_type=Any),
]

TimingInput = Union[OptionalTiming, int, float]


class PageTimings(HARModel):
    """Page load milestones, in milliseconds since ``page.startedDateTime``."""

    on_content_load: WireTiming
    on_load: WireTiming
    comment: StrictStr | None = None

    @classmethod
    def new(
        cls,
        on_content_load: TimingInput,
        on_load: TimingInput,
        comment: str | None = None,
    ) -> PageTimings:
        return cls(on_content_load=on_content_load, on_load=on_load, comment=comment)


class Timing(HARModel):
    """Phases of a request/response round trip, in milliseconds.

    ``blocked``, ``dns``, ``connect`` and ``ssl`` may be not applicable;
    ``send``, ``wait`` and ``receive`` are always measured. ``ssl`` time is
    also counted inside ``connect``.
    """

    blocked: WireTiming
    dns: WireTiming
    connect: WireTiming
    send: Duration
    wait: Duration
    receive: Duration
    ssl: WireTiming
    comment: StrictStr | None = None

    def total(self) -> int | float:
        """Sum of the applicable phases, as HAR's ``entry.time`` expects."""
        optional = (self.blocked, self.dns, self.connect)
        return sum(t.duration for t in optional if t.is_applicable) + (
            self.send + self.wait + self.receive
        )
