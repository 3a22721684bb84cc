"""Decode errors raised by the HAR codec."""

from __future__ import annotations

from typing import Any

from harlog.models.types import DecodeErrorKind


class HarDecodeError(ValueError):
    """A HAR document could not be decoded.

    ``path`` locates the failing field with wire key names, e.g.
    ``entries.0.timings.dns``; it is empty when the whole input is at fault.
    ``errors`` holds every problem found, the message reports the first one.
    """

    kind = DecodeErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        path: str,
        cause: str,
        *,
        entity: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        self.entity = entity
        self.errors = errors or []
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = self.entity or "document"
        if self.path:
            where = f"{where}.{self.path}"
        return f"{self.kind.value} at {where}: {self.cause}"

    def with_prefix(self, prefix: str) -> HarDecodeError:
        """Same error, located under ``prefix`` (e.g. the ``log`` envelope key)."""
        path = f"{prefix}.{self.path}" if self.path else prefix
        return type(self)(path, self.cause, entity=self.entity, errors=self.errors)


class MissingFieldError(HarDecodeError):
    kind = DecodeErrorKind.MISSING_FIELD


class TypeMismatchError(HarDecodeError):
    kind = DecodeErrorKind.TYPE_MISMATCH


class InvalidTimingError(HarDecodeError):
    kind = DecodeErrorKind.INVALID_TIMING


class InvalidCacheStateError(HarDecodeError):
    kind = DecodeErrorKind.INVALID_CACHE_STATE


class MalformedJsonError(HarDecodeError):
    kind = DecodeErrorKind.MALFORMED_JSON


ERRORS_BY_KIND: dict[DecodeErrorKind, type[HarDecodeError]] = {
    cls.kind: cls
    for cls in (
        MissingFieldError,
        TypeMismatchError,
        InvalidTimingError,
        InvalidCacheStateError,
        MalformedJsonError,
    )
}
