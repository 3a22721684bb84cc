"""HAR file storage: reading and writing ``{"log": {...}}`` documents."""

from __future__ import annotations

import logging
from pathlib import Path

import orjson

from harlog.codec import from_dict, parse_json, to_dict
from harlog.errors import HarDecodeError
from harlog.models.har import Log

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "log"


def read_envelope(data: bytes | str) -> Log:
    """Decode a HAR document. A bare log object without the envelope is accepted."""
    raw = parse_json(data)
    if isinstance(raw, dict) and ENVELOPE_KEY in raw:
        try:
            return from_dict(Log, raw[ENVELOPE_KEY])
        except HarDecodeError as e:
            raise e.with_prefix(ENVELOPE_KEY) from e
    return from_dict(Log, raw)


def wrap_envelope(
    log: Log, *, indent: bool = True, emit_entry_time: bool = False
) -> bytes:
    """Encode ``log`` inside the ``{"log": ...}`` envelope."""
    option = orjson.OPT_INDENT_2 if indent else 0
    document = {ENVELOPE_KEY: to_dict(log, emit_entry_time=emit_entry_time)}
    return orjson.dumps(document, option=option)


def load_har(path: Path | str) -> Log:
    """Load a HAR file."""
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"HAR file not found: {filepath}")
    log = read_envelope(filepath.read_bytes())
    logger.debug(
        "Loaded %s: %d entries, %d pages",
        filepath,
        len(log.entries),
        len(log.pages or []),
    )
    return log


def save_har(
    log: Log,
    path: Path | str,
    *,
    indent: bool = True,
    emit_entry_time: bool = False,
) -> Path:
    """Write ``log`` as a HAR file. Returns the file path."""
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_bytes(
        wrap_envelope(log, indent=indent, emit_entry_time=emit_entry_time)
    )
    logger.debug("Saved %d entries to %s", len(log.entries), filepath)
    return filepath
