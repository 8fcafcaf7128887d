"""SAUCE record parsing."""

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO

from sauce_dump.sauce.errors import InputTooShortError, SauceIOError, ShortReadError
from sauce_dump.sauce.record import SAUCE_ID, SauceDate, SauceRecord


logger = logging.getLogger(__name__)

SAUCE_RECORD_SIZE = 128
# Trailer plus at least one byte of body
MIN_FILE_SIZE = SAUCE_RECORD_SIZE + 1

# Leading/trailing characters removed from text fields: controls,
# space, DEL and the Latin-1 whitespace NEL and NBSP.
_TRIM_CHARS = "".join(chr(c) for c in range(0x21)) + "\x7f\x85\xa0"
_DIGITS = frozenset("0123456789")


def parse_sauce(path: str | Path) -> SauceRecord | None:
    """
    Parse the SAUCE record at the end of a file.

    Returns None when the file has no SAUCE signature. Raises
    InputTooShortError, ShortReadError or SauceIOError otherwise.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise SauceIOError(f"cannot open {path}: {exc.strerror or exc}") from exc
    with f:
        return decode(f)


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """Parse a SAUCE record from the end of an in-memory buffer."""
    return decode(io.BytesIO(data))


def decode(source: BinaryIO) -> SauceRecord | None:
    """
    Decode the SAUCE trailer of a seekable binary stream.

    The stream is only read; its position is left after the trailer.
    """
    try:
        size = source.seek(0, os.SEEK_END)
        if size < MIN_FILE_SIZE:
            raise InputTooShortError(size, MIN_FILE_SIZE)
        source.seek(size - SAUCE_RECORD_SIZE)
        block = source.read(SAUCE_RECORD_SIZE)
    except OSError as exc:
        raise SauceIOError(f"read failed: {exc}") from exc

    if len(block) != SAUCE_RECORD_SIZE:
        raise ShortReadError(SAUCE_RECORD_SIZE, len(block))

    return decode_trailer(block)


def decode_trailer(block: bytes) -> SauceRecord | None:
    """Decode one 128-byte trailer block, or None if it isn't SAUCE."""
    if len(block) != SAUCE_RECORD_SIZE:
        raise ValueError(
            f"SAUCE trailer must be {SAUCE_RECORD_SIZE} bytes, got {len(block)}"
        )

    if block[0:5] != SAUCE_ID:
        logger.debug("no SAUCE signature (found %r)", block[0:5])
        return None

    return SauceRecord(
        id=bytes(block[0:5]),
        version=bytes(block[5:7]),
        title=_text(block[7:42]),
        author=_text(block[42:62]),
        group=_text(block[62:82]),
        date=parse_date(block[82:90]),
        file_size=int.from_bytes(block[90:94], "little"),
        data_type=block[94],
        file_type=block[95],
        type_info=(
            int.from_bytes(block[96:98], "little"),
            int.from_bytes(block[98:100], "little"),
            int.from_bytes(block[100:102], "little"),
            int.from_bytes(block[102:104], "little"),
        ),
        comment_count=block[104],
        flags=block[105],
        type_info_reserved=bytes(block[106:128]),
    )


def parse_date(raw: bytes) -> SauceDate:
    """
    Parse a CCYYMMDD date field.

    Each of the year, month and day groups that isn't all decimal
    digits becomes 0 and marks the result as malformed.
    """
    text = raw.decode("latin-1")
    year, year_ok = _number(text[0:4])
    month, month_ok = _number(text[4:6])
    day, day_ok = _number(text[6:8])
    malformed = not (year_ok and month_ok and day_ok)
    if malformed:
        logger.debug("malformed SAUCE date %r, unparsed fields set to 0", text)
    return SauceDate(year=year, month=month, day=day, raw=text, malformed=malformed)


def _number(text: str) -> tuple[int, bool]:
    if text and _DIGITS.issuperset(text):
        return int(text), True
    return 0, False


def _text(raw: bytes) -> str:
    return raw.decode("latin-1").strip(_TRIM_CHARS)
