"""
sauce-dump: read SAUCE metadata records

Decode the 128-byte SAUCE trailer found at the end of BBS-era art,
images, music and archives, and render it as a readable report.

Quick Start:
    >>> import sauce_dump
    >>> record = sauce_dump.parse_sauce("artwork.ans")
    >>> if record is not None:
    ...     print(record)

Features:
    - Locate and validate the SAUCE trailer of any file
    - Decode title, author, group, date, file size and type info
    - Name data types and file types from the SAUCE tables
    - Derive dimensions (characters or pixels) from type info
    - Text and JSON reports, plus the ``sauce-dump`` command
"""

__version__ = "0.1.0"

# SAUCE records
from sauce_dump.sauce.record import CharacterFileType, DataType, SauceDate, SauceRecord
from sauce_dump.sauce.errors import (
    InputTooShortError,
    SauceError,
    SauceIOError,
    ShortReadError,
)

# Decoding
from sauce_dump.sauce.reader import decode, parse_sauce, parse_sauce_bytes

# Type names
from sauce_dump.sauce.catalog import data_type_name, file_type_name

# Rendering
from sauce_dump.render.text import ReportLine, format_report, render
from sauce_dump.render.json_format import render_json

__all__ = [
    # Version
    "__version__",
    # Records
    "SauceRecord",
    "SauceDate",
    "DataType",
    "CharacterFileType",
    # Errors
    "SauceError",
    "InputTooShortError",
    "ShortReadError",
    "SauceIOError",
    # Decoding
    "decode",
    "parse_sauce",
    "parse_sauce_bytes",
    # Type names
    "data_type_name",
    "file_type_name",
    # Rendering
    "ReportLine",
    "render",
    "format_report",
    "render_json",
]
