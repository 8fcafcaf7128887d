"""SAUCE metadata handling."""

from sauce_dump.sauce.catalog import data_type_name, file_type_name
from sauce_dump.sauce.errors import (
    InputTooShortError,
    SauceError,
    SauceIOError,
    ShortReadError,
)
from sauce_dump.sauce.reader import decode, parse_sauce, parse_sauce_bytes
from sauce_dump.sauce.record import CharacterFileType, DataType, SauceDate, SauceRecord

__all__ = [
    "SauceRecord",
    "SauceDate",
    "DataType",
    "CharacterFileType",
    "decode",
    "parse_sauce",
    "parse_sauce_bytes",
    "data_type_name",
    "file_type_name",
    "SauceError",
    "InputTooShortError",
    "ShortReadError",
    "SauceIOError",
]
