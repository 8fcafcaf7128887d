"""SAUCE record data structure."""

from dataclasses import dataclass, field
from datetime import date as _date
from enum import IntEnum


SAUCE_ID = b"SAUCE"


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


class CharacterFileType(IntEnum):
    """SAUCE file types for CHARACTER data type."""
    ASCII = 0
    ANSI = 1
    ANSIMATION = 2
    RIP = 3
    PCBOARD = 4
    AVATAR = 5
    HTML = 6
    SOURCE = 7
    TUNDRA = 8


@dataclass(frozen=True)
class SauceDate:
    """
    Creation date from the CCYYMMDD field.

    Digit groups that do not parse are stored as 0 and flag the date
    as malformed, so the numbers can still be shown as recorded.
    """
    year: int = 0
    month: int = 0
    day: int = 0
    raw: str = ""
    malformed: bool = False

    def to_date(self) -> _date | None:
        """Return a real calendar date, or None if the fields don't form one."""
        try:
            return _date(self.year, self.month, self.day)
        except ValueError:
            return None

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    SAUCE is a metadata trailer used by the BBS/ANSI art scene (and for
    images, music and archives) to describe a file. See:
    https://www.acid.org/info/sauce/sauce.htm

    Instances are immutable. Only version "00" is understood, but the
    version bytes are kept as found.
    """
    id: bytes = SAUCE_ID
    version: bytes = b"00"
    title: str = ""
    author: str = ""
    group: str = ""
    date: SauceDate = field(default_factory=SauceDate)
    file_size: int = 0
    data_type: int = DataType.NONE
    file_type: int = 0
    type_info: tuple[int, int, int, int] = (0, 0, 0, 0)
    comment_count: int = 0
    flags: int = 0
    type_info_reserved: bytes = bytes(22)

    @property
    def version_tuple(self) -> tuple[int, int]:
        """Version as (major, minor) raw byte values."""
        return self.version[0], self.version[1]

    @property
    def version_text(self) -> str:
        """Version for display: ASCII digits as found, else the byte values."""
        if self.version.isdigit():
            return self.version.decode("ascii")
        major, minor = self.version_tuple
        return f"{major}{minor}"

    @property
    def data_type_name(self) -> str | None:
        from sauce_dump.sauce.catalog import data_type_name
        return data_type_name(self.data_type)

    @property
    def file_type_name(self) -> str | None:
        from sauce_dump.sauce.catalog import file_type_name
        return file_type_name(self.data_type, self.file_type)

    @property
    def width(self) -> int:
        """Get width (alias for type_info[0])."""
        return self.type_info[0]

    @property
    def height(self) -> int:
        """Get height (alias for type_info[1])."""
        return self.type_info[1]

    def __str__(self) -> str:
        from sauce_dump.render.text import format_report, render
        return format_report(render(self))
