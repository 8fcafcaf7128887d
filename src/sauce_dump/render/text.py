"""Render SAUCE records as a labeled text report."""

from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from sauce_dump.sauce.catalog import data_type_name, file_type_name, has_file_type_table
from sauce_dump.sauce.record import CharacterFileType, DataType, SauceRecord


# Width assumed when a character file leaves it unset
DEFAULT_CHARACTER_WIDTH = 80
LABEL_WIDTH = 8

ANY_FILE_TYPE = None


class ReportLine(NamedTuple):
    """One label/value line of a report."""
    label: str
    value: str


def _characters(record: SauceRecord) -> str:
    width, height = record.type_info[0], record.type_info[1]
    if width == 0:
        width = DEFAULT_CHARACTER_WIDTH
    return f"{width} x {height} characters"


def _pixels(record: SauceRecord) -> str:
    return f"{record.type_info[0]} x {record.type_info[1]} pixels"


SizeFormatter = Callable[[SauceRecord], str]

# (data_type, file_type) -> formatter; ANY_FILE_TYPE matches every file type
SIZE_FORMATTERS: Mapping[tuple[int, int | None], SizeFormatter] = MappingProxyType({
    (DataType.CHARACTER, CharacterFileType.ASCII): _characters,
    (DataType.CHARACTER, CharacterFileType.ANSI): _characters,
    (DataType.CHARACTER, CharacterFileType.ANSIMATION): _characters,
    (DataType.CHARACTER, CharacterFileType.PCBOARD): _characters,
    (DataType.CHARACTER, CharacterFileType.AVATAR): _characters,
    (DataType.CHARACTER, CharacterFileType.TUNDRA): _characters,
    # RIP script is pixel addressed
    (DataType.CHARACTER, CharacterFileType.RIP): _pixels,
    (DataType.BITMAP, ANY_FILE_TYPE): _pixels,
})


def size_description(record: SauceRecord) -> str | None:
    """
    Describe the dimensions held in type_info, if the type defines them.

    Character files report characters (a zero width means 80), RIP
    scripts and bitmaps report pixels. Other types return None.
    """
    formatter = SIZE_FORMATTERS.get((record.data_type, record.file_type))
    if formatter is None:
        formatter = SIZE_FORMATTERS.get((record.data_type, ANY_FILE_TYPE))
    if formatter is None:
        return None
    return formatter(record)


def render(record: SauceRecord) -> list[ReportLine]:
    """Build the ordered report lines for a record."""
    lines = [
        ReportLine("id", record.id.decode("latin-1")),
        ReportLine("version", record.version_text),
        ReportLine("title", record.title),
        ReportLine("author", record.author),
        ReportLine("group", record.group),
        ReportLine("date", record.date.isoformat()),
        ReportLine("filesize", str(record.file_size)),
        ReportLine(
            "datatype",
            f"{record.data_type} ({data_type_name(record.data_type) or ''})",
        ),
    ]

    if has_file_type_table(record.data_type):
        name = file_type_name(record.data_type, record.file_type) or ""
        lines.append(ReportLine("filetype", f"{record.file_type} ({name})"))
    else:
        lines.append(ReportLine("filetype", str(record.file_type)))

    lines.append(ReportLine("tinfo", ", ".join(str(v) for v in record.type_info)))

    size = size_description(record)
    if size is not None:
        lines.append(ReportLine("size", size))
    return lines


def format_report(lines: list[ReportLine]) -> str:
    """Lay out report lines as ``label....: value``."""
    return "\n".join(
        f"{line.label.ljust(LABEL_WIDTH, '.')}: {line.value}" for line in lines
    )
