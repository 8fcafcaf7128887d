"""Names for SAUCE data type and file type codes."""

from types import MappingProxyType
from typing import Mapping

from sauce_dump.sauce.record import DataType


DATA_TYPE_NAMES: Mapping[int, str] = MappingProxyType({
    DataType.NONE: "None",
    DataType.CHARACTER: "Character",
    DataType.BITMAP: "Bitmap",
    DataType.VECTOR: "Vector",
    DataType.AUDIO: "Audio",
    DataType.BINARYTEXT: "BinaryText",
    DataType.XBIN: "XBin",
    DataType.ARCHIVE: "Archive",
    DataType.EXECUTABLE: "Executable",
})


def _table(*names: str) -> Mapping[int, str]:
    return MappingProxyType(dict(enumerate(names)))


# BinaryText, XBin, Executable and None have no file type table
FILE_TYPE_NAMES: Mapping[int, Mapping[int, str]] = MappingProxyType({
    DataType.CHARACTER: _table(
        "ASCII", "ANSi", "ANSiMation", "RIP script", "PCBoard",
        "Avatar", "HTML", "Source", "Tundradraw",
    ),
    DataType.BITMAP: _table(
        "GIF", "PCX", "LBM/FF", "TGA", "FLI", "FLC", "BMP",
        "GL", "DL", "WPG", "PNG", "JPG", "MPG", "AVI",
    ),
    DataType.VECTOR: _table("DXF", "DWG", "WPG", "3DS"),
    DataType.AUDIO: _table(
        "MOD", "669", "STM", "S3M", "MTM", "FAR", "ULT", "AMF", "DMF",
        "OKT", "ROL", "CMF", "MID", "SADT", "VOC", "WAV", "SMP8",
        "SMP8S", "SMP16", "SMP16S", "PATCH8", "PATCH16", "XM", "HSC", "IT",
    ),
    DataType.ARCHIVE: _table(
        "ZIP", "ARJ", "LZH", "ARC", "TAR", "ZOO", "RAR", "UC2", "PAK", "SQZ",
    ),
})


def data_type_name(code: int) -> str | None:
    """Name of a data type code, or None if unrecognized."""
    return DATA_TYPE_NAMES.get(code)


def has_file_type_table(data_type: int) -> bool:
    """True if file type codes under this data type have names."""
    return data_type in FILE_TYPE_NAMES


def file_type_name(data_type: int, file_type: int) -> str | None:
    """
    Name of a file type code within its data type.

    Returns None when the data type has no table or the code is not
    in it.
    """
    table = FILE_TYPE_NAMES.get(data_type)
    if table is None:
        return None
    return table.get(file_type)
