"""Pytest configuration: synthetic SAUCE trailers and external files."""

import os
from pathlib import Path
from typing import Callable, Optional

import pytest


SauceBuilder = Callable[..., bytes]


def build_trailer(
    *,
    signature: bytes = b"SAUCE",
    version: bytes = b"00",
    title: bytes = b"",
    author: bytes = b"",
    group: bytes = b"",
    date: bytes = b"19960401",
    file_size: int = 0,
    data_type: int = 1,
    file_type: int = 1,
    type_info: tuple[int, int, int, int] = (80, 25, 0, 0),
    comments: int = 0,
    flags: int = 0,
    reserved: bytes = b"",
) -> bytes:
    """Assemble a 128-byte trailer with the canonical SAUCE 00 layout."""
    data = bytearray(signature + version)
    data += title.ljust(35, b" ")
    data += author.ljust(20, b" ")
    data += group.ljust(20, b" ")
    data += date
    data += file_size.to_bytes(4, "little")
    data.append(data_type)
    data.append(file_type)
    for value in type_info:
        data += value.to_bytes(2, "little")
    data.append(comments)
    data.append(flags)
    data += reserved.ljust(22, b"\x00")
    assert len(data) == 128
    return bytes(data)


@pytest.fixture
def make_trailer() -> SauceBuilder:
    """Fixture returning the trailer builder."""
    return build_trailer


@pytest.fixture
def make_file(make_trailer: SauceBuilder) -> SauceBuilder:
    """Fixture building a whole file: body, EOF marker, then trailer."""
    def _make(body: bytes = b"\x1b[0mhello", **fields) -> bytes:
        return body + b"\x1a" + make_trailer(**fields)
    return _make


@pytest.fixture
def sauce_path(tmp_path: Path, make_file: SauceBuilder) -> Path:
    """A file on disk carrying a typical ANSi SAUCE record."""
    path = tmp_path / "artwork.ans"
    path.write_bytes(make_file(
        title=b"Dark Tower",
        author=b"Painter",
        group=b"ACiD",
        file_size=10,
    ))
    return path


def get_test_art_dir() -> Optional[Path]:
    """
    Get a directory of real SAUCE-tagged files from the environment.

    Set SAUCE_DUMP_TEST_DIR to point at a collection of art packs.
    """
    if env_path := os.environ.get("SAUCE_DUMP_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def sample_files() -> list[Path]:
    """Real files for testing, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set SAUCE_DUMP_TEST_DIR")
    files = sorted(p for p in art_dir.iterdir() if p.is_file())
    if not files:
        pytest.skip(f"No files found in {art_dir}")
    # Limit to avoid very slow tests
    return files[:50]
