"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


ALBUM_CUE = """\
REM GENRE Pop
REM DATE 2011
REM COMMENT "ExactAudioCopy v0.99pb5"
CATALOG 4988009045123
PERFORMER "Supercell"
TITLE "My Dearest"
FILE "Supercell - My Dearest.flac" WAVE
  TRACK 01 AUDIO
    TITLE "My Dearest"
    PERFORMER "Supercell"
    ISRC JPB601104502
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Kimi no Shiranai Monogatari"
    PERFORMER "Supercell"
    FLAGS DCP PRE
    PREGAP 00:02:00
    INDEX 00 04:52:30
    INDEX 01 04:54:30
  TRACK 03 AUDIO
    TITLE "My Dearest (Instrumental)"
    INDEX 01 10:41:12
    POSTGAP 00:01:00
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[parser]
strict = false
encoding = "latin-1"

[display]
colored_output = false
""")
    return config_path


@pytest.fixture
def album_cue(temp_dir: Path) -> Path:
    """Write a well-formed single-file album cue sheet."""
    cue_path = temp_dir / "album.cue"
    cue_path.write_text(ALBUM_CUE, encoding="utf-8")
    return cue_path
