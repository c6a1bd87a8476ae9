"""
Tests for the input loaders and persistent settings.

Usage:
    pytest tests/test_inputs.py
"""

import json
import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aoc.inputs import FileInputLoader, MemoryInputLoader
from aoc.settings import DEFAULT_SETTINGS, load_settings
from aoc.solver import LoadError, Part


def test_file_loader_reads_day_file_for_both_parts(tmp_path):
    (tmp_path / "3.txt").write_text("abc\r\ndef\n", encoding="utf-8")
    loader = FileInputLoader(tmp_path)

    assert loader.path_for(3) == tmp_path / "3.txt"
    assert loader.load(3, Part.A) == "abc\r\ndef\n"
    assert loader.load(3, Part.B) == loader.load(3, Part.A)


def test_file_loader_keeps_crlf_line_endings(tmp_path):
    (tmp_path / "9.txt").write_bytes(b"R 4\r\nU 4\r\n")
    assert FileInputLoader(tmp_path).load(9, Part.A) == "R 4\r\nU 4\r\n"


def test_file_loader_logs_its_name(tmp_path, caplog):
    (tmp_path / "2.txt").write_text("A Y", encoding="utf-8")
    caplog.set_level(logging.DEBUG, logger="aoc.inputs.file_loader")

    FileInputLoader(tmp_path).load(2, Part.B)

    assert "[file] Loading input for day 2 part B" in caplog.text


def test_file_loader_missing_file(tmp_path):
    """Test that a missing file becomes a LoadError naming the path."""
    loader = FileInputLoader(tmp_path)
    with pytest.raises(LoadError) as info:
        loader.load(12, Part.B)
    assert info.value.day == 12
    assert info.value.part is Part.B
    assert "12.txt" in info.value.reason


def test_file_loader_rejects_invalid_utf8(tmp_path):
    (tmp_path / "1.txt").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(LoadError, match="not valid UTF-8"):
        FileInputLoader(tmp_path).load(1, Part.A)


def test_file_loader_override(tmp_path):
    sample = tmp_path / "sample.txt"
    sample.write_text("sample", encoding="utf-8")
    loader = FileInputLoader(tmp_path / "missing", override=sample)

    assert loader.path_for(20) == sample
    assert loader.load(20, Part.A) == "sample"


def test_memory_loader_prefers_part_specific_input():
    loader = MemoryInputLoader({5: "shared", (5, Part.B): "only b"})

    assert loader.load(5, Part.A) == "shared"
    assert loader.load(5, Part.B) == "only b"
    with pytest.raises(LoadError, match="no embedded input"):
        loader.load(6, Part.A)


def test_settings_default_when_missing(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_settings_merge_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"input_dir": "puzzles"}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["input_dir"] == "puzzles"
    assert settings["debug_enabled"] is False
    assert settings["log_file"] is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_invalid_settings_fall_back_to_defaults(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS
