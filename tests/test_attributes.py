"""Tests for sysfs attribute readers."""

import logging

from dpumon.hardware.attributes import (
    attribute_readable,
    first_token,
    read_int,
    read_mem_total,
    read_part_number,
    read_text,
    read_token,
)
from dpumon.schema import UNKNOWN_VALUE


def test_read_token_first_token(tmp_path) -> None:
    path = tmp_path / "attr"
    path.write_text("\n  abc def\n", encoding="utf-8")
    assert read_token(path) == "abc"


def test_read_token_missing_or_empty(tmp_path) -> None:
    assert read_token(tmp_path / "missing") is None
    empty = tmp_path / "empty"
    empty.write_text("   \n", encoding="utf-8")
    assert read_token(empty) is None


def test_read_token_on_directory(tmp_path) -> None:
    assert read_token(tmp_path) is None


def test_read_int(tmp_path) -> None:
    path = tmp_path / "attr"
    path.write_text("67108864\n", encoding="utf-8")
    assert read_int(path) == 67108864
    path.write_text("0x40\n", encoding="utf-8")
    assert read_int(path) is None
    assert read_int(tmp_path / "missing") is None


def test_attribute_readable(tmp_path) -> None:
    path = tmp_path / "nr_dpus"
    path.write_text("64\n", encoding="utf-8")
    assert attribute_readable(path)
    path.write_text("n/a\n", encoding="utf-8")
    assert not attribute_readable(path)
    assert not attribute_readable(tmp_path / "missing")


def test_read_part_number(tmp_path, caplog) -> None:
    (tmp_path / "part_number").write_text("DPU-123\n", encoding="utf-8")
    assert read_part_number(tmp_path) == "DPU-123"
    (tmp_path / "part_number").unlink()
    with caplog.at_level(logging.WARNING, logger="dpumon.hardware.attributes"):
        assert read_part_number(tmp_path) == UNKNOWN_VALUE
    assert f"Failed to open {tmp_path / 'part_number'}" in caplog.text


def test_read_part_number_empty_file(tmp_path, caplog) -> None:
    (tmp_path / "part_number").write_text("\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="dpumon.hardware.attributes"):
        assert read_part_number(tmp_path) == UNKNOWN_VALUE
    assert f"Empty part number in {tmp_path / 'part_number'}" in caplog.text
    assert "Failed to open" not in caplog.text


def test_read_mem_total_empty_file(tmp_path, caplog) -> None:
    (tmp_path / "mram_size").write_text("", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="dpumon.hardware.attributes"):
        assert read_mem_total(tmp_path) == UNKNOWN_VALUE
    assert "Empty MRAM size" in caplog.text
    assert "Failed to open" not in caplog.text


def test_read_text_and_first_token(tmp_path) -> None:
    path = tmp_path / "attr"
    path.write_text(" a b\n", encoding="utf-8")
    assert read_text(path) == " a b\n"
    assert read_text(tmp_path / "missing") is None
    assert first_token(" a b\n") == "a"
    assert first_token(" \n") is None


def test_read_mem_total(tmp_path, caplog) -> None:
    (tmp_path / "mram_size").write_text("67108864\n", encoding="utf-8")
    assert read_mem_total(tmp_path) == "67108864"
    (tmp_path / "mram_size").write_text("-\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="dpumon.hardware.attributes"):
        assert read_mem_total(tmp_path) == UNKNOWN_VALUE
    assert "Invalid MRAM size" in caplog.text
    (tmp_path / "mram_size").unlink()
    assert read_mem_total(tmp_path) == UNKNOWN_VALUE
