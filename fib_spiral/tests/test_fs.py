"""Tests for atomic export writes and YAML helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from fib_spiral.utils import fs


def test_atomic_write_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "spiral.gcode"
    assert fs.atomic_write(target, "G21\n") == target
    assert target.read_text(encoding="utf-8") == "G21\n"
    assert [p.name for p in target.parent.iterdir()] == ["spiral.gcode"]


def test_atomic_write_bytes_and_replace(tmp_path: Path) -> None:
    target = tmp_path / "out.bin"
    fs.atomic_write(target, "old")
    fs.atomic_write(target, b"\x00new")
    assert target.read_bytes() == b"\x00new"


def test_atomic_write_failure_is_runtime_error(tmp_path: Path) -> None:
    target = tmp_path / "dir_not_file"
    target.mkdir()
    with pytest.raises(RuntimeError, match="Could not write"):
        fs.atomic_write(target, b"x")
    assert not list(tmp_path.glob("*.part"))


def test_yaml_roundtrip_keeps_order(tmp_path: Path) -> None:
    data = {"steps": 3, "arcs": [{"radius": 1.0}], "fibonacci": [1, 1, 2]}
    path = fs.dump_yaml(data, tmp_path / "doc.yaml")
    assert fs.read_yaml(path) == data
    assert list(fs.read_yaml(path)) == ["steps", "arcs", "fibonacci"]


def test_yaml_floats_exact(tmp_path: Path) -> None:
    values = [12586269025.0, -4807526976.0, 0.1 + 0.2]
    path = fs.dump_yaml({"v": values}, tmp_path / "floats.yaml")
    assert fs.read_yaml(path)["v"] == values


def test_read_empty_is_none(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert fs.read_yaml(path) is None


def test_read_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="YAML file not found"):
        fs.read_yaml(tmp_path / "none.yaml")


def test_read_malformed_names_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("steps: [1, 2\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError, match="bad.yaml"):
        fs.read_yaml(path)
