"""Tests for the dpumon command-line interface."""

import json

import pytest

from dpumon.cli import build_parser, main

from fake_sysfs import make_rank


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 0
    assert "usage: dpumon" in capsys.readouterr().out


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert "dpumon" in capsys.readouterr().out


def test_devices_table(two_rank_root, capsys) -> None:
    assert main(["--root", str(two_rank_root), "devices"]) == 0
    out = capsys.readouterr().out
    assert "Detected DPU ranks (dimm)" in out
    assert "dpu_rank0  part=DPU-123  mram=67108864" in out
    assert "Total: 2 rank(s)" in out


def test_devices_json(two_rank_root, capsys) -> None:
    assert main(["--root", str(two_rank_root), "devices", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["device_count"] == 2
    assert payload["hardware_kind"] == "dimm"
    assert payload["ranks"][1]["mem_total"] == "33554432"


def test_devices_missing_root(tmp_path, capsys) -> None:
    assert main(["--root", str(tmp_path / "missing"), "devices"]) == 1
    assert "No DPU ranks found" in capsys.readouterr().err


def test_devices_simulation(two_rank_root, capsys) -> None:
    assert main(["--root", str(two_rank_root), "--simulation", "devices"]) == 1
    assert "No DPU ranks found" in capsys.readouterr().err


def test_watch_count(two_rank_root, capsys) -> None:
    assert main(["--root", str(two_rank_root), "watch", "--count", "2", "--interval", "0.01"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("[0] dpu_rank0")
    assert "nr_dpus=64" in lines[0]
    assert lines[3].startswith("[1] dpu_rank1")


def test_watch_missing_metric_shown_as_dash(rank_root, capsys) -> None:
    make_rank(rank_root, "dpu_rank0", runtime={"nr_dpus": "64"})
    assert main(["--root", str(rank_root), "watch", "--count", "1"]) == 0
    out = capsys.readouterr().out
    assert "is_owned=-" in out
    assert "nr_dpus=64" in out


def test_export_csv(two_rank_root, tmp_path, capsys) -> None:
    output = tmp_path / "ranks.csv"
    assert main(["--root", str(two_rank_root), "export", "--output", str(output)]) == 0
    assert output.exists()
    assert output.read_text(encoding="utf-8").splitlines()[0].startswith("rank,hardware_kind,part_number")
    assert "Wrote 2 rank(s)" in capsys.readouterr().out


def test_export_json_by_extension(two_rank_root, tmp_path) -> None:
    output = tmp_path / "ranks.json"
    assert main(["--root", str(two_rank_root), "export", "-o", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8"))["ranks"][0]["name"] == "dpu_rank0"


def test_config_file(two_rank_root, tmp_path, capsys) -> None:
    config = tmp_path / "dpumon.json"
    config.write_text(json.dumps({"dpu": {"root": str(two_rank_root)}}), encoding="utf-8")
    assert main(["--config", str(config), "devices", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["device_count"] == 2


def test_bad_config_file(tmp_path, capsys) -> None:
    config = tmp_path / "dpumon.json"
    config.write_text(json.dumps({"collection": {"interval_seconds": -1}}), encoding="utf-8")
    assert main(["--config", str(config), "devices"]) == 2
    assert "Configuration error" in capsys.readouterr().err
