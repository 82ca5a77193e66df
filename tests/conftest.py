"""Pytest configuration and fixtures."""

import pytest

from fake_sysfs import FULL_RUNTIME, make_rank


@pytest.fixture(autouse=True)
def _no_simulation_env(monkeypatch):
    """Keep DPUMON_SIMULATION from the host out of the tests."""
    monkeypatch.delenv("DPUMON_SIMULATION", raising=False)


@pytest.fixture
def rank_root(tmp_path):
    """Empty rank class directory."""
    root = tmp_path / "class" / "dpu_rank"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def two_rank_root(rank_root):
    """Rank class directory with dpu_rank0, dpu_rank1 and an unrelated entry."""
    make_rank(rank_root, "dpu_rank0", runtime=FULL_RUNTIME)
    make_rank(
        rank_root,
        "dpu_rank1",
        part_number="DPU-456",
        mram_size="33554432",
        runtime={**FULL_RUNTIME, "is_owned": "0", "usage_count": "0", "nr_dpus": "60"},
    )
    (rank_root / "foo").mkdir()
    return rank_root
