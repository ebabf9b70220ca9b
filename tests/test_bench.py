"""
Tests for the timing harness and the threshold sweep.
"""

from __future__ import annotations

import json

import pandas as pd
import pytest
import yaml

from seqalgo import ConfigError
from seqalgo.bench import OPERATIONS, build_sequence, run_sweep, time_operation_call


def test_time_operation_call_collects_samples() -> None:
    calls = []
    res = time_operation_call(
        op_name="noop",
        op_fn=calls.append,
        make_input=lambda: [1, 2, 3],
        repeats=4,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
    )
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 4
    assert len(calls) == 5  # warmup + repeats


def test_time_operation_call_records_errors() -> None:
    def boom(_seq) -> None:
        raise RuntimeError("nope")

    res = time_operation_call(
        op_name="boom",
        op_fn=boom,
        make_input=list,
        repeats=3,
        warmup=False,
        disable_gc=False,
        timeout_seconds=1.0,
    )
    assert res["status"] == "error"
    assert "nope" in res["error"]
    assert res["samples_ns"] == []


def test_time_operation_call_validates_arguments() -> None:
    with pytest.raises(ValueError):
        time_operation_call(
            op_name="x", op_fn=print, make_input=list, repeats=-1,
            warmup=False, disable_gc=False, timeout_seconds=1.0,
        )


def test_build_sequence_modes() -> None:
    assert build_sequence([1, 2], "random").supports_random_access
    assert not build_sequence([1, 2], "sequential").supports_random_access
    with pytest.raises(ValueError):
        build_sequence([1], "bogus")


def _write_config(tmp_path, **overrides) -> str:
    cfg = {
        "experiment_name": "tiny",
        "output_dir": str(tmp_path / "runs"),
        "seed": 1,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30,
        "dataset": {"dist": "random", "params": {"range": [0, 50]}},
        "sizes": [4, 16],
        "operations": ["sort", "binary_search", "reverse", "shuffle"],
        "thresholds": {"reverse": 8},
    }
    cfg.update(overrides)
    path = tmp_path / "sweep.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return str(path)


def test_run_sweep_writes_run_directory(tmp_path) -> None:
    run_dir = run_sweep(_write_config(tmp_path), show_progress=False)

    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists()

    resolved = yaml.safe_load((run_dir / "config_resolved.yaml").read_text(encoding="utf-8"))
    assert resolved["access_modes"] == ["random", "sequential"]
    assert resolved["thresholds"]["reverse"] == 8

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta and "machine" in meta

    summary = pd.read_csv(run_dir / "summary.csv")
    assert len(summary) == 4 * 2 * 2  # operations x access modes x sizes
    assert (summary["samples_ok"] == 2).all()


@pytest.mark.parametrize(
    "overrides",
    [
        {"operations": ["nope"]},
        {"operations": ["sort", "sort"]},
        {"sizes": []},
        {"access_modes": ["diagonal"]},
        {"thresholds": {"reverse": -1}},
    ],
)
def test_run_sweep_rejects_bad_config(tmp_path, overrides) -> None:
    with pytest.raises(ConfigError):
        run_sweep(_write_config(tmp_path, **overrides), show_progress=False)


def test_run_sweep_missing_keys(tmp_path) -> None:
    path = tmp_path / "partial.yaml"
    path.write_text("experiment_name: x\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        run_sweep(path)


def test_registry_covers_core_operations() -> None:
    assert {"sort", "binary_search", "reverse", "shuffle", "fill", "minimum", "maximum"} <= set(OPERATIONS)
