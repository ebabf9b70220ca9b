"""
Threshold sweep: times every configured operation over a range of sizes on
both random-access and sequential sequences, from a YAML config.

    from seqalgo.bench import run_sweep
    run_dir = run_sweep("experiments/thresholds.yaml")

Config keys (all required unless noted):
    experiment_name: str
    output_dir: str
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: {dist: ..., params: {...}}       # see seqalgo.datasets
    sizes: [int, ...]
    operations: [name, ...]                   # keys of seqalgo.bench.OPERATIONS
    access_modes: [random, sequential]        # optional, default both
    thresholds: {reverse: 5, ...}             # optional, see seqalgo.config

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample / failure
    - summary.csv             # median + IQR per (operation, access, n)

Design notes:
- For each size n, ONE dataset is generated and every operation/access mode
  gets a fresh sequence built from it.
- On timeout/error for an (operation, access) pair, larger sizes are skipped
  for that pair.
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.table import Table
from tqdm import tqdm

from seqalgo.bench.measure import time_operation_call
from seqalgo.bench.operations import ACCESS_MODES, OPERATIONS, OperationSpec, build_sequence
from seqalgo.config import Thresholds, thresholds_from_mapping
from seqalgo.console import console
from seqalgo.datasets import make_dataset
from seqalgo.errors import ConfigError

__all__ = ["run_sweep", "aggregate_summary"]

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "operations",
]

_SUMMARY_COLUMNS = ["operation", "access", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"Sweep config must be a YAML mapping: {path}")
    return data


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_operations(names: List[Any]) -> List[OperationSpec]:
    specs: List[OperationSpec] = []
    seen = set()
    for name in names:
        if not isinstance(name, str) or not name:
            raise ConfigError("Each operation must be a non-empty string")
        if name in seen:
            raise ConfigError(f"Duplicate operation in config: {name}")
        if name not in OPERATIONS:
            raise ConfigError(f"Unknown operation {name!r}. Known: {sorted(OPERATIONS)}")
        seen.add(name)
        specs.append(OPERATIONS[name])
    return specs


def _resolve_access_modes(raw: Any) -> List[str]:
    if raw is None:
        return list(ACCESS_MODES)
    modes = list(raw)
    bad = [m for m in modes if m not in ACCESS_MODES]
    if bad or not modes:
        raise ConfigError(f"access_modes must be a non-empty subset of {list(ACCESS_MODES)}; got {modes}")
    return modes


# ------------------------- aggregation & display ------------------------- #

def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Median / IQR / min / max of successful samples per (operation, access, n)."""
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    out = (
        df.groupby(["operation", "access", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            q1_ns=("time_ns", lambda s: s.quantile(0.25)),
            q3_ns=("time_ns", lambda s: s.quantile(0.75)),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    out = out.drop(columns=["q1_ns", "q3_ns"])
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(["operation", "access", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    median_us = median_ns / 1e3
    if iqr_ns is None:
        return f"{median_us:.1f}"
    return f"{median_us:.1f} ± {iqr_ns / 1e3:.1f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Sweep Summary (median ± IQR in µs)")
    table.add_column("Operation", style="bold")
    table.add_column("Access")
    picks: List[Tuple[str, int]] = []
    for n in (sizes[0], sizes[len(sizes) // 2], sizes[-1]):
        if n not in (p[1] for p in picks):
            picks.append((f"n={n}", n))
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")

    for (op, access), group in summary.groupby(["operation", "access"], sort=True):
        row = [str(op), str(access)]
        for _, npick in picks:
            s = group[group["n"] == npick]
            if s.empty:
                row.append(_format_cell(None, None))
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)
    console.print()
    console.print(table)
    console.print()


# ------------------------- core sweep ------------------------- #

def run_sweep(config_path: Union[str, Path], *, show_progress: bool = True) -> Path:
    """
    Run the sweep described by the YAML file at `config_path`.

    Returns the run directory. Raises ConfigError for an invalid config.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    cfg = _load_yaml(config_path)

    missing = [k for k in _REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ConfigError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    operations = _resolve_operations(list(cfg["operations"]))
    access_modes = _resolve_access_modes(cfg.get("access_modes"))
    thresholds: Thresholds = thresholds_from_mapping(cfg.get("thresholds"))

    if not sizes or any(n <= 0 for n in sizes):
        raise ConfigError("Config 'sizes' must be a non-empty list of positive integers")

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    resolved = dict(cfg)
    resolved["access_modes"] = access_modes
    resolved["thresholds"] = thresholds.as_dict()
    _write_yaml(resolved, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skip = {(op.name, access): False for op in operations for access in access_modes}

    console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    console.print(f"[bold]Operations:[/bold] {', '.join(op.name for op in operations)}")
    console.print(f"[bold]Access modes:[/bold] {', '.join(access_modes)}")

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        base = make_dataset(n, dataset_spec, rng)
        sorted_base = sorted(base)

        for op in operations:
            values = sorted_base if op.needs_sorted else base
            for access in access_modes:
                if skip[(op.name, access)]:
                    continue

                res = time_operation_call(
                    op_name=op.name,
                    op_fn=lambda seq, op=op: op.run(seq, rng, thresholds),
                    make_input=lambda values=values, access=access: build_sequence(values, access),
                    repeats=repeats,
                    warmup=warmup,
                    disable_gc=disable_gc,
                    timeout_seconds=timeout_seconds,
                )

                for trial_idx, t_ns in enumerate(res["samples_ns"]):
                    _append_jsonl(
                        {
                            "operation": op.name,
                            "access": access,
                            "n": n,
                            "dataset": dataset_spec,
                            "trial": trial_idx,
                            "time_ns": int(t_ns),
                        },
                        results_path,
                    )

                status = res["status"]
                if status != "ok":
                    skip[(op.name, access)] = True
                    logger.info("%s/%s: %s at n=%d; skipping larger sizes", op.name, access, status, n)
                    _append_jsonl(
                        {
                            "operation": op.name,
                            "access": access,
                            "n": n,
                            "status": status,
                            "error": res["error"],
                            "timed_out_on_repeat": res["timed_out_on_repeat"],
                        },
                        results_path,
                    )

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        console.print(f" - {p}")
    return run_dir
