"""
Benchmark package public API.

Re-exports:
    time_operation_call   timing harness for one operation
    OPERATIONS            registry of timeable operations
    run_sweep             YAML-driven threshold sweep
"""

from .measure import time_operation_call
from .operations import ACCESS_MODES, OPERATIONS, OperationSpec, build_sequence
from .sweep import aggregate_summary, run_sweep

__all__ = [
    "time_operation_call",
    "OPERATIONS",
    "OperationSpec",
    "ACCESS_MODES",
    "build_sequence",
    "run_sweep",
    "aggregate_summary",
]
