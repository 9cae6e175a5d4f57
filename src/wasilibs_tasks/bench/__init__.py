from .args import BenchMode, bench_args
from .orchestrator import COMPARE_ORDER, RUN_ORDER, BenchmarkOrchestrator, BenchmarkRun

__all__ = [
    "COMPARE_ORDER",
    "RUN_ORDER",
    "BenchMode",
    "BenchmarkOrchestrator",
    "BenchmarkRun",
    "bench_args",
]
