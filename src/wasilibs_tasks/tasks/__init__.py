from .benchmarks import bench, bench_all, bench_cgo, bench_default
from .go import build_tags, check, format_code, lint, test
from .upstream import update_libs, update_upstream
from .waf import waf_bench, waf_bench_all, waf_bench_cgo, waf_bench_default

__all__ = [
    "bench",
    "bench_all",
    "bench_cgo",
    "bench_default",
    "build_tags",
    "check",
    "format_code",
    "lint",
    "test",
    "update_libs",
    "update_upstream",
    "waf_bench",
    "waf_bench_all",
    "waf_bench_cgo",
    "waf_bench_default",
]
