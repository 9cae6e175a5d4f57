from pathlib import Path

from ..bench import BenchmarkRun, BenchMode
from ..config.identity import LibraryIdentity
from ..shell import CommandRunner
from .benchmarks import run_all, run_single

PACKAGE = "./wafbench"
FILE_PREFIX = "wafbench"


def waf_bench(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Run WAF benchmarks in the default configuration, using wazero."""
    run_single(PACKAGE, BenchMode.WAZERO, identity, runner)


def waf_bench_cgo(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    run_single(PACKAGE, BenchMode.CGO, identity, runner)


def waf_bench_default(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    run_single(PACKAGE, BenchMode.DEFAULT, identity, runner)


def waf_bench_all(
    identity: LibraryIdentity,
    runner: CommandRunner | None = None,
    project_dir: Path | None = None,
) -> list[BenchmarkRun]:
    return run_all(PACKAGE, FILE_PREFIX, identity, runner, project_dir)
