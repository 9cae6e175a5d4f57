import logging
from pathlib import Path

from ..bench import BenchmarkOrchestrator, BenchmarkRun, BenchMode, bench_args
from ..config.identity import LibraryIdentity
from ..config.settings import BENCH_ALL_COUNT, BUILD_DIR
from ..shell import CommandRunner

logger = logging.getLogger(__name__)

PACKAGE = "./..."
FILE_PREFIX = "bench"


def run_single(
    package: str,
    mode: BenchMode,
    identity: LibraryIdentity,
    runner: CommandRunner | None = None,
) -> None:
    runner = runner or CommandRunner()
    runner.run_v("go", *bench_args(package, 1, mode, identity))


def run_all(
    package: str,
    prefix: str,
    identity: LibraryIdentity,
    runner: CommandRunner | None = None,
    project_dir: Path | None = None,
) -> list[BenchmarkRun]:
    output_dir = project_dir / BUILD_DIR if project_dir else BUILD_DIR
    runner = runner or CommandRunner(cwd=str(project_dir) if project_dir else None)
    orchestrator = BenchmarkOrchestrator(identity, runner)
    runs = orchestrator.run_all(package, BENCH_ALL_COUNT, output_dir, prefix=prefix)
    logger.info("Benchmark results written to %s", output_dir)
    return runs


def bench(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Run benchmarks in the default configuration for a Go app, using wazero."""
    run_single(PACKAGE, BenchMode.WAZERO, identity, runner)


def bench_cgo(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Run benchmarks with cgo instead of wasm; needs a C++ toolchain and the library."""
    run_single(PACKAGE, BenchMode.CGO, identity, runner)


def bench_default(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Run benchmarks using the reference library for comparison."""
    run_single(PACKAGE, BenchMode.DEFAULT, identity, runner)


def bench_all(
    identity: LibraryIdentity,
    runner: CommandRunner | None = None,
    project_dir: Path | None = None,
) -> list[BenchmarkRun]:
    """Run every benchmark mode and compare the results with benchstat."""
    return run_all(PACKAGE, FILE_PREFIX, identity, runner, project_dir)
