import logging
from dataclasses import dataclass
from pathlib import Path

from ..config.identity import LibraryIdentity
from ..config.settings import GOLANG_PERF_VERSION
from ..errors import BenchmarkError, CommandError
from ..shell import CommandRunner
from .args import BenchMode, bench_args

logger = logging.getLogger(__name__)

# Run order. Modes must never overlap: concurrent runs skew timings.
RUN_ORDER = (BenchMode.WAZERO, BenchMode.CGO, BenchMode.DEFAULT)

# benchstat treats the first file as the baseline.
COMPARE_ORDER = (BenchMode.DEFAULT, BenchMode.WAZERO, BenchMode.CGO)


@dataclass(frozen=True)
class BenchmarkRun:
    mode: BenchMode
    output: str
    destination: Path


class BenchmarkOrchestrator:
    """Runs every benchmark mode in turn and compares them with benchstat.

    Fail-fast: the first failing mode raises `BenchmarkError` and nothing
    after it runs. Result files written by earlier modes are left in place.
    """

    def __init__(self, identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
        self._identity = identity
        self._runner = runner or CommandRunner()

    def run_mode(
        self,
        package: str,
        count: int,
        mode: BenchMode,
        output_dir: Path,
        prefix: str,
    ) -> BenchmarkRun:
        logger.info("Executing %s benchmarks", mode.label)
        try:
            output = self._runner.output("go", *bench_args(package, count, mode, self._identity))
        except CommandError as exc:
            logger.error("Error running %s benchmarks: %s", mode.label, exc)
            raise BenchmarkError(mode, exc) from exc

        destination = output_dir / mode.file_name(prefix)
        destination.write_text(output, encoding="utf-8", newline="")
        logger.debug("Wrote %d bytes to %s", len(output), destination)
        return BenchmarkRun(mode=mode, output=output, destination=destination)

    def compare(self, runs: dict[BenchMode, BenchmarkRun]) -> None:
        files = [str(runs[mode].destination) for mode in COMPARE_ORDER]
        self._runner.run_v(
            "go", "run", f"golang.org/x/perf/cmd/benchstat@{GOLANG_PERF_VERSION}", *files
        )

    def run_all(
        self,
        package: str,
        reps: int,
        output_dir: Path,
        prefix: str = "bench",
    ) -> list[BenchmarkRun]:
        output_dir.mkdir(parents=True, exist_ok=True)

        runs: dict[BenchMode, BenchmarkRun] = {}
        for mode in RUN_ORDER:
            runs[mode] = self.run_mode(package, reps, mode, output_dir, prefix)

        self.compare(runs)
        return [runs[mode] for mode in RUN_ORDER]
