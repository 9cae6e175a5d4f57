from enum import Enum

from ..config.identity import LibraryIdentity
from ..config.settings import BENCH_TIMEOUT

# Skip unit tests, run every benchmark.
_BENCH_PREFIX = ("test", "-bench=.", "-run=^$", "-v", f"-timeout={BENCH_TIMEOUT}")


class BenchMode(Enum):
    """Benchmark execution strategy; exactly one per run.

    Each value is `(label, tag_suffix, file_suffix)`.
    """

    WAZERO = ("wazero", None, "")
    CGO = ("cgo", "_cgo", "_cgo")
    DEFAULT = ("default", "_bench_default", "_default")

    def __init__(self, label: str, tag_suffix: str | None, file_suffix: str) -> None:
        self.label = label
        self.tag_suffix = tag_suffix
        self.file_suffix = file_suffix

    def build_tag(self, identity: LibraryIdentity) -> str | None:
        if self.tag_suffix is None:
            return None
        return f"{identity.library_name}{self.tag_suffix}"

    def file_name(self, prefix: str) -> str:
        return f"{prefix}{self.file_suffix}.txt"


def bench_args(package: str, count: int, mode: BenchMode, identity: LibraryIdentity) -> list[str]:
    """Build the `go` arguments for a benchmark-only run of `package`.

    A `count` of zero or less keeps the runner's default repetition count.
    """
    args = list(_BENCH_PREFIX)
    if count > 0:
        args.append(f"-count={count}")
    tag = mode.build_tag(identity)
    if tag is not None:
        args.append(f"-tags={tag}")
    args.append(package)
    return args
