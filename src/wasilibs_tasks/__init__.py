__version__ = "0.1.0.dev0"

from .bench import BenchmarkOrchestrator, BenchMode, bench_args
from .cli import build_cli, main
from .config import LibraryIdentity, NameRegistry, set_library_name, set_library_repo
from .errors import BenchmarkError, CommandError, NoReleasesError, ReleaseLookupError, TaskError
from .shell import CommandRunner

__all__ = [
    "__version__",
    "BenchMode",
    "BenchmarkError",
    "BenchmarkOrchestrator",
    "CommandError",
    "CommandRunner",
    "LibraryIdentity",
    "NameRegistry",
    "NoReleasesError",
    "ReleaseLookupError",
    "TaskError",
    "bench_args",
    "build_cli",
    "main",
    "set_library_name",
    "set_library_repo",
]
