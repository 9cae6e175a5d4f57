from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bench.args import BenchMode


class TaskError(Exception):
    """Base class for task failures reported to the build runner."""


class CommandError(TaskError):
    """External process exited non-zero or could not be launched."""

    def __init__(self, command: Sequence[str], returncode: int | None, message: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        if not message:
            if returncode is None:
                message = f"failed to run `{' '.join(self.command)}`"
            else:
                message = f"running `{' '.join(self.command)}` failed with exit code {returncode}"
        super().__init__(message)


class BenchmarkError(CommandError):
    """A benchmark mode's run failed; later modes were not attempted."""

    def __init__(self, mode: "BenchMode", cause: CommandError) -> None:
        self.mode = mode
        super().__init__(
            cause.command,
            cause.returncode,
            f"error running {mode.label} benchmarks: {cause}",
        )


class ReleaseLookupError(TaskError):
    """Release API request failed at the network or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NoReleasesError(ReleaseLookupError):
    """Release API answered but returned no release."""
