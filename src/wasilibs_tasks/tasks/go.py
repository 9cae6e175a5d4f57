import logging
import os

from ..config.identity import LibraryIdentity
from ..config.settings import (
    GOFUMPT_VERSION,
    GOLANGCI_LINT_VERSION,
    GOSIMPORTS_LOCAL,
    GOSIMPORTS_VERSION,
    LINT_TIMEOUT,
    TEST_TIMEOUT,
)
from ..errors import CommandError
from ..shell import CommandRunner

logger = logging.getLogger(__name__)


def wasi_test_mode() -> str:
    """Return the lower-cased WASI_TEST_MODE (`cgo`, `tinygo`, or anything else)."""
    return os.getenv("WASI_TEST_MODE", "").strip().lower()


def build_tags(identity: LibraryIdentity, mode: str | None = None) -> str:
    """Comma-separated build tags for the selected test mode."""
    if mode is None:
        mode = wasi_test_mode()

    tags: list[str] = []
    if mode == "cgo":
        tags.append(identity.cgo_tag)
    return ",".join(tags)


def test(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Run unit tests with wazero, or natively / under TinyGo per WASI_TEST_MODE."""
    runner = runner or CommandRunner()
    mode = wasi_test_mode()
    tags = build_tags(identity, mode)

    if mode != "tinygo":
        runner.run_v("go", "test", "-v", f"-timeout={TEST_TIMEOUT}", "-tags", tags, "./...")
        return

    runner.run_v("tinygo", "test", "-target=wasi", "-v", "-tags", tags, "./...")


def format_code(runner: CommandRunner | None = None) -> None:
    """Autoformat with gofumpt, then regroup imports with gosimports.

    A gosimports failure is logged and otherwise ignored.
    """
    runner = runner or CommandRunner()
    runner.run_v("go", "run", f"mvdan.cc/gofumpt@{GOFUMPT_VERSION}", "-l", "-w", ".")
    try:
        runner.run_v(
            "go",
            "run",
            f"github.com/rinchsan/gosimports/cmd/gosimports@{GOSIMPORTS_VERSION}",
            "-w",
            "-local",
            GOSIMPORTS_LOCAL,
            ".",
        )
    except CommandError as exc:
        logger.warning("gosimports failed, ignoring: %s", exc)


def lint(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    runner = runner or CommandRunner()
    runner.run_v(
        "go",
        "run",
        f"github.com/golangci/golangci-lint/cmd/golangci-lint@{GOLANGCI_LINT_VERSION}",
        "run",
        "--build-tags",
        build_tags(identity),
        "--timeout",
        LINT_TIMEOUT,
    )


def check(identity: LibraryIdentity, runner: CommandRunner | None = None) -> None:
    """Lint, then test. Stops at the first failure."""
    runner = runner or CommandRunner()
    lint(identity, runner)
    test(identity, runner)
