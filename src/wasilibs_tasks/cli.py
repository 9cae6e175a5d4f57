import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import click
from dotenv import load_dotenv

from . import tasks
from .config.identity import LibraryIdentity, default_registry, load_identity
from .errors import TaskError
from .shell import CommandRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class TaskContext:
    identity: LibraryIdentity
    runner: CommandRunner
    project_dir: Path | None


def _invoke(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    try:
        return fn(*args, **kwargs)
    except (TaskError, OSError) as exc:
        logger.debug("Task %s failed", getattr(fn, "__name__", fn), exc_info=True)
        raise click.ClickException(str(exc)) from exc


def _setup_logging() -> None:
    log_level_str = os.getenv("WASILIBS_LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def _load_env() -> None:
    dotenv_path = os.getenv("WASILIBS_DOTENV_PATH", "").strip()
    if not dotenv_path:
        load_dotenv()
        return
    path = Path(dotenv_path).expanduser()
    if path.exists():
        load_dotenv(path)
    else:
        click.echo(f"Warning: WASILIBS_DOTENV_PATH does not exist: {dotenv_path}", err=True)
        load_dotenv()


def build_cli(identity: LibraryIdentity | None = None) -> click.Group:
    """Build the task group, optionally pre-bound to an embedding project's identity.

    Without `identity` the default registry's values are used as the base,
    overridden by wasilibs.yaml, the environment and the command-line options.
    """

    @click.group(context_settings={"help_option_names": ["-h", "--help"]})
    @click.option("--library-name", default=None, help="Library name used to derive build tags")
    @click.option("--library-repo", default=None, help="Upstream GitHub repository (owner/name)")
    @click.option(
        "--project-dir",
        default=None,
        type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
        help="Project root (default: current directory)",
    )
    @click.pass_context
    def cli(
        ctx: click.Context,
        library_name: str | None,
        library_repo: str | None,
        project_dir: Path | None,
    ) -> None:
        """Build, test and benchmark tasks for wasilibs Go wrappers."""
        base = identity if identity is not None else default_registry().identity()
        try:
            resolved = load_identity(project_dir, base=base)
        except (OSError, ValueError) as exc:
            raise click.ClickException(f"Error loading identity: {exc}") from exc

        resolved = LibraryIdentity(
            library_name=library_name if library_name is not None else resolved.library_name,
            repository=library_repo if library_repo is not None else resolved.repository,
        )
        logger.debug("Using identity %s", resolved)

        runner = CommandRunner(cwd=str(project_dir) if project_dir else None)
        ctx.obj = TaskContext(identity=resolved, runner=runner, project_dir=project_dir)

    @cli.command("test")
    @click.pass_obj
    def test_cmd(obj: TaskContext) -> None:
        """Run unit tests (WASI_TEST_MODE=cgo or tinygo to switch runtime)."""
        _invoke(tasks.test, obj.identity, obj.runner)

    @cli.command("format")
    @click.pass_obj
    def format_cmd(obj: TaskContext) -> None:
        """Autoformat the code."""
        _invoke(tasks.format_code, obj.runner)

    @cli.command("lint")
    @click.pass_obj
    def lint_cmd(obj: TaskContext) -> None:
        """Run lint checks."""
        _invoke(tasks.lint, obj.identity, obj.runner)

    @cli.command("check")
    @click.pass_obj
    def check_cmd(obj: TaskContext) -> None:
        """Run lint and tests."""
        _invoke(tasks.check, obj.identity, obj.runner)

    @cli.command("bench")
    @click.pass_obj
    def bench_cmd(obj: TaskContext) -> None:
        """Run benchmarks using wazero."""
        _invoke(tasks.bench, obj.identity, obj.runner)

    @cli.command("bench-cgo")
    @click.pass_obj
    def bench_cgo_cmd(obj: TaskContext) -> None:
        """Run benchmarks with cgo instead of wasm."""
        _invoke(tasks.bench_cgo, obj.identity, obj.runner)

    @cli.command("bench-default")
    @click.pass_obj
    def bench_default_cmd(obj: TaskContext) -> None:
        """Run benchmarks using the reference library."""
        _invoke(tasks.bench_default, obj.identity, obj.runner)

    @cli.command("bench-all")
    @click.pass_obj
    def bench_all_cmd(obj: TaskContext) -> None:
        """Run all benchmark modes and compare them with benchstat."""
        _invoke(tasks.bench_all, obj.identity, obj.runner, obj.project_dir)

    @cli.command("waf-bench")
    @click.pass_obj
    def waf_bench_cmd(obj: TaskContext) -> None:
        """Run WAF benchmarks using wazero."""
        _invoke(tasks.waf_bench, obj.identity, obj.runner)

    @cli.command("waf-bench-cgo")
    @click.pass_obj
    def waf_bench_cgo_cmd(obj: TaskContext) -> None:
        """Run WAF benchmarks with cgo instead of wasm."""
        _invoke(tasks.waf_bench_cgo, obj.identity, obj.runner)

    @cli.command("waf-bench-default")
    @click.pass_obj
    def waf_bench_default_cmd(obj: TaskContext) -> None:
        """Run WAF benchmarks using the reference library."""
        _invoke(tasks.waf_bench_default, obj.identity, obj.runner)

    @cli.command("waf-bench-all")
    @click.pass_obj
    def waf_bench_all_cmd(obj: TaskContext) -> None:
        """Run all WAF benchmark modes and compare them with benchstat."""
        _invoke(tasks.waf_bench_all, obj.identity, obj.runner, obj.project_dir)

    @cli.command("update-libs")
    @click.pass_obj
    def update_libs_cmd(obj: TaskContext) -> None:
        """Rebuild the precompiled wasm libraries."""
        _invoke(tasks.update_libs, obj.runner, obj.project_dir)

    @cli.command("update-upstream")
    @click.pass_obj
    def update_upstream_cmd(obj: TaskContext) -> None:
        """Update buildtools/wasm/version.txt to the latest upstream release."""
        changed = _invoke(
            tasks.update_upstream, obj.identity, obj.runner, project_dir=obj.project_dir
        )
        click.echo("updated" if changed else "up to date")

    return cli


def main() -> None:
    _load_env()
    _setup_logging()
    build_cli()()


if __name__ == "__main__":
    main()
