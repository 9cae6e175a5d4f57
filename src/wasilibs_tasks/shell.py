import logging
import os
import shlex
import subprocess  # nosec B404
from collections.abc import Mapping

from .errors import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs external tools synchronously, inheriting the caller's environment.

    `run_v` streams the child's output to the terminal; `output` captures
    stdout as text and leaves stderr on the terminal. Both raise
    `CommandError` when the command cannot be started or exits non-zero.
    """

    def __init__(self, env: Mapping[str, str] | None = None, cwd: str | None = None) -> None:
        self._env = dict(env) if env else None
        self._cwd = cwd

    def _environ(self) -> dict[str, str] | None:
        if not self._env:
            return None
        merged = dict(os.environ)
        merged.update(self._env)
        return merged

    def _run(self, cmd: list[str], capture: bool) -> subprocess.CompletedProcess[str]:
        logger.info("exec: %s", shlex.join(cmd))
        try:
            completed = subprocess.run(  # nosec B603
                cmd,
                cwd=self._cwd,
                env=self._environ(),
                stdout=subprocess.PIPE if capture else None,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CommandError(cmd, None, f"failed to run `{shlex.join(cmd)}`: {exc}") from exc

        if completed.returncode != 0:
            raise CommandError(cmd, completed.returncode)
        return completed

    def run_v(self, cmd: str, *args: str) -> None:
        self._run([cmd, *args], capture=False)

    def output(self, cmd: str, *args: str) -> str:
        completed = self._run([cmd, *args], capture=True)
        return completed.stdout or ""
