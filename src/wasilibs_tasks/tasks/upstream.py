import logging
from collections.abc import Callable
from pathlib import Path

from ..clients.github import GitHubReleaseClient
from ..config.identity import LibraryIdentity
from ..config.settings import DOCKER_IMAGE, DOCKERFILE, UPSTREAM_VERSION_FILE, WASM_OUTPUT_DIR
from ..shell import CommandRunner

logger = logging.getLogger(__name__)


def update_libs(runner: CommandRunner | None = None, project_dir: Path | None = None) -> None:
    """Rebuild the precompiled wasm libraries in a container.

    The image is built from buildtools/wasm/Dockerfile and run with
    internal/wasm mounted at /out.
    """
    root = (project_dir or Path.cwd()).resolve()
    runner = runner or CommandRunner(cwd=str(root))

    runner.run_v("docker", "build", "-t", DOCKER_IMAGE, "-f", str(DOCKERFILE), ".")

    wasm_dir = root / WASM_OUTPUT_DIR
    wasm_dir.mkdir(parents=True, exist_ok=True)
    runner.run_v("docker", "run", "--rm", "-v", f"{wasm_dir}:/out", DOCKER_IMAGE)


def update_upstream(
    identity: LibraryIdentity,
    runner: CommandRunner | None = None,
    client: GitHubReleaseClient | None = None,
    rebuild: Callable[[], None] | None = None,
    project_dir: Path | None = None,
) -> bool:
    """Bump buildtools/wasm/version.txt to the latest upstream release.

    Triggers `rebuild` (default: `update_libs`) once when the version changed.
    The version file is not restored if the rebuild fails.

    Returns:
        True if the version changed, False if already up to date.
    """
    version_file = (project_dir or Path.cwd()) / UPSTREAM_VERSION_FILE
    current = version_file.read_text(encoding="utf-8").strip()

    client = client or GitHubReleaseClient()
    latest = client.latest_release(identity.repository).tag_name

    if latest == current:
        logger.info("up to date")
        return False

    logger.info("updating to %s", latest)
    version_file.write_text(latest, encoding="utf-8")

    if rebuild is None:
        update_libs(runner, project_dir)
    else:
        rebuild()
    return True
