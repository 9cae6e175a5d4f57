import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .settings import IDENTITY_FILE_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LibraryIdentity:
    """Names of the wrapper project and of the upstream library it builds.

    `library_name` derives build tags (`<name>_cgo`, `<name>_bench_default`);
    `repository` is the GitHub `owner/name` used for release lookups.
    Neither is validated: an empty value only surfaces when the downstream
    tool or API rejects it.
    """

    library_name: str = ""
    repository: str = ""

    @property
    def cgo_tag(self) -> str:
        return f"{self.library_name}_cgo"

    @property
    def bench_default_tag(self) -> str:
        return f"{self.library_name}_bench_default"

    @classmethod
    def from_env(cls) -> "LibraryIdentity":
        return cls(
            library_name=os.getenv("WASILIBS_LIBRARY_NAME", "").strip(),
            repository=os.getenv("WASILIBS_LIBRARY_REPO", "").strip(),
        )


class NameRegistry:
    """Collects the identity during the embedding project's setup phase.

    Setters overwrite unconditionally. Call `identity()` once setup is done
    and hand the returned value to the tasks; the registry itself is never
    consulted afterwards.
    """

    def __init__(self) -> None:
        self._library_name = ""
        self._library_repo = ""

    def set_library_name(self, name: str) -> None:
        self._library_name = name

    def set_library_repo(self, repo: str) -> None:
        self._library_repo = repo

    def identity(self) -> LibraryIdentity:
        return LibraryIdentity(library_name=self._library_name, repository=self._library_repo)


_default_registry = NameRegistry()


def set_library_name(name: str) -> None:
    """Set the library name of the importing project, used for build tags."""
    _default_registry.set_library_name(name)


def set_library_repo(repo: str) -> None:
    """Set the GitHub repository of the upstream library being built."""
    _default_registry.set_library_repo(repo)


def default_registry() -> NameRegistry:
    return _default_registry


def _read_identity_file(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def load_identity(
    project_dir: Path | None = None,
    base: LibraryIdentity | None = None,
) -> LibraryIdentity:
    """Resolve the identity for a project directory.

    Priority: environment > wasilibs.yaml > `base` (typically the registry's
    identity). Empty values never override non-empty ones.
    """
    name = base.library_name if base else ""
    repo = base.repository if base else ""

    identity_file = (project_dir or Path.cwd()) / IDENTITY_FILE_NAME
    if identity_file.is_file():
        data = _read_identity_file(identity_file)
        logger.debug("Loaded identity from %s", identity_file)
        name = str(data.get("library_name") or "") or name
        repo = str(data.get("library_repo") or "") or repo

    env = LibraryIdentity.from_env()
    return LibraryIdentity(
        library_name=env.library_name or name,
        repository=env.repository or repo,
    )
