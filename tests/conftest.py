from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wasilibs_tasks.config import LibraryIdentity
from wasilibs_tasks.shell import CommandRunner


@pytest.fixture
def identity() -> LibraryIdentity:
    return LibraryIdentity(library_name="foo", repository="upstream/foo")


@pytest.fixture
def mock_runner() -> MagicMock:
    """CommandRunner double; `output` returns canned benchmark text by default."""
    runner = MagicMock(spec=CommandRunner)
    runner.output.return_value = "BenchmarkX-8  100  10 ns/op\n"
    return runner


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in [
        "WASILIBS_LIBRARY_NAME",
        "WASILIBS_LIBRARY_REPO",
        "WASI_TEST_MODE",
        "GH_TOKEN",
        "GITHUB_TOKEN",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def project_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Project tree with buildtools/wasm/version.txt pinned to v1.0.0."""
    wasm_dir = tmp_path / "buildtools" / "wasm"
    wasm_dir.mkdir(parents=True)
    (wasm_dir / "version.txt").write_text("v1.0.0\n", encoding="utf-8")
    (wasm_dir / "Dockerfile").write_text("FROM scratch\n", encoding="utf-8")
    yield tmp_path
