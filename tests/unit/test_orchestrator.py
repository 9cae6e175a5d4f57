from pathlib import Path
from unittest.mock import MagicMock

import pytest

from wasilibs_tasks.bench import BenchmarkOrchestrator, BenchMode
from wasilibs_tasks.config import LibraryIdentity
from wasilibs_tasks.errors import BenchmarkError, CommandError


def _output_by_tag(cmd: str, *args: str) -> str:
    tags = [a for a in args if a.startswith("-tags=")]
    return f"output for {tags[0] if tags else 'wazero'}\n"


def test_run_all_writes_files_and_compares(
    identity: LibraryIdentity, mock_runner: MagicMock, tmp_path: Path
) -> None:
    mock_runner.output.side_effect = _output_by_tag
    out_dir = tmp_path / "build"

    runs = BenchmarkOrchestrator(identity, mock_runner).run_all("./...", 5, out_dir)

    assert [r.mode for r in runs] == [BenchMode.WAZERO, BenchMode.CGO, BenchMode.DEFAULT]
    assert (out_dir / "bench.txt").read_text() == "output for wazero\n"
    assert (out_dir / "bench_cgo.txt").read_text() == "output for -tags=foo_cgo\n"
    assert (out_dir / "bench_default.txt").read_text() == "output for -tags=foo_bench_default\n"

    assert mock_runner.output.call_count == 3
    first_call = mock_runner.output.call_args_list[0]
    assert first_call.args[0] == "go"
    assert "-count=5" in first_call.args

    mock_runner.run_v.assert_called_once()
    compare_args = mock_runner.run_v.call_args.args
    assert compare_args[:2] == ("go", "run")
    assert compare_args[2].startswith("golang.org/x/perf/cmd/benchstat@")
    assert compare_args[3:] == (
        str(out_dir / "bench_default.txt"),
        str(out_dir / "bench.txt"),
        str(out_dir / "bench_cgo.txt"),
    )


def test_cgo_failure_stops_run(identity: LibraryIdentity, mock_runner: MagicMock, tmp_path: Path) -> None:
    def _fail_cgo(cmd: str, *args: str) -> str:
        if "-tags=foo_cgo" in args:
            raise CommandError([cmd, *args], 1)
        return "ok\n"

    mock_runner.output.side_effect = _fail_cgo
    out_dir = tmp_path / "build"

    with pytest.raises(BenchmarkError, match="error running cgo benchmarks") as exc_info:
        BenchmarkOrchestrator(identity, mock_runner).run_all("./...", 5, out_dir)

    assert exc_info.value.mode is BenchMode.CGO
    assert exc_info.value.returncode == 1
    assert (out_dir / "bench.txt").exists()
    assert not (out_dir / "bench_cgo.txt").exists()
    assert not (out_dir / "bench_default.txt").exists()
    assert mock_runner.output.call_count == 2
    mock_runner.run_v.assert_not_called()


def test_creates_nested_output_dir(identity: LibraryIdentity, mock_runner: MagicMock, tmp_path: Path) -> None:
    out_dir = tmp_path / "a" / "b"
    BenchmarkOrchestrator(identity, mock_runner).run_all("./wafbench", 1, out_dir, prefix="wafbench")

    assert sorted(p.name for p in out_dir.iterdir()) == [
        "wafbench.txt",
        "wafbench_cgo.txt",
        "wafbench_default.txt",
    ]


def test_comparison_failure_keeps_results(
    identity: LibraryIdentity, mock_runner: MagicMock, tmp_path: Path
) -> None:
    mock_runner.run_v.side_effect = CommandError(["go", "run"], 2)

    with pytest.raises(CommandError):
        BenchmarkOrchestrator(identity, mock_runner).run_all("./...", 5, tmp_path)

    assert (tmp_path / "bench_default.txt").exists()


def test_output_written_verbatim(identity: LibraryIdentity, mock_runner: MagicMock, tmp_path: Path) -> None:
    raw = "goos: linux\r\nBenchmarkA-8\t 1\t 2 ns/op\n\n"
    mock_runner.output.return_value = raw

    runs = BenchmarkOrchestrator(identity, mock_runner).run_all("./...", 5, tmp_path)

    assert runs[0].output == raw
    assert (tmp_path / "bench.txt").read_bytes() == raw.encode()
