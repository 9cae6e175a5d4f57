import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = [
    "BENCH_ALL_COUNT",
    "BENCH_TIMEOUT",
    "BUILD_DIR",
    "DOCKER_IMAGE",
    "GITHUB_API_URL",
    "GOFUMPT_VERSION",
    "GOLANGCI_LINT_VERSION",
    "GOLANG_PERF_VERSION",
    "GOSIMPORTS_VERSION",
    "HTTP_TIMEOUT_SECONDS",
    "UPSTREAM_VERSION_FILE",
]


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, falling back to %s", name, raw, default)
        return default


# Tool pins for `go run <module>@<version>`
GOFUMPT_VERSION = os.getenv("WASILIBS_GOFUMPT_VERSION", "") or "v0.7.0"
GOSIMPORTS_VERSION = os.getenv("WASILIBS_GOSIMPORTS_VERSION", "") or "v0.3.8"
GOLANGCI_LINT_VERSION = os.getenv("WASILIBS_GOLANGCI_LINT_VERSION", "") or "v1.61.0"
GOLANG_PERF_VERSION = (
    os.getenv("WASILIBS_GOLANG_PERF_VERSION", "") or "v0.0.0-20240910192034-7a5a56cc2f8e"
)

# Import grouping prefix passed to gosimports -local
GOSIMPORTS_LOCAL = "github.com/wasilibs"

# Benchmarks
BENCH_TIMEOUT = "60m"
BENCH_ALL_COUNT = 5
BUILD_DIR = Path("build")

# Unit tests and lint
TEST_TIMEOUT = "20m"
LINT_TIMEOUT = "30m"

# Upstream release tracking
UPSTREAM_VERSION_FILE = Path("buildtools") / "wasm" / "version.txt"
DOCKERFILE = Path("buildtools") / "wasm" / "Dockerfile"
WASM_OUTPUT_DIR = Path("internal") / "wasm"
DOCKER_IMAGE = "wasilibs-build"

# GitHub REST API (GITHUB_API_URL matches the variable GitHub Actions exports)
GITHUB_API_URL = (os.getenv("GITHUB_API_URL", "") or "https://api.github.com").rstrip("/")
HTTP_TIMEOUT_SECONDS = _float_env("WASILIBS_HTTP_TIMEOUT_SECONDS", 30.0)

# Project-level identity file
IDENTITY_FILE_NAME = "wasilibs.yaml"
