"""Configuration module for wasilibs-tasks."""

from .identity import (
    LibraryIdentity,
    NameRegistry,
    default_registry,
    load_identity,
    set_library_name,
    set_library_repo,
)
from .settings import (
    BENCH_ALL_COUNT,
    BUILD_DIR,
    GITHUB_API_URL,
    GOLANG_PERF_VERSION,
    HTTP_TIMEOUT_SECONDS,
    UPSTREAM_VERSION_FILE,
)

__all__ = [
    # Settings
    "BENCH_ALL_COUNT",
    "BUILD_DIR",
    "GITHUB_API_URL",
    "GOLANG_PERF_VERSION",
    "HTTP_TIMEOUT_SECONDS",
    "UPSTREAM_VERSION_FILE",
    # Identity
    "LibraryIdentity",
    "NameRegistry",
    "default_registry",
    "load_identity",
    "set_library_name",
    "set_library_repo",
]
