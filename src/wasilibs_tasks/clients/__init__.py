from .github import GitHubReleaseClient, Release

__all__ = [
    "GitHubReleaseClient",
    "Release",
]
