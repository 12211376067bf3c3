from project_bootstrap.github.client import (
    CodeSearchItem,
    GitHubClient,
    GitHubError,
    License,
    LicenseSummary,
)

__all__ = [
    "CodeSearchItem",
    "GitHubClient",
    "GitHubError",
    "License",
    "LicenseSummary",
]
