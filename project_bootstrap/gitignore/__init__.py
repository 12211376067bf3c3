from project_bootstrap.gitignore.templates import (
    GitignoreCandidate,
    clone_candidates,
    pick_candidate,
    read_candidate,
    search_candidates,
)

__all__ = [
    "GitignoreCandidate",
    "clone_candidates",
    "pick_candidate",
    "read_candidate",
    "search_candidates",
]
