from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

from project_bootstrap.errors import NoMatchError
from project_bootstrap.git import CommandRunner, shallow_clone
from project_bootstrap.github.client import GitHubClient
from project_bootstrap.select import Selector

logger = logging.getLogger(__name__)

_SUFFIX = ".gitignore"

PROMPT = "Which .gitignore do you want to use?"


@dataclass(frozen=True)
class GitignoreCandidate:
    # Repository-relative path, e.g. "community/Golang/Hugo.gitignore".
    path: str
    # Blob URL for remote candidates, filesystem path for cloned ones.
    source: str
    kind: Literal["remote", "local"]

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def stem(self) -> str:
        n = self.name
        return n[: -len(_SUFFIX)] if n.endswith(_SUFFIX) else n


def search_candidates(client: GitHubClient, language: str, *, repo: str) -> list[GitignoreCandidate]:
    items = client.search_code(language, repo=repo)
    out = [
        GitignoreCandidate(path=item.path, source=item.html_url, kind="remote")
        for item in items
        if item.name.endswith(_SUFFIX)
    ]
    logger.info("code search for %r returned %d templates", language, len(out))
    return sorted(out, key=lambda c: c.path.lower())


def _match_tree(root: str, language: str) -> list[GitignoreCandidate]:
    needle = language.strip().lower()
    out: list[GitignoreCandidate] = []
    for dirpath, dirnames, filenames in os.walk(root):
        if ".git" in dirnames:
            dirnames.remove(".git")
        for fn in filenames:
            if not fn.endswith(_SUFFIX) or fn == _SUFFIX:
                continue
            if needle not in fn[: -len(_SUFFIX)].lower():
                continue
            full = os.path.join(dirpath, fn)
            rel = os.path.relpath(full, root).replace(os.sep, "/")
            out.append(GitignoreCandidate(path=rel, source=full, kind="local"))
    return sorted(out, key=lambda c: c.path.lower())


def clone_candidates(
    language: str,
    *,
    repo_url: str,
    workdir: str,
    runner: CommandRunner,
) -> list[GitignoreCandidate]:
    """Clone the template repo into workdir and match template filenames locally.

    The caller owns workdir and is expected to remove it; candidates point into it.
    """
    dest = os.path.join(workdir, "gitignore")
    shallow_clone(runner, repo_url, dest)
    out = _match_tree(dest, language)
    logger.info("local match for %r found %d templates", language, len(out))
    return out


def pick_candidate(
    candidates: list[GitignoreCandidate],
    language: str,
    selector: Selector,
) -> GitignoreCandidate:
    if not candidates:
        raise NoMatchError(".gitignore template", language)
    if len(candidates) == 1:
        return candidates[0]

    wanted = language.strip().lower()
    exact = [c for c in candidates if c.stem.lower() == wanted]
    if len(exact) == 1:
        logger.info("exact template match %s", exact[0].path)
        return exact[0]

    idx = selector.choose(PROMPT, [c.path for c in candidates])
    return candidates[idx]


def read_candidate(candidate: GitignoreCandidate, client: GitHubClient) -> str:
    if candidate.kind == "local":
        with open(candidate.source, encoding="utf-8") as f:
            return f.read()
    return client.download_raw(candidate.source)
