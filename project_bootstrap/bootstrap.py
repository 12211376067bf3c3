from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Literal

from project_bootstrap import config
from project_bootstrap.errors import BootstrapError
from project_bootstrap.files import WriteAction, WriteMode, write_text
from project_bootstrap.git import CommandRunner, config_value
from project_bootstrap.github.client import GitHubClient
from project_bootstrap.gitignore.templates import (
    GitignoreCandidate,
    clone_candidates,
    pick_candidate,
    read_candidate,
    search_candidates,
)
from project_bootstrap.licenses.picker import match_licenses, needs_notice, pick_license
from project_bootstrap.render import project_name_from, render_notice, render_readme
from project_bootstrap.select import Selector

logger = logging.getLogger(__name__)

GitignoreSource = Literal["search", "clone"]
GitignoreMode = Literal["append", "overwrite", "skip"]

_GITIGNORE_WRITE_MODES: dict[str, WriteMode] = {
    "append": "append",
    "overwrite": "overwrite",
    "skip": "skip-existing",
}


@dataclass
class BootstrapOptions:
    language: str
    license_query: str = "apache"
    name: str | None = None
    author: str | None = None
    author_url: str | None = None
    directory: str = "."
    gitignore_source: GitignoreSource = "search"
    gitignore_mode: GitignoreMode = "append"
    force: bool = False
    skip_license: bool = False


@dataclass
class BootstrapResult:
    project_name: str
    author: str
    gitignore: str | None = None
    license_key: str | None = None
    files: dict[str, WriteAction] = field(default_factory=dict)


def resolve_project_name(options: BootstrapOptions) -> str:
    raw = (options.name or "").strip()
    if not raw:
        raw = os.path.basename(os.path.abspath(options.directory))
    return project_name_from(raw)


def resolve_author(options: BootstrapOptions, runner: CommandRunner) -> str:
    author = (options.author or "").strip() or config.bootstrap_author()
    if not author:
        author = config_value(runner, "user.name", cwd=options.directory)
    if not author:
        raise BootstrapError(
            "No author configured: pass --author, set PROJECT_BOOTSTRAP_AUTHOR, "
            "or set git's user.name"
        )
    return author


def _fetch_gitignore(
    options: BootstrapOptions,
    *,
    client: GitHubClient,
    selector: Selector,
    runner: CommandRunner,
) -> tuple[GitignoreCandidate, str]:
    if options.gitignore_source == "clone":
        workdir = tempfile.mkdtemp(prefix="project-bootstrap-")
        try:
            candidates = clone_candidates(
                options.language,
                repo_url=config.gitignore_repo_url(),
                workdir=workdir,
                runner=runner,
            )
            chosen = pick_candidate(candidates, options.language, selector)
            return chosen, read_candidate(chosen, client)
        finally:
            shutil.rmtree(workdir, ignore_errors=True)

    candidates = search_candidates(client, options.language, repo=config.gitignore_repo())
    chosen = pick_candidate(candidates, options.language, selector)
    return chosen, read_candidate(chosen, client)


def run_bootstrap(
    options: BootstrapOptions,
    *,
    client: GitHubClient,
    selector: Selector,
    runner: CommandRunner,
    year: int,
) -> BootstrapResult:
    """Write .gitignore, LICENSE, NOTICE (Apache-2.0 only) and README.md into options.directory."""
    if not os.path.isdir(options.directory):
        raise BootstrapError(f"Not a directory: {options.directory}")

    project_name = resolve_project_name(options)
    author = resolve_author(options, runner)
    result = BootstrapResult(project_name=project_name, author=author)
    logger.info("bootstrapping %r for %s", project_name, author)

    def _path(fn: str) -> str:
        return os.path.join(options.directory, fn)

    keep_mode: WriteMode = "overwrite" if options.force else "skip-existing"

    if options.gitignore_mode == "skip" and os.path.exists(_path(".gitignore")):
        logger.info(".gitignore exists; not fetching a template")
        result.files[".gitignore"] = WriteAction.SKIPPED
    else:
        chosen, text = _fetch_gitignore(options, client=client, selector=selector, runner=runner)
        logger.info("using .gitignore template %s", chosen.path)
        result.gitignore = chosen.path
        result.files[".gitignore"] = write_text(
            _path(".gitignore"), text, _GITIGNORE_WRITE_MODES[options.gitignore_mode]
        )

    if not options.skip_license:
        if os.path.exists(_path("LICENSE")) and not options.force:
            logger.info("LICENSE exists; not fetching a license")
            result.files["LICENSE"] = WriteAction.SKIPPED
        else:
            matches = match_licenses(client.list_licenses(), options.license_query)
            logger.info("%d licenses match %r", len(matches), options.license_query)
            summary = pick_license(matches, options.license_query, selector)
            logger.info("using license %s", summary.key)
            lic = client.get_license(summary.key)
            result.license_key = lic.key
            result.files["LICENSE"] = write_text(_path("LICENSE"), lic.body, keep_mode)
            if needs_notice(lic.key):
                result.files["NOTICE"] = write_text(
                    _path("NOTICE"), render_notice(project_name, author, year), keep_mode
                )

    author_url = (options.author_url or "").strip() or config.bootstrap_author_url()
    result.files["README.md"] = write_text(
        _path("README.md"), render_readme(project_name, author, author_url or None), keep_mode
    )
    return result
