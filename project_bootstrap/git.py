from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Protocol

from project_bootstrap.errors import BootstrapError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]: ...


@dataclass
class SubprocessRunner:
    def run(
        self,
        args: list[str],
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        check: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        return subprocess.run(
            args,
            cwd=cwd,
            env=env,
            text=True,
            capture_output=True,
            check=check,
        )


def _quiet_env() -> dict[str, str]:
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def shallow_clone(runner: CommandRunner, repo_url: str, dest: str) -> None:
    logger.info("cloning %s into %s", repo_url, dest)
    try:
        runner.run(["git", "clone", "--depth", "1", repo_url, dest], env=_quiet_env(), check=True)
    except FileNotFoundError as exc:
        raise BootstrapError("git executable not found; install git or use --source search") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or exc.stdout or "").strip()
        raise BootstrapError(f"git clone of {repo_url} failed: {detail}") from exc


def config_value(runner: CommandRunner, name: str, *, cwd: str | None = None) -> str:
    """Return a git config value, or "" when it is unset or git is unavailable."""
    try:
        cp = runner.run(["git", "config", "--get", name], cwd=cwd, env=_quiet_env(), check=False)
    except FileNotFoundError:
        logger.info("git executable not found")
        return ""
    if cp.returncode != 0:
        return ""
    return (cp.stdout or "").strip()
