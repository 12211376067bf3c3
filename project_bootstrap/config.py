from __future__ import annotations

import logging
import os

_GITIGNORE_SOURCES = ("search", "clone")


def _env_str(name: str) -> str:
    return str(os.environ.get(name) or "").strip()


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        return int(default)


def github_token() -> str:
    return _env_str("GITHUB_TOKEN")


def github_api_url() -> str:
    return (_env_str("GITHUB_API_URL") or "https://api.github.com").rstrip("/")


def gitignore_repo() -> str:
    return _env_str("PROJECT_BOOTSTRAP_GITIGNORE_REPO").strip("/") or "github/gitignore"


def gitignore_repo_url() -> str:
    return f"https://github.com/{gitignore_repo()}.git"


def gitignore_source() -> str:
    v = _env_str("PROJECT_BOOTSTRAP_GITIGNORE_SOURCE").lower()
    return v if v in _GITIGNORE_SOURCES else "search"


def user_agent() -> str:
    return _env_str("PROJECT_BOOTSTRAP_USER_AGENT") or "project-bootstrap"


def http_timeout() -> int:
    return max(1, _env_int("PROJECT_BOOTSTRAP_HTTP_TIMEOUT", 30))


def bootstrap_author() -> str:
    return _env_str("PROJECT_BOOTSTRAP_AUTHOR")


def bootstrap_author_url() -> str:
    return _env_str("PROJECT_BOOTSTRAP_AUTHOR_URL")


def default_license() -> str:
    return _env_str("PROJECT_BOOTSTRAP_DEFAULT_LICENSE").lower() or "apache"


def log_level() -> int:
    # Accepts names ("info") or numbers ("20").
    raw = _env_str("PROJECT_BOOTSTRAP_LOG_LEVEL").upper()
    if not raw:
        return logging.WARNING
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING
