import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local package without installing it.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

_ENV_VARS = (
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "PROJECT_BOOTSTRAP_GITIGNORE_REPO",
    "PROJECT_BOOTSTRAP_GITIGNORE_SOURCE",
    "PROJECT_BOOTSTRAP_USER_AGENT",
    "PROJECT_BOOTSTRAP_HTTP_TIMEOUT",
    "PROJECT_BOOTSTRAP_AUTHOR",
    "PROJECT_BOOTSTRAP_AUTHOR_URL",
    "PROJECT_BOOTSTRAP_DEFAULT_LICENSE",
    "PROJECT_BOOTSTRAP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer's own GITHUB_TOKEN or .env must not leak into unit tests.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
