from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[-_\s]+")
# Lower-to-upper ("myProject") and acronym-to-word ("HTTPServer") boundaries.
_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def project_name_from(raw: str) -> str:
    """Turn a directory name or --name value into a display name.

    "my-cool_project" -> "My Cool Project", "myProject" -> "My Project".
    """
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split((raw or "").strip()):
        if not chunk:
            continue
        words.extend(w for w in _CAMEL_RE.split(chunk) if w)
    if not words:
        return "Project"
    return " ".join(_title_word(w) for w in words)


def render_readme(project_name: str, author: str, author_url: str | None = None) -> str:
    maintainer = f"[{author}]({author_url})" if author_url else author
    return f"# {project_name}\n\n##### This project is maintained by {maintainer}.\n"


def render_notice(project_name: str, author: str, year: int) -> str:
    return (
        f"{project_name}\n"
        f"Copyright {year} {author}\n"
        "\n"
        f"{project_name} was originally developed and maintained by {author}.\n"
        "\n"
        "Portions of this software were developed by various contributors, who retain\n"
        f"copyright on their work. These works are licensed to {author}.\n"
        "\n"
        f"{project_name} is available under the Apache 2.0 license. See LICENSE for more\n"
        "information.\n"
        "\n"
        "This software uses other open source libraries. These libraries have their own\n"
        "licenses and copyright holders.\n"
    )
