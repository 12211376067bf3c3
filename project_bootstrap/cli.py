from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from enum import Enum
import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from project_bootstrap import config
from project_bootstrap.bootstrap import BootstrapOptions, BootstrapResult, run_bootstrap
from project_bootstrap.errors import BootstrapError, SelectionCancelled
from project_bootstrap.git import SubprocessRunner
from project_bootstrap.github.client import GitHubClient
from project_bootstrap.select import ConsoleSelector

logger = logging.getLogger(__name__)

console = Console(stderr=True)

app = typer.Typer(
    name="project-bootstrap",
    help="Adds a .gitignore, LICENSE and README file to your new project.",
    add_completion=False,
)


class Source(str, Enum):
    search = "search"
    clone = "clone"


class GitignoreMode(str, Enum):
    append = "append"
    overwrite = "overwrite"
    skip = "skip"


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else config.log_level()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _summary(result: BootstrapResult) -> Table:
    table = Table(title=result.project_name, show_header=True, header_style="bold")
    table.add_column("File")
    table.add_column("Action")
    table.add_column("Source", style="dim")
    sources = {".gitignore": result.gitignore, "LICENSE": result.license_key}
    for fn, action in result.files.items():
        style = "yellow" if action.value == "skipped" else "green"
        table.add_row(fn, f"[{style}]{action.value}[/{style}]", sources.get(fn) or "")
    return table


@app.command()
def main(
    language: str = typer.Argument(..., help="Sets the programming language for the .gitignore"),
    license_query: str | None = typer.Argument(
        None, metavar="LICENSE", help="Sets the open-source license (substring of a license key)"
    ),
    name: str | None = typer.Option(None, "--name", help="Sets a custom project name"),
    author: str | None = typer.Option(None, "--author", help="Author named in README and NOTICE"),
    author_url: str | None = typer.Option(None, "--author-url", help="Link for the author in README"),
    directory: str = typer.Option(".", "--dir", "-C", help="Project directory to write into"),
    source: Source | None = typer.Option(
        None, "--source", case_sensitive=False, help="Where .gitignore templates come from"
    ),
    gitignore_mode: GitignoreMode = typer.Option(
        GitignoreMode.append, "--gitignore-mode", case_sensitive=False,
        help="What to do with an existing .gitignore",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite existing LICENSE, NOTICE and README.md"),
    no_license: bool = typer.Option(False, "--no-license", help="Do not write LICENSE or NOTICE"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step"),
) -> None:
    # Resolve .env from the directory the command runs in, not the install location.
    load_dotenv(find_dotenv(usecwd=True))
    _configure_logging(verbose)

    options = BootstrapOptions(
        language=language,
        license_query=(license_query or config.default_license()),
        name=name,
        author=author,
        author_url=author_url,
        directory=os.path.abspath(directory),
        gitignore_source=(source.value if source else config.gitignore_source()),
        gitignore_mode=gitignore_mode.value,
        force=force,
        skip_license=no_license,
    )

    try:
        result = run_bootstrap(
            options,
            client=GitHubClient.from_env(),
            selector=ConsoleSelector(console),
            runner=SubprocessRunner(),
            year=datetime.now(timezone.utc).year,
        )
    except SelectionCancelled:
        console.print("[yellow]Selection cancelled[/yellow]")
        raise typer.Exit(130)
    except BootstrapError as e:
        logger.debug("bootstrap failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(_summary(result))


if __name__ == "__main__":  # pragma: no cover
    app()
