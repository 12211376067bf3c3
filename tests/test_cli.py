import pytest
from typer.testing import CliRunner

from fakes import LICENSES, Resp, Runner, Sess
from project_bootstrap import cli
from project_bootstrap.errors import SelectionCancelled
from project_bootstrap.github.client import GitHubClient

API = "https://api.example"
BLOB = "https://github.com/github/gitignore/blob/main/Go.gitignore"
RAW = "https://github.com/github/gitignore/raw/main/Go.gitignore"

runner = CliRunner()


def _routes():
    return {
        ("GET", f"{API}/search/code"): Resp(
            200, {"total_count": 1, "items": [{"name": "Go.gitignore", "path": "Go.gitignore", "html_url": BLOB}]}
        ),
        ("GET", RAW): Resp(200, text="*.exe\n"),
        ("GET", f"{API}/licenses"): Resp(200, LICENSES),
        ("GET", f"{API}/licenses/mit"): Resp(200, {**LICENSES[-1], "body": "MIT License\n"}),
        ("GET", f"{API}/licenses/apache-2.0"): Resp(200, {**LICENSES[1], "body": "Apache License\n"}),
    }


@pytest.fixture
def wired(monkeypatch, tmp_path):
    # .env is resolved from the working directory; keep it inside the test sandbox.
    monkeypatch.chdir(tmp_path)
    sess = Sess(_routes())
    git = Runner({"Go.gitignore": "vendor/\n"}, config={"user.name": "Git User"})
    monkeypatch.setattr(
        cli.GitHubClient, "from_env", classmethod(lambda cls: GitHubClient(base_url=API, token="t", session=sess))
    )
    monkeypatch.setattr(cli, "SubprocessRunner", lambda: git)
    return sess, git


def test_default_run_writes_files(tmp_path, wired):
    d = tmp_path / "go-service"
    d.mkdir()
    res = runner.invoke(cli.app, ["go", "--dir", str(d), "--author", "Ada"])

    assert res.exit_code == 0, res.output
    assert (d / ".gitignore").read_text(encoding="utf-8") == "*.exe\n"
    assert (d / "LICENSE").read_text(encoding="utf-8") == "Apache License\n"
    assert (d / "NOTICE").exists()
    assert (d / "README.md").read_text(encoding="utf-8").startswith("# Go Service\n")


def test_license_argument_and_name_option(tmp_path, wired):
    res = runner.invoke(cli.app, ["go", "mit", "--name", "shiny_thing", "-C", str(tmp_path)])

    assert res.exit_code == 0, res.output
    assert (tmp_path / "LICENSE").read_text(encoding="utf-8") == "MIT License\n"
    assert not (tmp_path / "NOTICE").exists()
    # Author comes from git config when neither flag nor env is set.
    assert "maintained by Git User." in (tmp_path / "README.md").read_text(encoding="utf-8")


def test_clone_source_from_env(tmp_path, wired, monkeypatch):
    _sess, git = wired
    monkeypatch.setenv("PROJECT_BOOTSTRAP_GITIGNORE_SOURCE", "clone")
    res = runner.invoke(cli.app, ["go", "--no-license", "-C", str(tmp_path)])

    assert res.exit_code == 0, res.output
    assert git.calls[0][:2] == ["git", "clone"]
    assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "vendor/\n"
    assert not (tmp_path / "LICENSE").exists()


def test_unknown_license_exits_with_error(tmp_path, wired):
    res = runner.invoke(cli.app, ["go", "wtfpl", "-C", str(tmp_path)])
    assert res.exit_code == 1
    assert "wtfpl" in res.output


def test_github_failure_exits_with_error(tmp_path, wired):
    sess, _git = wired
    sess.routes[("GET", f"{API}/search/code")] = Resp(401, {"message": "Bad credentials"})
    res = runner.invoke(cli.app, ["go", "-C", str(tmp_path)])
    assert res.exit_code == 1
    assert "401" in res.output
    assert not (tmp_path / ".gitignore").exists()


def test_language_is_required():
    res = runner.invoke(cli.app, [])
    assert res.exit_code != 0


def test_dotenv_in_working_directory_is_loaded(tmp_path, wired, monkeypatch):
    # Registered so the value load_dotenv writes into os.environ is removed afterwards.
    monkeypatch.setenv("PROJECT_BOOTSTRAP_AUTHOR", "placeholder")
    monkeypatch.delenv("PROJECT_BOOTSTRAP_AUTHOR")
    (tmp_path / ".env").write_text("PROJECT_BOOTSTRAP_AUTHOR=Dot Env\n", encoding="utf-8")
    d = tmp_path / "svc"
    d.mkdir()
    (d / ".gitignore").write_text(".env\n", encoding="utf-8")

    res = runner.invoke(cli.app, ["go", "--no-license", "--gitignore-mode", "skip", "-C", str(d)])

    assert res.exit_code == 0, res.output
    assert "maintained by Dot Env." in (d / "README.md").read_text(encoding="utf-8")


def _two_python_hits(sess):
    sess.routes[("GET", f"{API}/search/code")] = Resp(
        200,
        {
            "total_count": 2,
            "items": [
                {"name": "Python.gitignore", "path": "Python.gitignore",
                 "html_url": "https://github.com/github/gitignore/blob/main/Python.gitignore"},
                {"name": "JupyterNotebooks.gitignore", "path": "community/Python/JupyterNotebooks.gitignore",
                 "html_url": "https://github.com/github/gitignore/blob/main/community/Python/JupyterNotebooks.gitignore"},
            ],
        },
    )


def test_cancelled_selection_exits_130(tmp_path, wired, monkeypatch):
    sess, _git = wired
    _two_python_hits(sess)

    class _Cancelling:
        def __init__(self, _console=None):
            pass

        def choose(self, prompt, options):
            raise SelectionCancelled("Selection cancelled")

    monkeypatch.setattr(cli, "ConsoleSelector", _Cancelling)
    res = runner.invoke(cli.app, ["py", "--author", "Ada", "-C", str(tmp_path)])

    assert res.exit_code == 130
    assert "cancelled" in res.output
    assert not (tmp_path / ".gitignore").exists()


def test_ambiguous_match_without_tty_lists_candidates(tmp_path, wired):
    sess, _git = wired
    _two_python_hits(sess)
    # CliRunner's stdin is not a terminal, so the real selector must refuse to prompt.
    res = runner.invoke(cli.app, ["py", "--author", "Ada", "-C", str(tmp_path)])

    assert res.exit_code == 1
    assert "Python.gitignore" in res.output
    assert "community/Python/JupyterNotebooks.gitignore" in res.output
    assert not (tmp_path / ".gitignore").exists()
