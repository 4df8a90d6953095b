import sys

import pytest
from git import Repo


def _configure_identity(repo):
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Blog Author")
        cw.set_value("user", "email", "author@example.com")
        cw.set_value("commit", "gpgsign", "false")


@pytest.fixture
def remote_repo(tmp_path):
    return Repo.init(tmp_path / "remote.git", bare=True)


@pytest.fixture
def site(tmp_path, remote_repo):
    """A site directory whose public/ dir is a clone of a bare remote, with one pushed commit."""
    site_dir = tmp_path / "site"
    site_dir.mkdir()
    (site_dir / "content").mkdir()
    (site_dir / "content" / "currying.md").write_text("# Currying\n")

    output = Repo.clone_from(remote_repo.working_dir, site_dir / "public")
    _configure_identity(output)
    (site_dir / "public" / "CNAME").write_text("blog.example.com\n")
    output.git.add(A=True)
    output.git.commit(m="Initial publish")
    output.git.push("-u", "origin", "HEAD")
    return site_dir


def python_command(code):
    """Argv running a Python snippet, used in place of the site generator."""
    return [sys.executable, "-c", code]


@pytest.fixture
def render_command():
    return python_command(
        "import pathlib; pathlib.Path('public', 'index.html').write_text('<h1>Currying</h1>')"
    )
