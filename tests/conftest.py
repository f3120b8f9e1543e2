"""Shared fixtures: throwaway git repositories and a scripted prompt session."""

import re
from pathlib import Path

import pygit2
import pytest
from pygit2.enums import ConfigLevel

from ac.errors import PromptCancelled
from ac.session.base import PromptSession

ANSI_RE = re.compile(r'\033\[[0-9;]*m')

TEST_NAME = "Test User"
TEST_EMAIL = "test@example.com"


class ScriptedSession(PromptSession):
    """PromptSession that replays canned answers.

    An answer of PromptCancelled (the class) makes that step abort.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []
        self.help_messages = {}
        self.choices = None

    @property
    def name(self) -> str:
        return "scripted"

    def _next(self, message):
        self.asked.append(message)
        answer = self.answers.pop(0)
        if answer is PromptCancelled:
            raise PromptCancelled()
        return answer

    def select_one(self, message, choices):
        self.choices = choices
        return self._next(message)

    def ask_optional_text(self, message, help_message=None, placeholder=None, multiline=False):
        self.help_messages[message] = help_message
        return self._next(message)

    def ask_required_text(self, message, help_message=None):
        self.help_messages[message] = help_message
        return self._next(message)

    def ask_boolean(self, message, default=False):
        return self._next(message)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path_factory):
    """Keep the host's global and system git config out of every test."""
    empty = tmp_path_factory.mktemp("gitconfig")
    levels = [ConfigLevel.GLOBAL, ConfigLevel.XDG, ConfigLevel.SYSTEM]
    saved = {level: pygit2.settings.search_path[level] for level in levels}
    for level in levels:
        pygit2.settings.search_path[level] = str(empty)
    yield
    for level, path in saved.items():
        pygit2.settings.search_path[level] = path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("AC_MODE", "AC_ALLOW_EMPTY", "AC_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def make_session():
    """Return a factory for ScriptedSession."""
    return ScriptedSession


@pytest.fixture
def anonymous_repo(tmp_path):
    """Fresh non-bare repository on an unborn `main` with no identity configured."""
    return pygit2.init_repository(str(tmp_path / "repo"), initial_head="main")


@pytest.fixture
def repo(anonymous_repo):
    """Fresh repository on an unborn `main` with a configured identity."""
    anonymous_repo.config["user.name"] = TEST_NAME
    anonymous_repo.config["user.email"] = TEST_EMAIL
    return anonymous_repo


@pytest.fixture
def write_file():
    """Return a function that writes a file into a repository's working tree."""
    def _write(repo, relpath: str, content: str = "content\n") -> Path:
        path = Path(repo.workdir) / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def committed_repo(repo, write_file):
    """Repository with exactly one commit containing README.md."""
    write_file(repo, "README.md", "# hello\n")
    index = repo.index
    index.add("README.md")
    index.write()
    tree = index.write_tree()
    signature = pygit2.Signature(TEST_NAME, TEST_EMAIL)
    repo.create_commit("HEAD", signature, signature, "chore: initial", tree, [])
    return repo
