import logging
import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'mdinclude'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from mdinclude.core.config import clear_all_caches
from mdinclude.core.stdlib_logging import reset_stdlib_logging_for_tests


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Give every test its own HOME, cwd and project root.

    Strips MDINCLUDE_* variables so user environments never leak into results.
    """
    for key in list(os.environ):
        if key.startswith("MDINCLUDE_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("MDINCLUDE_PROJECT_ROOT", str(project))
    monkeypatch.chdir(project)

    clear_all_caches()
    yield project
    clear_all_caches()
    reset_stdlib_logging_for_tests()
    logging.getLogger("mdinclude").handlers.clear()


@pytest.fixture
def home_dir(isolated_env: Path) -> Path:
    return Path(os.environ["HOME"])


@pytest.fixture
def project_root(isolated_env: Path) -> Path:
    return isolated_env


@pytest.fixture
def write_file():
    """Write ``text`` to ``path`` (creating parents) and return the path."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
