import sys

import pytest

from core.config import Interpreter, settings


@pytest.fixture(autouse=True)
def script_dir(tmp_path, monkeypatch):
    directory = tmp_path / "scripts"
    monkeypatch.setattr(settings, "SCRIPT_DIR", str(directory))
    return directory


@pytest.fixture
def local_python(monkeypatch):
    """Point the Python selector at the interpreter running the tests."""
    interpreter = Interpreter(
        executable=sys.executable, extra_args=(), extension=".py", timeout=10
    )
    monkeypatch.setitem(settings.LANGUAGES, "Python", interpreter)
    return interpreter


@pytest.fixture
def short_timeout(monkeypatch, local_python):
    interpreter = Interpreter(
        executable=sys.executable, extra_args=(), extension=".py", timeout=1
    )
    monkeypatch.setitem(settings.LANGUAGES, "Python", interpreter)
    return interpreter
