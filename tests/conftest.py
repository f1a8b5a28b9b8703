import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput
from prompt_toolkit.output import DummyOutput


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the per-user directory at a temp dir so no test touches ~/.taskterm."""
    home = tmp_path / "home"
    monkeypatch.setenv("TASKTERM_HOME", str(home))
    monkeypatch.delenv("TASKTERM_LANG", raising=False)
    return home


@pytest.fixture(autouse=True)
def dummy_terminal():
    """Applications built in tests never touch the real terminal."""
    with create_app_session(input=DummyInput(), output=DummyOutput()):
        yield
