import pytest

from history_store import HistoryStore


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "history.txt"


@pytest.fixture
def store(history_path):
    return HistoryStore(history_path)


class ScriptedInput:
    """Sustituye a input(): devuelve las líneas en orden y luego EOF."""

    def __init__(self, *lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput
