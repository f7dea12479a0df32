import io
from unittest.mock import Mock
import json
from types import SimpleNamespace

import pytest
import tempfile
import shutil
from pathlib import Path

from llmcompare.core.models import Config
from llmcompare.utils.console_base import ConsoleManager


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def history_path(temp_workspace):
    """Path of a history file that does not exist yet."""
    return temp_workspace / ".cli-history.json"


@pytest.fixture
def config(history_path):
    return Config(history_path=history_path)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def ui(output):
    """Console writing to in-memory buffers instead of the terminal."""
    return ConsoleManager(file=output, err_file=io.StringIO(), force_terminal=False)


@pytest.fixture
def sample_files(temp_workspace):
    """Two small input files to compare."""
    foo = temp_workspace / "foo.txt"
    bar = temp_workspace / "bar.txt"
    foo.write_text("alpha", encoding="utf-8")
    bar.write_text("beta", encoding="utf-8")
    return foo, bar


@pytest.fixture
def write_history(history_path):
    """Write a raw history document to the history path."""
    def _write(data):
        history_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return history_path
    return _write


def make_chunk(content):
    """Build a fake streaming chunk shaped like the OpenAI SDK's."""
    delta = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(delta=delta)])


@pytest.fixture
def fake_openai():
    """Factory for a fake OpenAI client whose chat.completions.create streams deltas."""
    def _make(deltas=None, error=None):
        create = Mock()
        if error is not None:
            create.side_effect = error
        else:
            create.return_value = iter([make_chunk(d) for d in deltas or []])
        return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return _make
