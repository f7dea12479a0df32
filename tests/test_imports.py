"""Test that all modules can be imported successfully."""


def test_core_imports():
    """Test core module imports."""
    from llmcompare.core import Config, HistoryData, HistoryStore, read_input_file

    config = Config()
    assert config.model == "gpt-4o-mini"
    assert config.temperature == 0.7
    assert config.history_path.name == ".cli-history.json"

    history = HistoryData()
    assert history.sessions == []
    assert callable(read_input_file)
    assert hasattr(HistoryStore, 'load')


def test_ai_imports():
    """Test ai module imports."""
    from llmcompare.ai import LLMClient, InteractivePrompter, CompareSession, build_conversation

    assert not LLMClient().is_initialized
    assert hasattr(InteractivePrompter, 'choose_selector')
    assert hasattr(CompareSession, 'run')
    assert callable(build_conversation)


def test_utils_imports():
    """Test utils module imports."""
    from llmcompare.utils import ConsoleManager, THEMES

    assert 'manhattan' in THEMES
    assert hasattr(ConsoleManager, 'print_error')
