"""llmcompare: compare two local files with a streaming LLM from the terminal."""

__version__ = "0.1.0"
