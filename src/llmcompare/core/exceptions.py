"""Exceptions raised by llmcompare."""

from typing import Optional


class LLMCompareError(Exception):
    """Base class for llmcompare errors."""


class InitializationError(LLMCompareError):
    """The LLM client was asked to initialize without a usable API key."""


class NotInitializedError(LLMCompareError):
    """The LLM client was used before initialize() succeeded."""


class StreamError(LLMCompareError):
    """The streaming completion failed."""


class StreamSetupError(StreamError):
    """The provider rejected the streaming request."""


class StreamInterruptedError(StreamError):
    """The stream failed after it was opened."""


class FileReadError(LLMCompareError):
    """An input file could not be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if reason else path)
