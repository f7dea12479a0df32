"""Core components for llmcompare."""

from .models import Config, HistoryData, SessionRecord, Message, MessageRole, Conversation
from .history import HistoryStore, next_session_id, record_session
from .file_reader import read_input_file
from .exceptions import (
    LLMCompareError,
    InitializationError,
    NotInitializedError,
    StreamError,
    StreamSetupError,
    StreamInterruptedError,
    FileReadError,
)

__all__ = [
    "Config",
    "HistoryData",
    "SessionRecord",
    "Message",
    "MessageRole",
    "Conversation",
    "HistoryStore",
    "next_session_id",
    "record_session",
    "read_input_file",
    "LLMCompareError",
    "InitializationError",
    "NotInitializedError",
    "StreamError",
    "StreamSetupError",
    "StreamInterruptedError",
    "FileReadError",
]
