"""
Core data models for llmcompare.

This module contains the run configuration, the persisted history document
and the ephemeral conversation sent to the LLM.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_HISTORY_PATH = Path(__file__).resolve().parent.parent / ".cli-history.json"


@dataclass
class Config:
    """Configuration settings for llmcompare."""

    history_path: Path = field(default_factory=lambda: DEFAULT_HISTORY_PATH)
    model: str = "gpt-4o-mini"
    temperature: Optional[float] = 0.7
    theme: str = "manhattan"
    debug: bool = False  # Show tracebacks on unexpected errors


class SessionRecord(BaseModel):
    """One completed comparison, as stored in the history file."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    selector_text: str = Field(alias="selectorText")
    file_path1: str = Field(alias="filePath1")
    file_path2: str = Field(alias="filePath2")
    task_prompt: str = Field(default="", alias="taskPrompt")
    timestamp: str


class HistoryData(BaseModel):
    """The persisted history document.

    Field aliases are the on-disk JSON names.
    """
    model_config = ConfigDict(populate_by_name=True)

    open_ai_api_key: Optional[str] = Field(default=None, alias="openAiApiKey")
    raw_texts_used: List[str] = Field(default_factory=list, alias="rawTextsUsed")
    sessions: List[SessionRecord] = Field(default_factory=list)

    def to_json_dict(self) -> dict:
        """Dump using the on-disk names, leaving out an absent API key."""
        data = self.model_dump(by_alias=True)
        if data.get("openAiApiKey") is None:
            data.pop("openAiApiKey", None)
        return data


class MessageRole(str, Enum):
    """Valid message roles."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A message in the conversation."""
    role: MessageRole
    content: str


class Conversation(BaseModel):
    """Ordered messages sent to the LLM in one request."""
    messages: List[Message] = Field(default_factory=list)

    def to_openai_messages(self) -> List[dict]:
        """Convert to the plain dicts the OpenAI SDK expects."""
        return [{"role": m.role.value, "content": m.content} for m in self.messages]
