"""Prompt text and conversation construction for file comparison."""

from ..core.models import Conversation, Message, MessageRole


SYSTEM_PROMPT = "You are a helpful assistant that compares two files and provides insights."

DEFAULT_TASK = "Compare and analyze the differences."


def build_user_prompt(content1: str, content2: str, task_prompt: str = "") -> str:
    """Embed both file contents and the task into the user message.

    An empty task falls back to ``DEFAULT_TASK``.
    """
    task = task_prompt or DEFAULT_TASK
    return f"""
I have two files.

File 1 Content:
{content1}

File 2 Content:
{content2}

Task: {task}
"""


def build_conversation(content1: str, content2: str, task_prompt: str = "") -> Conversation:
    """Build the fixed two-message conversation sent to the model.

    The selector text is bookkeeping only and is never part of it.
    """
    return Conversation(messages=[
        Message(role=MessageRole.SYSTEM, content=SYSTEM_PROMPT),
        Message(role=MessageRole.USER, content=build_user_prompt(content1, content2, task_prompt)),
    ])
