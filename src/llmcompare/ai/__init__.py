"""LLM-backed file comparison for llmcompare.

This package holds the interactive prompts, the OpenAI streaming client
and the session flow that ties them to the history store.
"""

from .llm import LLMClient
from .prompter import InteractivePrompter, ComparisonInputs, selector_choices, NEW_TEXT_CHOICE
from .prompts import build_conversation, build_user_prompt, SYSTEM_PROMPT, DEFAULT_TASK
from .session import CompareSession

__all__ = [
    # LLM interaction
    'LLMClient',

    # Prompting
    'InteractivePrompter',
    'ComparisonInputs',
    'selector_choices',
    'NEW_TEXT_CHOICE',
    'build_conversation',
    'build_user_prompt',
    'SYSTEM_PROMPT',
    'DEFAULT_TASK',

    # Session flow
    'CompareSession',
]
