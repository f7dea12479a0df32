"""Utility modules for llmcompare."""

from .console_base import ConsoleManager, StatusType, THEMES

__all__ = ["ConsoleManager", "StatusType", "THEMES"]
