"""Interactive questions asked before a comparison run.

All questions go through ``rich.prompt.Prompt`` and block until answered.
No validation happens here beyond trimming where noted; bad paths or keys
fail later, when they are used.
"""

from dataclasses import dataclass
from typing import List, Optional

from rich.prompt import Prompt

from ..core.models import HistoryData
from ..utils.console_base import ConsoleManager


NEW_TEXT_CHOICE = "Enter new text"
SEPARATOR = "──────────────"


@dataclass
class ComparisonInputs:
    """Answers to the file-path/task batch."""
    file_path1: str
    file_path2: str
    task_prompt: str = ""


def selector_choices(raw_texts: List[str]) -> List[str]:
    """Options of the selector list: stored texts in order, then the sentinel."""
    return [*raw_texts, NEW_TEXT_CHOICE]


class InteractivePrompter:
    """Asks the user for the API key, selector text, file paths and task."""

    def __init__(self, ui: Optional[ConsoleManager] = None):
        self.ui = ui or ConsoleManager()

    def _ask(self, message: str, **kwargs) -> str:
        return Prompt.ask(f"[prompt]?[/prompt] {message}", console=self.ui.console, **kwargs)

    def ask_api_key(self) -> str:
        """Ask for the OpenAI API key; returns it trimmed."""
        return self._ask("Please enter your OpenAI API key:", password=True).strip()

    def choose_selector(self, history: HistoryData) -> str:
        """Pick a stored selector text or enter a new one.

        A new, non-blank text is appended to ``history.raw_texts_used``
        (not persisted here). A blank one is still returned for this
        session.
        """
        choices = selector_choices(history.raw_texts_used)

        self.ui.print("[prompt]?[/prompt] Select step or enter a new one:")
        for i, choice in enumerate(choices, 1):
            if i == len(choices) and len(choices) > 1:
                self.ui.print(f"    {SEPARATOR}", style="dim")
            self.ui.print(f"    {i:2d}. {choice}", markup=False)

        selection = self._ask(
            "Your choice",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            default=str(len(choices)),
            show_choices=False,
        )
        index = int(selection) - 1

        if index != len(choices) - 1:
            return choices[index]

        selector_text = self._ask("Enter the raw text for this step:", default="", show_default=False)
        if selector_text.strip():
            history.raw_texts_used.append(selector_text)
        return selector_text

    def ask_comparison_inputs(self) -> ComparisonInputs:
        """Ask for both file paths and the optional task instruction."""
        file_path1 = self._ask("Enter the absolute path of the first file:", default="", show_default=False)
        file_path2 = self._ask("Enter the absolute path of the second file:", default="", show_default=False)
        task_prompt = self._ask(
            "(Optional) Enter the LLM task or prompt (press enter to skip):",
            default="",
            show_default=False,
        )
        return ComparisonInputs(file_path1=file_path1, file_path2=file_path2, task_prompt=task_prompt)
