"""
Comparison session orchestration.

Runs the single linear flow of a ``compare`` invocation: load history,
make sure an API key is known, collect the user's answers, read both
files, stream the model's answer and record the session.
"""

import logging
from typing import Optional, TextIO

from ..core.exceptions import FileReadError, StreamError
from ..core.file_reader import read_input_file
from ..core.history import HistoryStore, record_session
from ..core.models import Config
from ..utils.console_base import ConsoleManager
from .llm import LLMClient
from .prompter import InteractivePrompter
from .prompts import build_conversation

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the File Comparison + LLM CLI!"


class CompareSession:
    """One interactive file comparison run."""

    def __init__(self, config: Config,
                 store: Optional[HistoryStore] = None,
                 prompter: Optional[InteractivePrompter] = None,
                 ui: Optional[ConsoleManager] = None,
                 client: Optional[LLMClient] = None,
                 out: Optional[TextIO] = None):
        """Wire the session's collaborators.

        Args:
            config: Run configuration
            store: History store (defaults to one at ``config.history_path``)
            prompter: Source of user answers
            ui: Console for status output
            client: LLM client handle; a fresh ``LLMClient`` when omitted
            out: Stream the model's tokens are written to (defaults to the console's file)
        """
        self.config = config
        self.ui = ui or ConsoleManager(theme=config.theme)
        self.store = store or HistoryStore(config.history_path)
        self.prompter = prompter or InteractivePrompter(self.ui)
        self.client = client or LLMClient()
        self.out = out or self.ui.file

    def run(self) -> bool:
        """Run the comparison flow.

        Returns:
            True if the session was recorded, False if it was aborted
            because a file could not be read or the LLM call failed.

        Raises:
            InitializationError: if no usable API key is available.
            OSError: if the history file cannot be written.
        """
        self.ui.print_banner(WELCOME_MESSAGE)

        history = self.store.load()

        if not history.open_ai_api_key:
            history.open_ai_api_key = self.prompter.ask_api_key()
            self.store.save(history)

        self.client.initialize(history.open_ai_api_key)

        selector_text = self.prompter.choose_selector(history)
        inputs = self.prompter.ask_comparison_inputs()

        try:
            content1 = read_input_file(inputs.file_path1)
        except FileReadError as e:
            self.ui.print_error(f"Could not read first file: {e}")
            return False

        try:
            content2 = read_input_file(inputs.file_path2)
        except FileReadError as e:
            self.ui.print_error(f"Could not read second file: {e}")
            return False

        conversation = build_conversation(content1, content2, inputs.task_prompt)

        self.ui.print_section("LLM Response (streaming)")
        try:
            response = self.client.send_with_stream(
                conversation,
                model=self.config.model,
                temperature=self.config.temperature,
                out=self.out,
            )
        except StreamError as e:
            logger.debug("LLM call failed", exc_info=True)
            self.ui.print_error(f"Error calling LLM: {e}")
            return False

        self.ui.print()
        self.ui.print_section("LLM Response (complete)")
        self.out.write(response + "\n")
        self.out.flush()

        record = record_session(
            history,
            selector_text=selector_text,
            file_path1=inputs.file_path1,
            file_path2=inputs.file_path2,
            task_prompt=inputs.task_prompt,
        )
        self.store.save(history)
        logger.debug(f"Recorded session {record.id}")

        self.ui.print()
        self.ui.print_success("Session saved. Goodbye!")
        return True
