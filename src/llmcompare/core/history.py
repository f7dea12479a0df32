"""Local JSON history store.

The history file holds the OpenAI API key, the selector texts the user has
entered before and an append-only log of completed sessions.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .models import HistoryData, SessionRecord

logger = logging.getLogger(__name__)


class HistoryStore:
    """Loads and saves the history document at a fixed path."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> HistoryData:
        """Load the history file, or return an empty default.

        Never raises: a missing, unreadable or malformed file yields
        ``HistoryData()``.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return HistoryData()
        except OSError as e:
            logger.warning(f"Could not read history file {self.path}: {e}")
            return HistoryData()

        try:
            return HistoryData.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring malformed history file {self.path}: {e}")
            return HistoryData()

    def save(self, history: HistoryData) -> None:
        """Overwrite the history file with pretty-printed JSON.

        Write errors propagate to the caller.
        """
        payload = json.dumps(history.to_json_dict(), indent=2, ensure_ascii=False)
        self.path.write_text(payload, encoding="utf-8")
        logger.debug(f"History saved to {self.path}")


def next_session_id(history: HistoryData) -> int:
    """Id for the next session record.

    ``len(sessions) + 1`` for an untouched file; skips past any larger id
    left behind by manual edits.
    """
    highest = max((s.id for s in history.sessions), default=0)
    return max(len(history.sessions), highest) + 1


def utc_timestamp() -> str:
    """Current instant as ISO-8601 UTC with milliseconds, e.g. 2026-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def record_session(history: HistoryData, selector_text: str, file_path1: str,
                   file_path2: str, task_prompt: str) -> SessionRecord:
    """Append a session record to ``history`` and return it."""
    record = SessionRecord(
        id=next_session_id(history),
        selector_text=selector_text,
        file_path1=file_path1,
        file_path2=file_path2,
        task_prompt=task_prompt,
        timestamp=utc_timestamp(),
    )
    history.sessions.append(record)
    return record
