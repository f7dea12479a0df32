"""Tests for the JSON history store."""

import json
import logging
import re

import pytest

from llmcompare.core.history import HistoryStore, next_session_id, record_session, utc_timestamp
from llmcompare.core.models import HistoryData, SessionRecord


def _session(id, selector="demo"):
    return SessionRecord(
        id=id,
        selector_text=selector,
        file_path1="a.txt",
        file_path2="b.txt",
        task_prompt="",
        timestamp="2026-01-01T00:00:00.000Z",
    )


class TestHistoryLoad:
    """Loading falls back to defaults instead of raising."""

    def test_missing_file_yields_default(self, history_path):
        history = HistoryStore(history_path).load()
        assert history.open_ai_api_key is None
        assert history.raw_texts_used == []
        assert history.sessions == []

    def test_invalid_json_yields_default(self, history_path, caplog):
        history_path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            history = HistoryStore(history_path).load()
        assert history == HistoryData()
        assert "malformed history file" in caplog.text

    @pytest.mark.parametrize("data", [
        [],
        None,
        {"rawTextsUsed": "not a list"},
        {"sessions": [{"id": "x"}]},
    ])
    def test_wrong_shape_yields_default(self, write_history, history_path, data):
        write_history(data)
        assert HistoryStore(history_path).load() == HistoryData()

    def test_reads_existing_document(self, write_history, history_path):
        write_history({
            "openAiApiKey": "sk-test",
            "rawTextsUsed": ["one", "two"],
            "sessions": [{
                "id": 1, "selectorText": "one", "filePath1": "a.txt",
                "filePath2": "b.txt", "taskPrompt": "diff it",
                "timestamp": "2026-01-01T00:00:00.000Z",
            }],
        })
        history = HistoryStore(history_path).load()
        assert history.open_ai_api_key == "sk-test"
        assert history.raw_texts_used == ["one", "two"]
        assert history.sessions[0].task_prompt == "diff it"


class TestHistorySave:
    """Saving writes the on-disk JSON shape."""

    def test_save_then_load_round_trip(self, history_path):
        store = HistoryStore(history_path)
        history = HistoryData(
            open_ai_api_key="sk-test",
            raw_texts_used=["demo", "demo", "ünïcode"],
            sessions=[_session(1), _session(2, selector="")],
        )
        store.save(history)
        assert store.load() == history

    def test_uses_camel_case_names_and_two_space_indent(self, history_path):
        store = HistoryStore(history_path)
        store.save(HistoryData(open_ai_api_key="sk-test", sessions=[_session(1)]))

        text = history_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "openAiApiKey": "sk-test"')
        data = json.loads(text)
        assert set(data) == {"openAiApiKey", "rawTextsUsed", "sessions"}
        assert set(data["sessions"][0]) == {
            "id", "selectorText", "filePath1", "filePath2", "taskPrompt", "timestamp"
        }

    def test_absent_key_is_omitted(self, history_path):
        HistoryStore(history_path).save(HistoryData())
        data = json.loads(history_path.read_text(encoding="utf-8"))
        assert data == {"rawTextsUsed": [], "sessions": []}

    def test_write_failure_propagates(self, temp_workspace):
        store = HistoryStore(temp_workspace / "missing-dir" / "history.json")
        with pytest.raises(OSError):
            store.save(HistoryData())


class TestSessionRecords:
    """Session id and timestamp bookkeeping."""

    def test_id_follows_list_length(self):
        history = HistoryData(sessions=[_session(1), _session(2)])
        assert next_session_id(history) == 3

    def test_first_id_is_one(self):
        assert next_session_id(HistoryData()) == 1

    def test_id_skips_past_edited_ids(self):
        # Record 2 was deleted by hand, leaving ids 1 and 3
        history = HistoryData(sessions=[_session(1), _session(3)])
        assert next_session_id(history) == 4

    def test_record_session_appends(self):
        history = HistoryData(sessions=[_session(1), _session(2)])
        record = record_session(history, "demo", "foo.txt", "bar.txt", "")
        assert record.id == 3
        assert history.sessions[-1] is record
        assert record.file_path1 == "foo.txt"

    def test_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())
