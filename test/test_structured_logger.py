# test/test_structured_logger.py

import pytest

import read_human
from core.config_schema import LoggingConfig, PromptConfig
from utils import structured_logger
from utils.structured_logger import log_event, read_events
from scripted_adapter import ScriptedAdapter


def logging_config(tmp_path, record_input=False) -> PromptConfig:
    return PromptConfig(logging=LoggingConfig(
        enabled=True, log_file=tmp_path / "logs" / "prompts.ndjson", record_input=record_input,
    ))


def test_prompt_events_are_logged(tmp_path):
    config = logging_config(tmp_path)
    adapter = ScriptedAdapter(["", "secret"])
    read_human.read_string_nonempty("Password", adapter=adapter, config=config)

    events = read_events(log_file=config.logging.log_file)
    assert [e["step"] for e in events] == ["prompt", "rejected", "accepted"]
    assert len({e["call_id"] for e in events}) == 1
    assert events[1]["outcome"] == "retry"
    assert events[1]["output"] == "Input must not be empty."
    assert events[2]["input"] == {"length": 6}


def test_raw_input_recorded_when_enabled(tmp_path):
    config = logging_config(tmp_path, record_input=True)
    read_human.read_custom_nonempty("Age", int, adapter=ScriptedAdapter(["30"]), config=config)
    events = read_events(log_file=config.logging.log_file)
    assert events[-1]["input"] == "30"


def test_io_error_logged(tmp_path):
    config = logging_config(tmp_path)
    with pytest.raises(read_human.EndOfInputError):
        read_human.read_string("Q", adapter=ScriptedAdapter([]), config=config)
    events = read_events(log_file=config.logging.log_file)
    assert events[-1]["step"] == "io_error"
    assert events[-1]["outcome"] == "error"


def test_nothing_logged_by_default(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("logging is disabled")

    monkeypatch.setattr("core.prompt_loop.log_event", fail)
    assert read_human.read_string("Q", adapter=ScriptedAdapter(["a"])) == "a"


def test_read_events_filter_and_limit(tmp_path):
    log_file = tmp_path / "events.ndjson"
    for i in range(5):
        log_event("a" if i % 2 else "b", f"step{i}", log_file=log_file)
    with open(log_file, "a", encoding="utf-8") as f:
        f.write("not json\n")

    assert [e["step"] for e in read_events("a", log_file=log_file)] == ["step1", "step3"]
    assert [e["step"] for e in read_events(limit=2, log_file=log_file)] == ["step3", "step4"]
    assert read_events(log_file=tmp_path / "missing.ndjson") == []


def test_rotation(tmp_path, monkeypatch):
    monkeypatch.setattr(structured_logger, "MAX_BYTES", 10)
    log_file = tmp_path / "events.ndjson"
    log_event("c", "first", log_file=log_file)
    log_event("c", "second", log_file=log_file)

    archived = list((tmp_path / "archived").glob("events_*.ndjson"))
    assert len(archived) == 1
    assert [e["step"] for e in read_events(log_file=log_file)] == ["second"]
