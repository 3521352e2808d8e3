# utils/structured_logger.py

import json
from pathlib import Path
from datetime import datetime, timezone
import threading
import shutil

from core.paths import STRUCT_LOG_FILE

ARCHIVE_DIR_NAME = "archived"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB before rotation

_lock = threading.Lock()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _rotate_if_needed(log_file: Path):
    try:
        if log_file.exists() and log_file.stat().st_size >= MAX_BYTES:
            archive_dir = log_file.parent / ARCHIVE_DIR_NAME
            archive_dir.mkdir(parents=True, exist_ok=True)
            timestamp = _utcnow().strftime("%Y%m%dT%H%M%S%fZ")
            archived = archive_dir / f"{log_file.stem}_{timestamp}{log_file.suffix}"
            shutil.move(str(log_file), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def log_event(call_id: str, step: str, input_data=None, output_data=None, outcome: str = "ok",
              extra: dict | None = None, log_file: Path = STRUCT_LOG_FILE):
    """
    Appends a structured event as a single line JSON (NDJSON). Thread-safe.
    """
    entry = {
        "call_id": call_id,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": _utcnow().isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    with _lock:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _rotate_if_needed(log_file)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def describe_input(raw: str, record_input: bool):
    """
    What the log keeps of a raw answer: the text itself, or only its length.
    """
    if record_input:
        return raw
    return {"length": len(raw)}


def read_events(call_id: str = None, limit: int = 100, log_file: Path = STRUCT_LOG_FILE):
    """
    Reads the last `limit` events, optionally filtered by call_id.
    """
    if not log_file.exists():
        return []

    results = []
    with open(log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if call_id is None or obj.get("call_id") == call_id:
                results.append(obj)
    return results[-limit:]
