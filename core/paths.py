# core/paths.py

import os
from pathlib import Path

# Base directory for all persistent data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Optional JSON config
DEFAULT_CONFIG_PATH = Path("config/read_human.json")
DEFAULT_ENV_PATH = Path("secrets/.env")

# Structured logging NDJSON file; rotated files go to an "archived" dir beside it
STRUCT_LOG_DIR  = BASE_DATA_DIR / "logs"
STRUCT_LOG_FILE = STRUCT_LOG_DIR / "prompts.ndjson"
