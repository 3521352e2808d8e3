# core/config_loader.py

import json
import os
from pathlib import Path
from dotenv import load_dotenv
from core.config_schema import PromptConfig
from core.paths import DEFAULT_CONFIG_PATH, DEFAULT_ENV_PATH

_TRUTHY = {"1", "true", "yes", "on"}


def load_raw_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path.resolve()}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def apply_env_overrides(raw: dict) -> dict:
    """
    Layers READ_HUMAN_* environment variables over the file values.
    """
    separator = os.getenv("READ_HUMAN_SEPARATOR")
    if separator is not None:
        raw["separator"] = separator

    log_flag = os.getenv("READ_HUMAN_LOG")
    log_file = os.getenv("READ_HUMAN_LOG_FILE")
    if log_flag is not None or log_file:
        logging_raw = dict(raw.get("logging") or {})
        if log_flag is not None:
            logging_raw["enabled"] = log_flag.strip().lower() in _TRUTHY
        if log_file:
            logging_raw["log_file"] = log_file
        raw["logging"] = logging_raw
    return raw


def load_config(path: Path | str | None = None) -> PromptConfig:
    """
    Loads .env, then the JSON config (explicit path, READ_HUMAN_CONFIG, or
    config/read_human.json if present), applies environment overrides and
    validates the result. With no config file at all the defaults are used.
    """
    # Load .env early so any env overrides are present
    if DEFAULT_ENV_PATH.exists():
        load_dotenv(dotenv_path=DEFAULT_ENV_PATH)
    else:
        load_dotenv()

    if path is None:
        path = os.getenv("READ_HUMAN_CONFIG") or None

    if path is not None:
        raw = load_raw_config(Path(path))
    elif DEFAULT_CONFIG_PATH.exists():
        raw = load_raw_config(DEFAULT_CONFIG_PATH)
    else:
        raw = {}

    raw = apply_env_overrides(raw)

    try:
        config = PromptConfig(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e

    if config.logging.enabled:
        config.logging.ensure_parent()
    return config
