# core/config_schema.py

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from pathlib import Path

from core.paths import STRUCT_LOG_FILE


class LoggingConfig(BaseModel):
    enabled: bool = False
    log_file: Path = STRUCT_LOG_FILE
    record_input: bool = False  # otherwise only the input length is logged

    def ensure_parent(self):
        self.log_file.parent.mkdir(parents=True, exist_ok=True)


class PromptConfig(BaseModel):
    separator: str = ": "
    empty_message: str = "Input must not be empty."
    invalid_message: str = "Invalid input."
    max_attempts: Optional[int] = Field(None, gt=0)
    logging: LoggingConfig = LoggingConfig()

    @field_validator("separator")
    def separator_single_line(cls, v):
        if "\n" in v or "\r" in v:
            raise ValueError("separator must not contain line breaks")
        return v

    @field_validator("empty_message", "invalid_message")
    def message_not_blank(cls, v):
        if not v.strip():
            raise ValueError("message must not be empty")
        return v
