# core/prompt_loop.py

import uuid
from typing import Optional

from core.config_schema import PromptConfig
from core.errors import AttemptsExhaustedError, EndOfInputError, ValidationFailure
from core.rules import Rule, T
from io_adapters.console_adapter import ConsoleAdapter
from io_adapters.io_adapter import IOAdapter
from utils.structured_logger import describe_input, log_event

DEFAULT_CONFIG = PromptConfig()


def strip_line_terminator(line: str) -> str:
    return line.rstrip("\r\n")


class PromptLoop:
    """
    Writes the prompt, reads a line, applies the rule; repeats on
    ValidationFailure until the rule accepts a line. Stream failures
    end the loop at once.
    """

    def __init__(self, adapter: Optional[IOAdapter] = None, config: Optional[PromptConfig] = None):
        self.adapter = adapter or ConsoleAdapter()
        self.config = config or DEFAULT_CONFIG
        self.call_id = str(uuid.uuid4())

    def _log(self, step: str, input_data=None, output_data=None, outcome: str = "ok", extra: dict | None = None):
        if not self.config.logging.enabled:
            return
        log_event(self.call_id, step, input_data=input_data, output_data=output_data,
                  outcome=outcome, extra=extra, log_file=self.config.logging.log_file)

    def _show_prompt(self, prompt: str):
        if prompt:
            self.adapter.write(prompt + self.config.separator)

    def _read(self) -> str:
        line = self.adapter.read_line()
        if line is None:
            raise EndOfInputError()
        return strip_line_terminator(line)

    def run(self, prompt: str, rule: Rule) -> T:
        attempts = 0
        self._log("prompt", output_data=prompt)
        while True:
            if self.config.max_attempts is not None and attempts >= self.config.max_attempts:
                error = AttemptsExhaustedError(attempts)
                self._log("io_error", outcome="error", extra={"error": str(error), "attempts": attempts})
                raise error
            attempts += 1

            try:
                self._show_prompt(prompt)
                raw = self._read()
            except OSError as e:
                self._log("io_error", outcome="error", extra={"error": repr(e), "attempts": attempts})
                raise

            try:
                value = rule(raw)
            except ValidationFailure as failure:
                message = failure.message or self.config.invalid_message
                self._log("rejected", input_data=describe_input(raw, self.config.logging.record_input),
                          output_data=message, outcome="retry", extra={"attempt": attempts})
                self.adapter.say(message)
                continue

            self._log("accepted", input_data=describe_input(raw, self.config.logging.record_input),
                      extra={"attempt": attempts})
            return value


def read_value(prompt: str, rule: Rule, adapter: Optional[IOAdapter] = None,
               config: Optional[PromptConfig] = None) -> T:
    """
    Prompt-and-validate loop. Returns the first value `rule` accepts;
    raises PromptIOError (or the stream's own OSError) when input cannot
    be read.
    """
    return PromptLoop(adapter, config).run(prompt, rule)
