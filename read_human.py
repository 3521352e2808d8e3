# read_human.py
"""
Getting data from a human, one line of input at a time.

Each function writes a question, reads a line and keeps asking until the
answer is usable. Only I/O problems (closed stream, read/write errors) are
raised; they are OSError subclasses, PromptIOError for end of input.

    name = read_string_nonempty("What is your name")
    age = read_custom_nonempty("How old are you", int)
    gender = read_choice("What is your gender", ["male", "female", "other"])

Every function takes keyword-only `adapter` (defaults to the console) and
`config` (a PromptConfig, see core.config_loader.load_config).
"""

from functools import partial
from typing import Optional, Sequence

from core import rules
from core.config_schema import PromptConfig
from core.errors import (
    AttemptsExhaustedError,
    EndOfInputError,
    ParseError,
    PromptIOError,
)
from core.prompt_loop import DEFAULT_CONFIG, read_value
from core.rules import Parser, T
from io_adapters.io_adapter import IOAdapter

__all__ = [
    "read_value",
    "read_string",
    "read_string_nonempty",
    "read_string_noquestion",
    "read_custom",
    "read_custom_nonempty",
    "read_custom_noquestion",
    "read_choice",
    "PromptIOError",
    "EndOfInputError",
    "AttemptsExhaustedError",
    "ParseError",
]


def read_string(question: str, *, adapter: Optional[IOAdapter] = None,
                config: Optional[PromptConfig] = None) -> str:
    """Get a line of text; the empty line is a valid answer."""
    return read_value(question, rules.any_string, adapter, config)


def read_string_nonempty(question: str, *, adapter: Optional[IOAdapter] = None,
                         config: Optional[PromptConfig] = None) -> str:
    """Get a line of text, asking again until it is not empty."""
    empty_message = (config or DEFAULT_CONFIG).empty_message
    rule = partial(rules.nonempty_string, empty_message=empty_message)
    return read_value(question, rule, adapter, config)


def read_string_noquestion(*, adapter: Optional[IOAdapter] = None,
                           config: Optional[PromptConfig] = None) -> Optional[str]:
    """Get a line without writing a question first. Empty text becomes None."""
    return read_value("", rules.optional_string, adapter, config)


def read_custom_nonempty(question: str, parser: Parser, *, adapter: Optional[IOAdapter] = None,
                         config: Optional[PromptConfig] = None) -> T:
    """
    Get a value built by `parser` from a non-empty line.

    `parser` is anything that turns a string into a value and raises
    ValueError (ParseError, TypeError) when it can't: int, float,
    Decimal, a class's from_str... On failure the parser's message is
    shown and the question asked again.
    """
    empty_message = (config or DEFAULT_CONFIG).empty_message
    return read_value(question, rules.custom_nonempty(parser, empty_message), adapter, config)


def read_custom(question: str, parser: Parser, *, adapter: Optional[IOAdapter] = None,
                config: Optional[PromptConfig] = None) -> Optional[T]:
    """Like read_custom_nonempty, but an empty answer returns None."""
    return read_value(question, rules.custom(parser), adapter, config)


def read_custom_noquestion(parser: Parser, *, adapter: Optional[IOAdapter] = None,
                           config: Optional[PromptConfig] = None) -> Optional[T]:
    return read_value("", rules.custom(parser), adapter, config)


def read_choice(question: str, options: Sequence[str], default: Optional[int] = None, *,
                adapter: Optional[IOAdapter] = None, config: Optional[PromptConfig] = None) -> int:
    """
    Let the user pick one of `options`; returns its zero-based index.

    The answer may be an option label (case-insensitive) or its displayed
    number. An empty answer selects `default` when one is given.

    Raises ValueError if `options` is empty or `default` is out of range.
    """
    rule = rules.choice(options, default)
    return read_value(rules.choice_question(question, options, default), rule, adapter, config)
