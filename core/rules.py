# core/rules.py
"""
Validation rules for the prompt loop.

A rule is any callable taking the stripped line and returning the parsed
value, or raising ValidationFailure with the text to show the user before
asking again.
"""

from decimal import InvalidOperation
from typing import Callable, Optional, Sequence, TypeVar

from core.errors import ParseError, ValidationFailure

T = TypeVar("T")

Rule = Callable[[str], T]
Parser = Callable[[str], T]

EMPTY_MESSAGE = "Input must not be empty."
PARSE_ERRORS = (ValueError, TypeError, InvalidOperation, ParseError)


def any_string(raw: str) -> str:
    return raw


def nonempty_string(raw: str, empty_message: str = EMPTY_MESSAGE) -> str:
    if raw == "":
        raise ValidationFailure(empty_message)
    return raw


def optional_string(raw: str) -> Optional[str]:
    return raw if raw != "" else None


def _parse(raw: str, parser: Parser):
    try:
        return parser(raw)
    except PARSE_ERRORS as e:
        detail = str(e).strip()
        if detail:
            raise ValidationFailure(f"{raw} is not valid: {detail}") from e
        raise ValidationFailure(f"{raw} is not valid") from e


def custom_nonempty(parser: Parser, empty_message: str = EMPTY_MESSAGE) -> Rule:
    """
    Rule that rejects empty lines, then hands the line to `parser`
    (e.g. int, float, Decimal, or a class's from_str). A ValueError,
    TypeError, InvalidOperation or ParseError from the parser becomes a
    re-prompt carrying the parser's message.
    """
    def rule(raw: str):
        nonempty_string(raw, empty_message)
        return _parse(raw, parser)
    return rule


def custom(parser: Parser) -> Rule:
    """Like custom_nonempty, but an empty line is accepted as None."""
    def rule(raw: str):
        if raw == "":
            return None
        return _parse(raw, parser)
    return rule


def check_choice_args(options: Sequence[str], default: Optional[int]):
    if not options:
        raise ValueError("options must not be empty")
    if default is not None and not 0 <= default < len(options):
        raise ValueError("default index must be in the options list")


def format_options(options: Sequence[str]) -> str:
    return ", ".join(f'"{option}"' for option in options)


def choice_question(question: str, options: Sequence[str], default: Optional[int] = None) -> str:
    """
    Renders e.g. 'What is your gender [1: "male", 2: "female"] (default: 1)'.
    """
    listed = ", ".join(f'{idx + 1}: "{option}"' for idx, option in enumerate(options))
    text = f"{question} [{listed}]" if question else f"[{listed}]"
    if default is not None:
        text += f" (default: {default + 1})"
    return text


def choice(options: Sequence[str], default: Optional[int] = None) -> Rule:
    """
    Rule resolving a line to a zero-based option index.

    Empty input picks `default` when given. Otherwise the trimmed input is
    compared case-insensitively with each label, first match in list order
    winning; a displayed option number (1-based) is accepted after that.
    """
    check_choice_args(options, default)
    folded = [option.casefold() for option in options]

    def rule(raw: str) -> int:
        answer = raw.strip()
        if answer == "" and default is not None:
            return default

        wanted = answer.casefold()
        for idx, label in enumerate(folded):
            if label == wanted:
                return idx

        if answer.isdecimal():
            number = int(answer)
            if 1 <= number <= len(options):
                return number - 1

        raise ValidationFailure(
            f'"{answer}" is not a valid option. Choose one of: {format_options(options)}'
        )
    return rule
