# core/errors.py


class PromptIOError(OSError):
    """
    Raised when the prompt loop cannot continue because of the underlying
    stream. Never retried.
    """


class EndOfInputError(PromptIOError):
    def __init__(self, message: str = "input stream closed before an answer was given"):
        super().__init__(message)


class AttemptsExhaustedError(PromptIOError):
    def __init__(self, attempts: int):
        super().__init__(f"no valid answer after {attempts} attempts")
        self.attempts = attempts


class ValidationFailure(Exception):
    """
    Internal signal from a validation rule. The loop turns it into a
    re-prompt; it never reaches the caller of read_value.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ParseError(ValueError):
    """Base class user parsers may raise to report a descriptive failure."""
