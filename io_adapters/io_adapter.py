# io_adapters/io_adapter.py

from abc import ABC, abstractmethod


class IOAdapter(ABC):
    """
    The two stream capabilities the prompt loop needs:
      - read_line(): next line of text, terminator included, or None at end of stream
      - write(text): emit text without adding a newline; visible before the next read
    """

    @abstractmethod
    def read_line(self) -> str | None:
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        ...

    def say(self, message: str) -> None:
        # Diagnostic line shown to the user
        self.write(message + "\n")
