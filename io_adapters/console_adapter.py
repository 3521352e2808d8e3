# io_adapters/console_adapter.py

import sys
from typing import TextIO

from io_adapters.io_adapter import IOAdapter


class StreamAdapter(IOAdapter):
    """
    IO adapter over a pair of text streams:
      - read_line(): one readline() from input_stream; "" (end of file) becomes None
      - write(text): writes text to output_stream and flushes, so prompts show
                     before the read blocks
    """

    def __init__(self, input_stream: TextIO, output_stream: TextIO):
        self.input_stream = input_stream
        self.output_stream = output_stream

    def read_line(self) -> str | None:
        line = self.input_stream.readline()
        if line == "":
            return None
        return line

    def write(self, text: str) -> None:
        self.output_stream.write(text)
        self.output_stream.flush()


class ConsoleAdapter(StreamAdapter):
    """Command-line adapter bound to the process stdin/stdout."""

    def __init__(self):
        super().__init__(sys.stdin, sys.stdout)
