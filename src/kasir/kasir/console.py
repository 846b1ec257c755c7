"""Line-based terminal I/O used by the ordering and payment loops."""

from typing import Protocol


class Console(Protocol):
    """Prompt/print capabilities the interactive loops depend on.

    ``prompt`` raises ``EOFError`` once the input source is exhausted.
    """

    def prompt(self, text: str) -> str: ...

    def emit(self, text: str) -> None: ...


class TerminalConsole:
    """Console backed by stdin/stdout."""

    def prompt(self, text: str) -> str:
        print(text)
        return input()

    def emit(self, text: str) -> None:
        print(text)
