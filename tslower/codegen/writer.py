"""Indentation-aware line buffer."""

from collections.abc import Iterator
from contextlib import contextmanager


class LineWriter:
    def __init__(self, indent: str = "    ") -> None:
        self._indent = indent
        self._depth = 0
        self._lines: list[str] = []

    def line(self, text: str) -> None:
        self._lines.append(f"{self._indent * self._depth}{text}")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def finish(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)
