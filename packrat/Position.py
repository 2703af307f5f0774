from dataclasses import dataclass, field
from typing import Any, List, Sequence

from .Config import DEFAULT_CONFIG, ParserConfig


def _normalize(text: Sequence[Any]) -> Sequence[Any]:
    # A \r\n pair counts as a single line break.
    if isinstance(text, str):
        return text.replace("\r\n", "\n")
    return text


@dataclass(frozen=True)
class Position:
    """Line/column view of an index into the input, used for diagnostics."""
    input: Sequence[Any]
    index: int
    config: ParserConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    def as_lines(self, start: int, end: int) -> List[Sequence[Any]]:
        """Split input[start:end] on line breaks. Non-text input is one line."""
        chunk = self.input[start:end]
        if isinstance(chunk, str):
            return _normalize(chunk).split("\n")
        return [chunk]

    def line(self) -> int:
        return len(self.as_lines(0, self.index))

    def column(self) -> int:
        return len(self.as_lines(0, self.index)[-1]) + 1

    def context(self, depth: int) -> List[Sequence[Any]]:
        """Lines from `line - depth` to `line + depth` (1-based, clipped)."""
        lines = self.as_lines(0, len(self.input))
        current = self.line() - 1
        start = max(0, current - depth)
        end = min(len(lines), current + depth + 1)
        return lines[start:end]

    def __str__(self) -> str:
        if len(self.input) == 0:
            return ""

        line, column = self.line(), self.column()
        depth = self.config.context_depth
        window = self.context(depth)
        at = (line - 1) - max(0, line - 1 - depth)
        error_line = window[at]

        header = f"line {line}, column {column}:"
        if self.config.source_name:
            header = f"{self.config.source_name} {header}"

        out = [header]
        out.extend(_show(l) for l in window[:at])
        out.append(_show(error_line))
        out.append(" " * _caret_offset(error_line, column) + self.config.marker)
        out.extend(_show(l) for l in window[at + 1:])
        return "\n".join(out)


def _show(line: Sequence[Any]) -> str:
    if isinstance(line, str):
        return line
    return " ".join(str(tok) for tok in line)


def _caret_offset(line: Sequence[Any], column: int) -> int:
    # Token lines are rendered space-separated; skip the rendered tokens before the column.
    if isinstance(line, str) or column == 1:
        return column - 1
    return len(_show(line[:column - 1])) + 1


@dataclass(frozen=True)
class ParseError:
    """A failure message paired with where it happened."""
    message: str
    position: Position

    @classmethod
    def of(cls, message: str, position: Position) -> 'ParseError':
        return cls(message, position)

    def __str__(self) -> str:
        return f"Parser Exception: {self.message}\n{self.position}"
