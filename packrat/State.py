from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from .Config import DEFAULT_CONFIG, ParserConfig
from .Memo import MemoTable
from .Position import Position

R = TypeVar('R')
Input = TypeVar('Input', bound=Sequence[Any])


@dataclass(frozen=True)
class State(Generic[Input]):
    """Immutable cursor over an input: the whole input plus the current offset.

    Every transition returns a new State. The config and the optional packrat
    table travel with the cursor but take no part in equality.
    """
    input: Input
    index: int = 0
    config: ParserConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)
    memo: Optional[MemoTable] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not 0 <= self.index <= len(self.input):
            msg = f"Index must be within 0..{len(self.input)}, got {self.index}"
            raise ValueError(msg)

    @classmethod
    def of(cls, input: Input, index: int = 0,
           config: Optional[ParserConfig] = None,
           memo: Optional[MemoTable] = None) -> 'State[Input]':
        return cls(input, index, config or DEFAULT_CONFIG, memo)

    @property
    def length(self) -> int:
        """Number of elements left after the cursor."""
        return len(self.input) - self.index

    @property
    def at_end(self) -> bool:
        return self.length == 0

    def slice(self, start: int, end: Optional[int] = None) -> Input:
        """Slice relative to the cursor: [index+start, index+end) or to the end."""
        if end is None:
            return self.input[self.index + start:]
        return self.input[self.index + start:self.index + end]

    def consume(self, size: int) -> Optional[Input]:
        """The next `size` elements, or None when fewer than `size` remain."""
        if size < 0:
            msg = f"Cannot consume a negative size, got {size}"
            raise ValueError(msg)
        if size > self.length:
            return None
        return self.slice(0, size)

    def skip(self, count: int) -> 'State[Input]':
        if count < 0:
            msg = f"Cannot skip a negative count, got {count}"
            raise ValueError(msg)
        return State(self.input, self.index + count, self.config, self.memo)

    def chain(self, f: Callable[[Any, 'State[Input]'], R]) -> R:
        """Take one element and hand it, with the advanced state, to `f`.

        At end of input `f` gets None and this same state.
        """
        consumed = self.consume(1)
        if consumed is None:
            return f(None, self)
        return f(consumed[0], self.skip(1))

    def position(self) -> Position:
        return Position(self.input, self.index, self.config)
