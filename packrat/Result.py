from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .Position import ParseError

T = TypeVar('T')  # Generic type for success values
U = TypeVar('U')


class Result(ABC, Generic[T]):
    """Outcome of a parse step: either Ok(value) or Err(error)."""
    value: Any

    @property
    @abstractmethod
    def is_error(self) -> bool:
        ...

    @staticmethod
    def of(value: T) -> 'Ok[T]':
        return Ok(value)

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Result[U]':
        ...

    @abstractmethod
    def chain(self, f: Callable[[T], Any]) -> Any:
        ...


@dataclass(frozen=True)
class Ok(Result[T]):
    value: T

    @property
    def is_error(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> 'Ok[U]':
        return Ok(f(self.value))

    # Monadic bind (>>=)
    def chain(self, f: Callable[[T], Any]) -> Any:
        return f(self.value)


@dataclass(frozen=True)
class Err(Result[Any]):
    value: ParseError

    @property
    def is_error(self) -> bool:
        return True

    # Branching on failure belongs to Parser.either; Err passes through.
    def map(self, f: Callable[[Any], Any]) -> 'Err':
        return self

    def chain(self, f: Callable[[Any], Any]) -> 'Err':
        return self
