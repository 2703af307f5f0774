from typing import TYPE_CHECKING, Any, Callable, Hashable, Sequence

if TYPE_CHECKING:
    from .Parser import Parser


class Predicate:
    """A test on one input element that can describe itself in failure messages."""

    def __init__(self, test: Callable[[Any], bool], description: str):
        self.test = test
        self.description = description

    def __call__(self, value: Any) -> bool:
        return self.test(value)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Predicate({self.description!r})"


def _show(items: Sequence[Any]) -> str:
    """Render a char set or text the way it appears in messages."""
    if isinstance(items, str):
        return items
    if all(isinstance(x, str) for x in items):
        return "".join(items)
    return repr(items)


def _show_one(c: Any) -> str:
    return c if isinstance(c, str) else repr(c)


def _key(items: Any) -> Hashable:
    """Memo key for a matcher argument; the type is part of the key."""
    if isinstance(items, (list, tuple)):
        return (type(items).__name__,) + tuple(_key(x) for x in items)
    if isinstance(items, (set, frozenset)):
        return (type(items).__name__, frozenset(_key(x) for x in items))
    return (type(items).__name__, items)


def _contains(cs: Sequence[Any], x: Any) -> bool:
    # A text set only holds single characters.
    if isinstance(cs, str):
        return isinstance(x, str) and len(x) == 1 and x in cs
    return x in cs


# Predicate builders
def equal_to(c: Any) -> Predicate:
    return Predicate(lambda x: x == c, f'"{_show_one(c)}"')


def member_of(cs: Sequence[Any]) -> Predicate:
    return Predicate(lambda x: _contains(cs, x), f'one of "{_show(cs)}"')


def not_member_of(cs: Sequence[Any]) -> Predicate:
    return Predicate(lambda x: not _contains(cs, x), f'none of "{_show(cs)}"')


# 1. char: Parses a single element equal to c
def char(parser: 'Parser', c: Any) -> 'Parser':
    """Parses the element c and returns it."""
    return parser.memoized(
        ("char", _key(c)),
        lambda: parser.satisfy(equal_to(c)).label(f'Expected "{_show_one(c)}"'),
    )


# 2. oneOf: Parses any element in cs
def one_of(parser: 'Parser', cs: Sequence[Any]) -> 'Parser':
    """Succeeds if the next element is in cs. Returns the parsed element."""
    return parser.memoized(
        ("one_of", _key(cs)),
        lambda: parser.satisfy(member_of(cs)).label(f'Expected one of "{_show(cs)}"'),
    )


# 3. noneOf: Parses any element not in cs
def none_of(parser: 'Parser', cs: Sequence[Any]) -> 'Parser':
    """Succeeds if the next element is not in cs. Fails at end of input."""
    return parser.memoized(
        ("none_of", _key(cs)),
        lambda: parser.satisfy(not_member_of(cs)).label(f'Expected none of "{_show(cs)}"'),
    )


# 4. string: Parses an exact run of elements
def string(parser: 'Parser', text: Sequence[Any]) -> 'Parser':
    """Parses the exact sequence text and returns the matched slice.

    Consumes len(text) elements at once; the empty text always matches.
    """
    def parse() -> 'Parser':
        state = parser.state
        actual = state.consume(len(text))
        if actual is not None and actual == text:
            return parser.match(actual, state.skip(len(text)))
        return parser.fail(f'Expected "{_show(text)}"')
    return parser.memoized(("string", _key(text)), parse)
