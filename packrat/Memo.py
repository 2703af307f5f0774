import logging
from typing import Any, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

Key = Tuple[Hashable, int]


class MemoTable:
    """Packrat table: (matcher key, input offset) -> resulting Parser.

    One table belongs to one top-level parse. Entries are never invalidated
    since the input and its offsets never change during that parse.
    """

    def __init__(self):
        self._entries: Dict[Key, Any] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, key: Hashable, index: int) -> Optional[Any]:
        found = self._entries.get((key, index))
        if found is None:
            self.misses += 1
            return None
        self.hits += 1
        logger.debug("memo hit for %r at offset %d", key, index)
        return found

    def store(self, key: Hashable, index: int, parser: Any) -> None:
        self._entries[(key, index)] = parser

    def __contains__(self, entry: Key) -> bool:
        return entry in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoTable(entries={len(self)}, hits={self.hits}, misses={self.misses})"
