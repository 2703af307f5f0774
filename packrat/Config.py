from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Settings shared by every State seeded from one input.

    context_depth: lines shown before and after the error line in diagnostics.
    marker: glyph drawn under the offending column.
    source_name: optional name prefixed to the diagnostic header.
    memoize: keep a packrat table for the primitive matchers.
    """
    context_depth: int = 2
    marker: str = "^"
    source_name: str = ""
    memoize: bool = False

    def __post_init__(self):
        if self.context_depth < 0:
            msg = f"context_depth must be >= 0, got {self.context_depth}"
            raise ValueError(msg)
        if not self.marker:
            msg = "marker must be a non-empty string"
            raise ValueError(msg)


DEFAULT_CONFIG = ParserConfig()
