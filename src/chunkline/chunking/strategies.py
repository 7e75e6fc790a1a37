"""
Splitting strategies.

Each strategy turns text into an ordered list of candidate chunk strings via
``split_into``. The chunk producer is strategy-agnostic and depends only on
that method.
"""

import re
from typing import List, Optional

from .merge import merged
from .models import SplitterConfig
from .recursive import split_recursive
from .separators import (
    MARKDOWN_SEPARATORS,
    LiteralSeparator,
    SeparatorLike,
    as_separator,
)

_SENTENCE = re.compile(r"[^.!?]+[.!?]+(?:\s+|\Z)")
_SPACE = LiteralSeparator(" ")


class SplitStrategy:
    """Base class for splitting strategies."""

    name = "base"

    def __init__(self, config: Optional[SplitterConfig] = None):
        self.config = config or SplitterConfig()

    def split_into(self, text: str) -> List[str]:
        raise NotImplementedError("split_into must be implemented by a splitting strategy")


class CharacterStrategy(SplitStrategy):
    """Split once on a single separator, then pack the pieces."""

    name = "character"

    def __init__(
        self,
        config: Optional[SplitterConfig] = None,
        separator: SeparatorLike = "\n\n",
    ):
        super().__init__(config)
        self.separator = as_separator(separator)

    def split_into(self, text: str) -> List[str]:
        return merged(self.separator.split(text), self.separator, self.config)


class RecursiveStrategy(SplitStrategy):
    """Recursive fallback over ``config.separators``."""

    name = "recursive"

    def split_into(self, text: str) -> List[str]:
        return split_recursive(text, self.config.separators, self.config)


class MarkdownStrategy(RecursiveStrategy):
    """Recursive strategy preferring headings, fences and rules over prose breaks."""

    name = "markdown"

    def __init__(self, config: Optional[SplitterConfig] = None):
        config = config or SplitterConfig()
        super().__init__(config.model_copy(update={"separators": MARKDOWN_SEPARATORS}))


class SentenceStrategy(SplitStrategy):
    """Pack whole sentences, joined by a single space."""

    name = "sentence"

    def split_into(self, text: str) -> List[str]:
        sentences = []
        pos = 0
        for match in _SENTENCE.finditer(text):
            # Unpunctuated text before a match stays with that sentence
            sentences.append(text[pos : match.end()].strip())
            pos = match.end()

        # Trailing text without terminal punctuation
        tail = text[pos:].strip()
        if tail:
            sentences.append(tail)

        return merged(sentences, _SPACE, self.config)


STRATEGIES = {
    strategy.name: strategy
    for strategy in (CharacterStrategy, RecursiveStrategy, MarkdownStrategy, SentenceStrategy)
}
