"""
Separators and the separator-preserving splitter.

A separator is either a literal string or a regular expression pattern.
Literal separators are consumed by the split and re-inserted when pieces are
joined back together. Pattern separators stay attached to the piece that
follows them, so markers such as ``"\\n## "`` remain with their section.
"""

import re
from typing import List, Union


class Separator:
    """Base class for the two separator variants."""

    @property
    def join_token(self) -> str:
        raise NotImplementedError

    def occurs_in(self, text: str) -> bool:
        raise NotImplementedError

    def split(self, text: str) -> List[str]:
        raise NotImplementedError


class LiteralSeparator(Separator):
    """Plain string delimiter. The empty string splits into characters."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    @property
    def join_token(self) -> str:
        return self.text

    def occurs_in(self, text: str) -> bool:
        return self.text in text

    def split(self, text: str) -> List[str]:
        if not self.text:
            return list(text)

        pieces = text.split(self.text)
        while pieces and pieces[-1] == "":
            pieces.pop()
        return pieces

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LiteralSeparator) and other.text == self.text

    def __hash__(self) -> int:
        return hash(("literal", self.text))

    def __repr__(self) -> str:
        return f"LiteralSeparator({self.text!r})"


class PatternSeparator(Separator):
    """Regular expression delimiter whose matches are kept as piece prefixes."""

    __slots__ = ("pattern",)

    def __init__(self, pattern: Union[str, "re.Pattern[str]"]):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def join_token(self) -> str:
        # No single literal form, so pieces are rejoined by newline
        return "\n"

    def occurs_in(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def split(self, text: str) -> List[str]:
        matches = [m for m in self.pattern.finditer(text) if m.end() > m.start()]

        parts = []
        pos = 0
        for match in matches:
            parts.append(text[pos : match.start()])
            pos = match.end()
        parts.append(text[pos:])
        while parts and parts[-1] == "":
            parts.pop()

        splits = []
        if parts and parts[0]:
            splits.append(parts[0])

        for i, match in enumerate(matches):
            part_index = i + 1
            if part_index >= len(parts):
                break

            marker = match.group(0)
            if marker.startswith("\n"):
                marker = marker[1:]
            piece = marker + parts[part_index]
            if piece:
                splits.append(piece)

        return splits

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PatternSeparator) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash(("pattern", self.pattern.pattern, self.pattern.flags))

    def __repr__(self) -> str:
        return f"PatternSeparator({self.pattern.pattern!r})"


SeparatorLike = Union[Separator, str, "re.Pattern[str]"]


def as_separator(value: SeparatorLike) -> Separator:
    """Coerce a raw string or compiled pattern into a Separator."""
    if isinstance(value, Separator):
        return value
    if isinstance(value, str):
        return LiteralSeparator(value)
    if isinstance(value, re.Pattern):
        return PatternSeparator(value)
    raise TypeError(f"Unsupported separator: {value!r}")


DEFAULT_SEPARATORS = (
    LiteralSeparator("\n\n"),  # paragraph break
    LiteralSeparator("\n"),  # line break
    LiteralSeparator(" "),  # space
)

MARKDOWN_SEPARATORS = (
    PatternSeparator(r"\n# "),  # h1
    PatternSeparator(r"\n## "),  # h2
    PatternSeparator(r"\n### "),  # h3
    PatternSeparator(r"\n#### "),  # h4
    PatternSeparator(r"\n##### "),  # h5
    PatternSeparator(r"\n###### "),  # h6
    PatternSeparator(r"```\n\n"),  # code block
    PatternSeparator(r"\n\n\*{3,}\n\n"),  # horizontal rule (***)
    PatternSeparator(r"\n\n-{3,}\n\n"),  # horizontal rule (---)
    PatternSeparator(r"\n\n_{3,}\n\n"),  # horizontal rule (___)
    LiteralSeparator("\n\n"),  # paragraph break
    LiteralSeparator("\n"),  # line break
    LiteralSeparator(" "),  # space
    LiteralSeparator(""),  # character (fallback)
)
