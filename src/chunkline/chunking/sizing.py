"""
Size models used to decide whether a candidate chunk fits.

A size model is any callable ``count(text) -> int``. Callers must treat the
result as a monotone size proxy only: nothing downstream assumes it scales
linearly with character count.
"""

from typing import Callable

TokenCounter = Callable[[str], int]


def count_chars(text: str) -> int:
    """Default size model: one unit per character."""
    return len(text)


def tiktoken_counter(model: str = "text-embedding-3-small") -> TokenCounter:
    """Build a size model that counts tokens with tiktoken for ``model``."""
    import tiktoken

    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError:
        # Unknown model name
        encoding = tiktoken.get_encoding("cl100k_base")

    def count_tokens(text: str) -> int:
        return len(encoding.encode(text))

    return count_tokens


def resolve_counter(tokenizer: str, model: str = "text-embedding-3-small") -> TokenCounter:
    """Map a tokenizer name (``chars`` or ``tiktoken``) to a size model."""
    if tokenizer == "chars":
        return count_chars
    if tokenizer == "tiktoken":
        return tiktoken_counter(model)
    raise ValueError(f"Unknown tokenizer: {tokenizer!r} (expected 'chars' or 'tiktoken')")
