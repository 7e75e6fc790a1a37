"""Tests for size models."""

from unittest.mock import MagicMock, patch

import pytest

from chunkline.chunking import count_chars, resolve_counter, tiktoken_counter

pytestmark = pytest.mark.unit


def test_count_chars():
    assert count_chars("") == 0
    assert count_chars("héllo") == 5


def test_resolve_chars():
    assert resolve_counter("chars") is count_chars


def test_resolve_unknown():
    with pytest.raises(ValueError, match="Unknown tokenizer"):
        resolve_counter("bpe")


def test_tiktoken_counter_uses_model_encoding():
    encoding = MagicMock()
    encoding.encode.side_effect = lambda text: text.split()

    with patch("tiktoken.encoding_for_model", return_value=encoding) as for_model:
        count = tiktoken_counter("gpt-4o")

    for_model.assert_called_once_with("gpt-4o")
    assert count("three small words") == 3


def test_tiktoken_counter_falls_back_for_unknown_model():
    encoding = MagicMock(encode=lambda text: list(text))

    with patch("tiktoken.encoding_for_model", side_effect=KeyError("nope")), patch(
        "tiktoken.get_encoding", return_value=encoding
    ) as get_encoding:
        count = resolve_counter("tiktoken", "not-a-model")

    get_encoding.assert_called_once_with("cl100k_base")
    assert count("abcd") == 4
