"""Approximate token counting using tiktoken."""

from functools import lru_cache

import tiktoken


@lru_cache(maxsize=1)
def _encoding() -> tiktoken.Encoding:
    # cl100k_base is a reasonable approximation for the hosted models; loaded on first use
    return tiktoken.get_encoding("cl100k_base")


def count_tokens(text: str) -> int:
    return len(_encoding().encode(text))


def count_message_tokens(message: dict) -> int:
    return count_tokens(message.get("content", "")) + 4  # role + framing overhead
