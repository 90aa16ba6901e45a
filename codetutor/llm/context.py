"""Assemble the message list sent to the completion provider for a guidance turn."""

from codetutor.db.models import VALID_ROLES
from codetutor.llm.token_counter import count_message_tokens, count_tokens


def normalize_history(history: list[dict]) -> list[dict]:
    """Keep user/assistant turns with content, in their original order.

    Client-supplied history is already restricted to those roles by the request
    schema. This pass guards history read back from storage and built by callers
    inside the service, so a stray role never reaches the provider as a system turn.
    """
    return [
        {"role": turn["role"], "content": turn["content"]}
        for turn in history
        if turn.get("role") in VALID_ROLES and turn.get("content")
    ]


def build_guidance_messages(
    system_prompt: str,
    history: list[dict],
    user_message: str,
    max_tokens: int = 0,
) -> list[dict]:
    """Build ``[system, *history, user]``.

    With ``max_tokens`` of 0 the whole history is replayed. A positive budget
    keeps the first prior turn plus as many recent turns as fit alongside the
    system prompt and the new submission.
    """
    system_msg = {"role": "system", "content": system_prompt}
    user_msg = {"role": "user", "content": user_message}
    turns = normalize_history(history)

    if max_tokens <= 0 or not turns:
        return [system_msg, *turns, user_msg]

    budget = max_tokens - count_tokens(system_prompt) - count_tokens(user_message) - 8
    first, rest = turns[0], turns[1:]
    first_tokens = count_message_tokens(first)

    # Build from the end (most recent turns first)
    recent: list[dict] = []
    used = 0
    for turn in reversed(rest):
        turn_tokens = count_message_tokens(turn)
        if used + turn_tokens + first_tokens > budget:
            break
        recent.insert(0, turn)
        used += turn_tokens

    if first_tokens <= budget - used:
        return [system_msg, first, *recent, user_msg]
    return [system_msg, *recent, user_msg]
