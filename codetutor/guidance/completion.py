"""Exportable record of a finished tutoring session. Built on request, never stored."""

from datetime import datetime, timezone

from codetutor.llm import prompts
from codetutor.llm.context import normalize_history


def build_completion_record(level: str, transcript: list[dict], hint_count: int, feedback: str = "") -> dict:
    level_info = prompts.get_level(level)
    turns = normalize_history(transcript)
    return {
        "level": level,
        "levelTitle": level_info.title if level_info else None,
        "completedAt": datetime.now(timezone.utc).isoformat(),
        "hintCount": hint_count,
        "messageCount": len(turns),
        "feedback": feedback.strip(),
        "transcript": turns,
    }
