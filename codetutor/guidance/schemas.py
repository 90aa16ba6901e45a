"""Pydantic schemas for the AI guidance endpoints."""

from typing import Any

from pydantic import Field

from codetutor.messages.schemas import Role
from codetutor.utils.validators import CamelModel


class HistoryTurn(CamelModel):
    role: Role
    content: str


class GuidanceRequest(CamelModel):
    level: str = Field(min_length=1)
    user_message: str = Field(min_length=1)
    conversation_history: list[HistoryTurn] | None = None
    is_hint: bool = False
    hint_count: int = Field(default=0, ge=0)
    conversation_id: int | None = None


class GuidanceResponse(CamelModel):
    guidance: str
    hint_count: int
    degraded: bool = False


class TipsResponse(CamelModel):
    tips: str


class LevelOut(CamelModel):
    id: str
    title: str
    description: str
    difficulty: str


class CompletionRequest(CamelModel):
    level: str = Field(min_length=1)
    conversation_history: list[HistoryTurn] = Field(default_factory=list)
    hint_count: int = Field(default=0, ge=0)
    feedback: str = ""


class CompletionRecord(CamelModel):
    level: str
    level_title: str | None
    completed_at: str
    hint_count: int
    message_count: int
    feedback: str
    transcript: list[dict[str, Any]]
