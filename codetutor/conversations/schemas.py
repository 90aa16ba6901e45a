"""Pydantic schemas for conversation requests and responses."""

from datetime import datetime

from pydantic import Field

from codetutor.messages.schemas import MessageOut
from codetutor.utils.validators import CamelModel


# --- Requests ---

class CreateConversationRequest(CamelModel):
    title: str | None = Field(default=None, max_length=255)


# --- Responses ---

class ConversationOut(CamelModel):
    id: int
    owner_user_id: int = Field(validation_alias="user_id")
    title: str
    created_at: datetime
    updated_at: datetime


class ConversationDetail(ConversationOut):
    messages: list[MessageOut]
