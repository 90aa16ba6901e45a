"""Pydantic schemas for message requests and responses."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from codetutor.utils.validators import CamelModel

Role = Literal["user", "assistant"]


class AppendMessageRequest(CamelModel):
    role: Role
    content: str = Field(min_length=1)


class MessageOut(CamelModel):
    id: int
    conversation_id: int
    role: Role
    content: str
    created_at: datetime
